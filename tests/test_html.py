from __future__ import annotations

from webflow_minify import html


def test_strip_comments_everywhere() -> None:
    text = "<p>a<!-- one --></p>\n<!--\nmulti\nline\n--><b>b</b>"
    stripped, count = html.strip_comments(text)
    assert stripped == "<p>a</p>\n<b>b</b>"
    assert count == 2


def test_strip_comments_is_non_greedy() -> None:
    stripped, _ = html.strip_comments("<!-- a -->keep<!-- b -->")
    assert stripped == "keep"


def test_find_style_matches_first_block_only() -> None:
    text = "<style>.a{}</style><style>.b{}</style>"
    match = html.find_style(text)
    assert match.group(1) == ".a{}"
    assert match.start() == 0


def test_find_style_requires_plain_tag() -> None:
    assert html.find_style('<style type="text/css">.a{}</style>') is None


def test_find_script_absent() -> None:
    assert html.find_script("<style>.a{}</style>") is None


def test_splice_inserts_content_literally() -> None:
    text = "<div><script>old</script></div>"
    match = html.find_script(text)
    assert html.splice(text, match, "script", r"var s='\1';") == (
        r"<div><script>var s='\1';</script></div>"
    )


def test_collapse_blank_lines() -> None:
    assert html.collapse_blank_lines("a\n\nb") == "a\nb"
    assert html.collapse_blank_lines("a\n   \n\t\n\nb") == "a\nb"
    assert html.collapse_blank_lines("a\n  b") == "a\n  b"
