from __future__ import annotations

import pytest

from webflow_minify.css import CssMinifier


def test_duplicate_declarations_collapsed() -> None:
    result = CssMinifier().minify(".a{color:red; color:red;}")
    assert result.styles == ".a{color:red}"
    assert result.errors == []
    assert result.warnings == []


def test_overridden_declaration_keeps_last_value() -> None:
    styles = CssMinifier().minify(".a { display: none; display: block }").styles
    assert styles.endswith("display:block}")


def test_empty_rules_removed() -> None:
    styles = CssMinifier().minify(".a {}\n.b { margin: 0 }").styles
    assert ".a" not in styles
    assert ".b{margin:0}" in styles


def test_font_faces_not_merged() -> None:
    source = (
        "@font-face { font-family: A; src: url(a.woff) }\n"
        "@font-face { font-family: B; src: url(b.woff) }"
    )
    styles = CssMinifier().minify(source).styles
    assert styles.count("@font-face") == 2
    assert "a.woff" in styles
    assert "b.woff" in styles


def test_page_rules_not_merged() -> None:
    source = "@page :first { margin: 1in }\n@page :left { margin: 2in }"
    styles = CssMinifier().minify(source).styles
    assert styles.count("@page") == 2


def test_custom_properties_are_case_sensitive() -> None:
    styles = CssMinifier().minify(".a { --Gap: 1px; --gap: 1px }").styles
    assert "--Gap" in styles
    assert "--gap" in styles


def test_media_blocks_optimized() -> None:
    source = """
    @media (max-width: 600px) {
        .a { color: red; color: red }
        .b { }
    }
    """
    styles = CssMinifier().minify(source).styles
    assert styles.startswith("@media")
    assert styles.count("color:red") == 1
    assert ".b" not in styles


def test_invalid_declaration_warns() -> None:
    result = CssMinifier().minify(".a { color: red; bogus }")
    assert result.errors == []
    assert result.warnings == ['Invalid property "bogus" at line 1, column 18.']


def test_colons_in_parens_and_selectors_do_not_warn() -> None:
    source = "a:hover { background: url(data:image/png;base64,AAAA) }"
    result = CssMinifier().minify(source)
    assert result.warnings == []
    assert "data:image/png;base64,AAAA" in result.styles


def test_comments_removed() -> None:
    styles = CssMinifier().minify("/*! license */\n/* note */ .a { color: red }").styles
    assert "license" not in styles
    assert "note" not in styles


def test_minification_is_idempotent() -> None:
    source = """
    .a { color: red; margin: 0 auto }
    .b { padding: 1px }
    @media (min-width: 10em) { .c { display: none } }
    """
    minifier = CssMinifier()
    once = minifier.minify(source).styles
    assert minifier.minify(once).styles == once


def test_keep_breaks_format() -> None:
    result = CssMinifier(format="keep-breaks").minify(".a { margin: 0 } .b { padding: 1px }")
    assert result.styles == ".a{margin:0}\n.b{padding:1px}"


def test_level_one_skips_restructuring() -> None:
    styles = CssMinifier(level=1).minify(".a { color: red }\n.a { color: red }").styles
    assert styles.count(".a") == 2


@pytest.mark.parametrize(
    "source, message",
    [
        (".a { color: red", "Unclosed '{' at line 1, column 4"),
        (".a { color: red } }", "Unexpected '}' at line 1, column 19"),
        (".a { color: red }\n/* open", "Unterminated comment at line 2, column 1"),
        ('.a { content: "x }', "Unterminated string at line 1, column 15"),
    ],
)
def test_structural_errors(source: str, message: str) -> None:
    result = CssMinifier().minify(source)
    assert result.errors == [message]
    assert result.styles == ""


def test_unsupported_options() -> None:
    with pytest.raises(ValueError):
        CssMinifier(level=3)
    with pytest.raises(ValueError):
        CssMinifier(format="beautify")
