"""Text-level operations on the HTML document.

Blocks are located with regular expressions and spliced back by position,
so only the first ``<style>`` and the first ``<script>`` are ever touched.
"""
import re
from typing import Optional, Tuple

COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
STYLE_RE = re.compile(r"<style>([\s\S]*?)</style>")
SCRIPT_RE = re.compile(r"<script>([\s\S]*?)</script>")
BLANK_LINES_RE = re.compile(r"\n\s*\n")


def strip_comments(html: str) -> Tuple[str, int]:
    """Remove every ``<!-- ... -->`` span and return the text and count."""
    return COMMENT_RE.subn("", html)


def find_style(html: str) -> Optional[re.Match]:
    return STYLE_RE.search(html)


def find_script(html: str) -> Optional[re.Match]:
    return SCRIPT_RE.search(html)


def splice(html: str, match: re.Match, tag: str, content: str) -> str:
    """Replace the span of ``match`` with ``<tag>content</tag>``.

    The new content is inserted literally; backslashes and group
    references in minified code are not interpreted.
    """
    return f"{html[:match.start()]}<{tag}>{content}</{tag}>{html[match.end():]}"


def collapse_blank_lines(html: str) -> str:
    """Replace each blank-line run with a single newline (one pass)."""
    return BLANK_LINES_RE.sub("\n", html)
