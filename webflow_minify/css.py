"""CSS minification built on ``rcssmin`` and ``minify_html``.

Level 1 is plain ``rcssmin`` output. Level 2 ("advanced") hands the
stylesheet to the CSS optimizer bundled with ``minify_html``, which drops
duplicate and overridden declarations and empty rules, merges rules and
shortens values.

Neither library reports problems, so the source is scanned first: broken
structure is an error, a declaration without a property name is a warning.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List, Tuple

import minify_html
import rcssmin

logger = logging.getLogger(__name__)

LEVELS = (1, 2)
FORMATS = (False, "keep-breaks")

STYLE_BODY_RE = re.compile(r"<style>([\s\S]*)</style>")


@dataclass
class CssResult:
    styles: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _position(text: str, index: int) -> str:
    line = text.count("\n", 0, index) + 1
    column = index - text.rfind("\n", 0, index)
    return f"line {line}, column {column}"


def _skip_string(text: str, i: int) -> int:
    """Return the index after the string starting at ``i``, or -1."""
    quote = text[i]
    i += 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return -1


def _validate(source: str) -> Tuple[List[str], List[str]]:
    errors: List[str] = []
    warnings: List[str] = []
    opened = []
    parens = 0
    # first character of the current declaration and whether it had a colon
    start = None
    colon = False
    i = 0
    while i < len(source):
        ch = source[i]
        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end == -1:
                errors.append(f"Unterminated comment at {_position(source, i)}")
                return errors, warnings
            i = end + 2
            continue
        if start is None and not ch.isspace():
            start = i
        if ch in "\"'":
            end = _skip_string(source, i)
            if end == -1:
                errors.append(f"Unterminated string at {_position(source, i)}")
                return errors, warnings
            i = end
            continue
        if ch == "\\":
            i += 2
            continue
        if ch == "(":
            parens += 1
        elif ch == ")":
            parens = max(parens - 1, 0)
        elif ch == ":" and parens == 0:
            colon = True
        elif ch in "{}" or (ch == ";" and parens == 0):
            if (
                ch != "{"
                and opened
                and start is not None
                and start != i
                and not colon
                and source[start] != "@"
            ):
                declaration = source[start:i].strip()
                warnings.append(
                    f'Invalid property "{declaration}" at {_position(source, start)}.'
                )
            if ch == "{":
                opened.append(i)
            elif ch == "}":
                if opened:
                    opened.pop()
                else:
                    errors.append(f"Unexpected '}}' at {_position(source, i)}")
            parens = 0
            start = None
            colon = False
        i += 1
    for index in opened:
        errors.append(f"Unclosed '{{' at {_position(source, index)}")
    return errors, warnings


def _optimize(styles: str) -> str:
    minified = minify_html.minify(
        f"<style>{styles}</style>", minify_css=True, keep_closing_tags=True
    )
    match = STYLE_BODY_RE.search(minified)
    return match.group(1) if match else ""


def _keep_breaks(styles: str) -> str:
    """Put every top-level rule or statement on its own line."""
    parts = []
    depth = 0
    last = 0
    i = 0
    while i < len(styles):
        ch = styles[i]
        if ch in "\"'":
            end = _skip_string(styles, i)
            i = len(styles) if end == -1 else end
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                parts.append(styles[last:i + 1])
                last = i + 1
        elif ch == ";" and depth == 0:
            parts.append(styles[last:i + 1])
            last = i + 1
        i += 1
    parts.append(styles[last:])
    return "\n".join(part for part in parts if part)


class CssMinifier:
    """Minify stylesheets with a fixed optimization level and output format.

    Parameters
    ----------
    level: int
        ``1`` strips comments and whitespace, ``2`` also restructures rules.
    format: bool | str
        ``False`` for a single line or ``"keep-breaks"`` to end each
        top-level rule with a newline.
    """

    def __init__(self, level: int = 2, format=False) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unsupported CSS optimization level: {level!r}")
        if format not in FORMATS:
            raise ValueError(f"Unsupported CSS format: {format!r}")
        self.level = level
        self.format = format

    def minify(self, source: str) -> CssResult:
        errors, warnings = _validate(source)
        if errors:
            return CssResult("", errors, warnings)

        styles = rcssmin.cssmin(source, keep_bang_comments=False)
        if self.level == 2:
            styles = _optimize(styles)
        if self.format:
            styles = _keep_breaks(styles)

        logger.debug("CSS: %d -> %d characters", len(source), len(styles))
        return CssResult(styles, [], warnings)
