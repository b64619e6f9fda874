"""JavaScript minification built on ``minify_html`` and ``rjsmin``.

With mangling or dead-code elimination enabled, the script goes through the
JavaScript engine bundled with ``minify_html``. It renames local bindings,
drops unreachable code and unused locals, and leaves top-level bindings and
the number of function arguments alone. Otherwise ``rjsmin`` only strips
comments and whitespace, renaming nothing.

Before minifying, the source is run through a small lexical scanner that
reports unterminated literals and unbalanced brackets the way a parser
would. The same scanner locates ``debugger`` statements in the output.
"""
import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import minify_html
import rjsmin

logger = logging.getLogger(__name__)

SCRIPT_BODY_RE = re.compile(r"<script>([\s\S]*)</script>")
WORD_RE = re.compile(r"[\w$]+")
STATEMENT_HEADS = frozenset({"if", "while", "for", "with"})
# A "/" after one of these starts a regular expression rather than a division.
REGEX_AFTER_PUNCT = frozenset("(,=:[!&|?{};+-*%<>~^}")
REGEX_AFTER_WORDS = frozenset(
    {
        "return", "typeof", "instanceof", "in", "of", "new", "delete",
        "void", "throw", "case", "do", "else", "yield", "await",
    }
)
OPENERS = {")": "(", "]": "[", "}": "{"}
STATEMENT_START = (None, "{", ";")


@dataclass(frozen=True)
class JsOptions:
    """Compression, mangling and output flags for :func:`minify_js`.

    ``keep_fargs`` keeps unused function arguments in place and
    ``keep_fnames``, ``keep_classnames`` and ``keep_infinity`` spare names
    and the ``Infinity`` literal from rewriting.
    """

    dead_code: bool = True
    mangle: bool = True
    drop_console: bool = False
    drop_debugger: bool = True
    keep_classnames: bool = False
    keep_fargs: bool = True
    keep_fnames: bool = False
    keep_infinity: bool = False
    toplevel: bool = False
    # Keep /*! ... */ license comments; every other comment is always removed.
    comments: bool = False


@dataclass
class JsResult:
    code: Optional[str] = None
    error: Optional[str] = None


class JsSyntaxError(ValueError):
    def __init__(self, message: str, source: str, index: int) -> None:
        line = source.count("\n", 0, index) + 1
        column = index - source.rfind("\n", 0, index)
        super().__init__(f"{message} (line {line}, column {column})")


def _string_end(source: str, i: int) -> int:
    quote = source[i]
    j = i + 1
    while j < len(source):
        ch = source[j]
        if ch == "\\":
            j += 3 if source.startswith("\r\n", j + 1) else 2
            continue
        if ch == quote:
            return j + 1
        if ch == "\n":
            break
        j += 1
    raise JsSyntaxError("Unterminated string literal", source, i)


def _template_end(source: str, i: int, start: int) -> Tuple[int, bool]:
    """Scan template text from ``i``; return (end, opened_interpolation)."""
    while i < len(source):
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "`":
            return i + 1, False
        if source.startswith("${", i):
            return i + 2, True
        i += 1
    raise JsSyntaxError("Unterminated template literal", source, start)


def _regex_end(source: str, i: int) -> int:
    j = i + 1
    in_class = False
    while j < len(source):
        ch = source[j]
        if ch == "\\":
            j += 2
            continue
        if ch == "\n":
            break
        if ch == "[":
            in_class = True
        elif ch == "]":
            in_class = False
        elif ch == "/" and not in_class:
            flags = WORD_RE.match(source, j + 1)
            return flags.end() if flags else j + 1
        j += 1
    raise JsSyntaxError("Unterminated regular expression", source, i)


def _tokens(source: str) -> Iterator[Tuple[str, int, int]]:
    """Yield ``(kind, start, end)`` for every token in ``source``.

    Kinds are ``comment``, ``string``, ``template``, ``regex``, ``word``
    and ``punct``. Raises :class:`JsSyntaxError` on malformed input.
    """
    brackets = []
    previous = None
    i = 0
    while i < len(source):
        ch = source[i]
        if ch.isspace():
            i += 1
            continue
        if source.startswith("//", i):
            end = source.find("\n", i)
            end = len(source) if end == -1 else end
            yield "comment", i, end
            i = end
            continue
        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end == -1:
                raise JsSyntaxError("Unterminated comment", source, i)
            yield "comment", i, end + 2
            i = end + 2
            continue
        if ch in "'\"":
            end = _string_end(source, i)
            yield "string", i, end
            previous = "literal"
            i = end
            continue
        if ch == "`" or (ch == "}" and brackets and brackets[-1][0] == "${"):
            start = i if ch == "`" else brackets.pop()[1]
            end, interpolation = _template_end(source, i + 1, start)
            yield "template", i, end
            if interpolation:
                brackets.append(("${", start, False))
                previous = "{"
            else:
                previous = "literal"
            i = end
            continue
        if ch == "/" and (
            previous is None
            or previous in REGEX_AFTER_PUNCT
            or previous in REGEX_AFTER_WORDS
        ):
            end = _regex_end(source, i)
            yield "regex", i, end
            previous = "literal"
            i = end
            continue
        word = WORD_RE.match(source, i)
        if word:
            yield "word", i, word.end()
            previous = word.group()
            i = word.end()
            continue
        yield "punct", i, i + 1
        head = ch == "(" and previous in STATEMENT_HEADS
        previous = ch
        if ch in "([{":
            brackets.append((ch, i, head))
        elif ch in OPENERS:
            if not brackets or brackets[-1][0] != OPENERS[ch]:
                raise JsSyntaxError(f"Unexpected '{ch}'", source, i)
            if brackets.pop()[2]:
                # a statement follows "if (...)", so "/" opens a regex
                previous = ";"
        i += 1
    if brackets:
        bracket, index, _ = brackets[-1]
        raise JsSyntaxError(f"Unclosed '{bracket}'", source, index)


def _drop_debugger(code: str) -> str:
    tokens = list(_tokens(code))

    def text(index):
        if 0 <= index < len(tokens):
            _, start, end = tokens[index]
            return code[start:end]
        return None

    pieces = []
    last = 0
    for index, (kind, start, end) in enumerate(tokens):
        if kind != "word" or code[start:end] != "debugger":
            continue
        before, after = text(index - 1), text(index + 1)
        # property access, object key or method name
        if before == "." or after in (":", "("):
            continue
        replacement = ""
        if before in STATEMENT_START:
            if after == ";":
                end = tokens[index + 1][2]
        elif after != ";":
            replacement = ";"
        pieces.append(code[last:start])
        pieces.append(replacement)
        last = end
    pieces.append(code[last:])
    return "".join(pieces)


def validate(source: str) -> Optional[str]:
    """Return a syntax error message for ``source``, or ``None``."""
    try:
        for _ in _tokens(source):
            pass
    except JsSyntaxError as exc:
        return str(exc)
    return None


def _license_comments(source: str) -> List[str]:
    return [
        source[start:end]
        for kind, start, end in _tokens(source)
        if kind == "comment" and source.startswith("/*!", start)
    ]


def _compresses(options: JsOptions) -> bool:
    """Whether ``options`` allow the renaming, dead-code dropping engine."""
    if not (options.mangle or options.dead_code):
        return False
    # the engine cannot spare single names or literals from its rewrites
    return not (options.keep_fnames or options.keep_classnames or options.keep_infinity)


def _unsupported(options: JsOptions) -> Iterator[str]:
    if options.drop_console:
        yield "drop_console"
    if options.toplevel:
        yield "toplevel"
    if not options.keep_fargs:
        yield "keep_fargs=False"


def _compress(source: str) -> str:
    minified = minify_html.minify(
        f"<script>{source}</script>", minify_js=True, keep_closing_tags=True
    )
    match = SCRIPT_BODY_RE.search(minified)
    return match.group(1) if match else ""


def minify_js(source: str, options: JsOptions = JsOptions()) -> JsResult:
    error = validate(source)
    if error:
        return JsResult(error=error)

    for name in _unsupported(options):
        logger.warning("JS option %s is not supported, ignoring it", name)

    if _compresses(options):
        code = _compress(source)
    else:
        code = rjsmin.jsmin(source, keep_bang_comments=False)

    try:
        if options.drop_debugger:
            code = _drop_debugger(code)
    except JsSyntaxError as exc:
        return JsResult(error=f"Cannot read minified output: {exc}")

    if options.comments:
        code = "\n".join(_license_comments(source) + [code])

    logger.debug("JS: %d -> %d characters", len(source), len(code))
    return JsResult(code=code)
