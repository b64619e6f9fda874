"""The read, minify, splice and write sequence for one HTML file."""
import logging
from pathlib import Path
from typing import Union

from webflow_minify import html
from webflow_minify.css import CssMinifier
from webflow_minify.errors import (
    CssMinifyError,
    JsMinifyError,
    MissingStyleBlockError,
)
from webflow_minify.js import minify_js
from webflow_minify.report import Report
from webflow_minify.settings import Settings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def minify_html(document: str):
    """Minify the first style and script blocks of ``document``.

    Returns the minified document and the CSS warnings. Raises
    :class:`MissingStyleBlockError`, :class:`CssMinifyError` or
    :class:`JsMinifyError`.
    """
    document, comments = html.strip_comments(document)
    logger.debug("Removed %d HTML comment(s)", comments)

    style = html.find_style(document)
    if not style:
        raise MissingStyleBlockError()

    css_result = CssMinifier(Settings.CSS_LEVEL, Settings.CSS_FORMAT).minify(
        style.group(1)
    )
    if css_result.errors:
        raise CssMinifyError(css_result.errors)
    document = html.splice(document, style, "style", css_result.styles)

    script = html.find_script(document)
    if script:
        js_result = minify_js(script.group(1), Settings.JS_OPTIONS)
        if js_result.error:
            raise JsMinifyError(js_result.error)
        document = html.splice(document, script, "script", js_result.code)
    else:
        logger.debug("No <script> block, skipping JavaScript")

    return html.collapse_blank_lines(document), css_result.warnings


def minify_file(input_path: PathLike, output_path: PathLike) -> Report:
    """Minify ``input_path`` into ``output_path`` and return the size report.

    Nothing is written unless every minification step succeeds.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    document = input_path.read_text(encoding="utf-8")
    minified, warnings = minify_html(document)

    output_path.write_text(minified, encoding="utf-8")
    logger.debug("Wrote %s", output_path)

    return Report(
        original_size=input_path.stat().st_size,
        minified_size=len(minified),
        output_path=str(output_path),
        max_chars=Settings.MAX_CHARS,
        css_warnings=warnings,
    )
