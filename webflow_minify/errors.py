"""Exceptions raised by the minify pipeline."""
from typing import List


class MinifyError(RuntimeError):
    """Base class for fatal pipeline failures."""


class MissingStyleBlockError(MinifyError):
    def __init__(self) -> None:
        super().__init__("No <style> tags found in the HTML file")


class CssMinifyError(MinifyError):
    """Raised when the CSS minifier reports one or more errors."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__("CSS minification errors: " + "; ".join(self.errors))


class JsMinifyError(MinifyError):
    """Raised when the JavaScript minifier rejects the script block."""

    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(f"JavaScript minification error: {error}")
