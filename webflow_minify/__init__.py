"""Minify the inline CSS and JavaScript of a Webflow embed."""
from webflow_minify.pipeline import minify_file, minify_html

__all__ = ["minify_file", "minify_html"]
