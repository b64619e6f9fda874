"""
This module contains all the general minifier settings.
"""

from webflow_minify.js import JsOptions


class Settings:
    """
    Configuration settings for the Webflow embed minifier.

    Attributes:
        APP_NAME (str): Name of the tool.
        APP_VERSION (str): Version of the tool.
        INPUT_FILE (str): Source HTML file, relative to the working directory.
        OUTPUT_FILE (str): Minified HTML file, always overwritten.
        MAX_CHARS (int): Webflow's custom code character limit.
        CSS_LEVEL (int): CSS optimization level (1 = whitespace, 2 = advanced).
        CSS_FORMAT (bool | str): False for a single line, "keep-breaks" for one rule per line.
        JS_OPTIONS (JsOptions): Compression, mangling and format flags for scripts.
        LOG_LEVEL (str): Level of the console logger.
        LOG_TO_FILE (bool): Toggle logging to file feature.
        LOG_FOLDER_ROOT (str): Root path of the log folder.
        LOG_FILE_ROOT (str): Root path of the log file.
    """

    # Application Configuration
    APP_NAME = "webflow-minify"
    APP_VERSION = "1.0.0"

    # Files
    INPUT_FILE = "webflow-embed.html"
    OUTPUT_FILE = "webflow-embed.min.html"
    MAX_CHARS = 50000  # Webflow's limit

    # CSS Configuration
    CSS_LEVEL = 2
    CSS_FORMAT = False

    # JavaScript Configuration
    JS_OPTIONS = JsOptions(
        dead_code=True,
        mangle=True,
        drop_console=False,
        drop_debugger=True,
        keep_classnames=False,
        keep_fargs=True,
        keep_fnames=False,
        keep_infinity=False,
        toplevel=False,
        comments=False,
    )

    # Logging Configuration
    LOG_LEVEL = "INFO"
    LOG_TO_FILE = False
    LOG_FOLDER_ROOT = "log/"
    LOG_FILE_ROOT = LOG_FOLDER_ROOT + "minify.log"
