"""Command line entry point: minify ``webflow-embed.html`` for Webflow."""
import sys

from webflow_minify.errors import CssMinifyError, JsMinifyError, MissingStyleBlockError
from webflow_minify.log import setup_logging
from webflow_minify.pipeline import minify_file
from webflow_minify.settings import Settings


def main() -> int:
    logger = setup_logging()
    logger.debug("%s %s", Settings.APP_NAME, Settings.APP_VERSION)
    print("🔧 Minifying for Webflow...\n")

    try:
        report = minify_file(Settings.INPUT_FILE, Settings.OUTPUT_FILE)
    except MissingStyleBlockError:
        logger.error("❌ No <style> tags found in the HTML file")
        return 1
    except CssMinifyError as exc:
        logger.error("❌ CSS minification errors:")
        for error in exc.errors:
            logger.error("   %s", error)
        return 1
    except JsMinifyError as exc:
        logger.error("❌ JavaScript minification error: %s", exc.error)
        return 1
    except Exception as exc:
        logger.debug("Unhandled failure", exc_info=True)
        logger.error("❌ Error: %s", exc)
        return 1

    for line in report.render():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
