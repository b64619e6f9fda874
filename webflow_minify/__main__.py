import sys

from webflow_minify.cli import main

sys.exit(main())
