"""Allow running the tag cloud generator with ``python -m python_pkg.tag_cloud``."""

import sys

from python_pkg.tag_cloud.cli import main

sys.exit(main())
