"""Run the trafficlog command line: ``python -m trafficlog``."""

import sys

from trafficlog.cli import main

sys.exit(main())
