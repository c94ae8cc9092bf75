"""Allow running as ``python -m swiftup``."""

import sys

from swiftup.cli import main

sys.exit(main())
