"""Allow `python -m concatenate`."""

import sys

from concatenate.cli import main

sys.exit(main())
