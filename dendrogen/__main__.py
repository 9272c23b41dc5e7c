"""Allow ``python -m dendrogen``."""

import sys

from .cli import main

sys.exit(main())
