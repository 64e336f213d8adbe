"""Allow ``python -m header``."""

import sys

from header.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
