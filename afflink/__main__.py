"""Entry point for ``python -m afflink``."""

import sys

from afflink.cli import main

if __name__ == "__main__":
    sys.exit(main())
