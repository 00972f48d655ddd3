"""Console entry-point: ``python -m grid_identicon``."""

import sys

from grid_identicon.cli import main

if __name__ == "__main__":
    sys.exit(main())
