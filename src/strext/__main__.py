"""Entry point for ``python -m strext``."""

import sys

from strext.cli import main

if __name__ == "__main__":
    sys.exit(main())
