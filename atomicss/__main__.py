"""Module entry-point for ``python -m atomicss``."""

import sys

from atomicss.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
