"""Entrypoint module for `python -m momo_collect`."""

import sys

from momo_collect.main import main

if __name__ == "__main__":
    sys.exit(main())
