"""Run the interactive demo with ``python -m errordemo``."""

import sys

from errordemo.shell import main

if __name__ == "__main__":
    sys.exit(main())
