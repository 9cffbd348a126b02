"""Allow ``python -m cmdline_args``."""

import sys

from cmdline_args.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
