"""Allow ``python -m atlas_clock``."""

import sys

from atlas_clock.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
