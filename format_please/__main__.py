"""Allow ``python -m format_please``."""

import sys

from format_please.main import main

if __name__ == "__main__":
    sys.exit(main())
