"""Allow ``python -m unity_template``."""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
