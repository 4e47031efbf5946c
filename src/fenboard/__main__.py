"""Allow ``python -m fenboard``."""

from __future__ import annotations

import sys

from fenboard.app import main

if __name__ == "__main__":
    sys.exit(main())
