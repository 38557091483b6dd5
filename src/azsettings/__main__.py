"""Allow ``python -m azsettings``."""

from __future__ import annotations

import sys

from azsettings.cli import main

if __name__ == "__main__":
    sys.exit(main())
