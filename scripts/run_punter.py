from __future__ import annotations

import sys

from punter.cli import main


if __name__ == "__main__":
    sys.exit(main())
