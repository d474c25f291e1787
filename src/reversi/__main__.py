"""Allow ``python -m reversi``."""

import sys

from reversi.app import main

sys.exit(main())
