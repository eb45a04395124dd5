"""Allow ``python -m alinea``."""

import sys

from alinea.cli import main

sys.exit(main())
