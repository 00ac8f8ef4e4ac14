"""Allow ``python -m shavtzak``."""

import sys

from shavtzak.cli import main

sys.exit(main())
