"""Run the Rephrazer CLI: ``python -m rephrazer``."""

import sys

from .cli import main

sys.exit(main())
