"""Allow `python -m typedl10n`."""

import sys

from typedl10n.cli import main

sys.exit(main())
