"""Allow running as `python -m supportforest`."""

import sys

from supportforest.cli import main

sys.exit(main())
