"""Allow ``python -m kubediscover``."""

import sys

from kubediscover.cli import main

sys.exit(main())
