"""Allow ``python -m vehicle_studies``."""

import sys

from vehicle_studies.cli import main

sys.exit(main())
