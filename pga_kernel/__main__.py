"""Run the kernel self-checks: ``python -m pga_kernel``."""

import sys

from .checks.runner import main

if __name__ == "__main__":
    sys.exit(main())
