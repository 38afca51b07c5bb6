"""Simple launcher for the route management console.

Runs the interactive menu without installing the package.
"""

from __future__ import annotations

import sys

from city_routes.cli import main

if __name__ == "__main__":
    sys.exit(main())
