from __future__ import annotations

"""
Main Entry Point.

Allows running the tool as a script (python src/release_tracking/main.py)
as well as through the installed console script.
"""

import os
import sys

# Make the package importable when executed from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def main() -> int:
    from release_tracking.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
