"""
keycase — entry point.

Usage:
    python -m keycase build --config my_case.json --out build/
    python -m keycase build --out build/ --stl --json
    python -m keycase validate --config my_case.json
"""

import sys

from keycase.app import main


if __name__ == "__main__":
    sys.exit(main())
