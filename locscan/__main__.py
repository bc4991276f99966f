"""
Entry point for running locscan as a module.

Usage:
    python -m locscan locate ./src
    python -m locscan offset Sample.kt 42
"""

import sys
from locscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
