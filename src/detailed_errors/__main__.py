"""
Entry point for running the detailed-errors CLI as a module.

Usage:
    python -m detailed_errors check 'if a==1'
"""

import sys

from detailed_errors.cli import main

if __name__ == "__main__":
    sys.exit(main())
