#!/usr/bin/env python3
"""
Script to print Pascal's triangle and related binomial values.

Run ``python pascal_triangle.py --help`` for the options.
"""

import sys

from pascal.cli import main


if __name__ == "__main__":
    sys.exit(main())
