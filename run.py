#!/usr/bin/env python3
"""Executable script to run the square root averaging tool.

This is a convenience wrapper for development checkouts.
For production use, install the package and use the 'sqrt-average' command instead.
"""

import sys
from pathlib import Path

# Add src directory to Python path for development mode
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from sqrt_average.main import main

if __name__ == "__main__":
    sys.exit(main())
