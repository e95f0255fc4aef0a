"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add the src directory to sys.path so that 'sqrt_average' can be imported
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
