"""
Development runner for NimFinder.

Runs the application from a source checkout without installing it.
"""

import os
import sys

# Make the src/ packages importable when run from the repository root
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from gui.main import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
