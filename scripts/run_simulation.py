#!/usr/bin/env python
"""
Door Bayes filter launcher.

Usage:
------
# Fixed five-step run
python scripts/run_simulation.py

# With per-iteration diagnostics on stderr
python scripts/run_simulation.py --verbose
"""

import sys
from pathlib import Path

# Add src/ to path so the script runs from a plain checkout
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from doorbayes.experiment.cli import main

if __name__ == "__main__":
    sys.exit(main())
