#!/usr/bin/env python3
"""Approximate a Steiner tree for a YAML graph file.

Usage:
    python scripts/run_steiner.py graphs/cycle.yaml --targets 0 2 --show-paths
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from steiner_approx.cli import main


if __name__ == "__main__":
    sys.exit(main())
