#!/usr/bin/env python3
"""Log Viewer CLI wrapper.

Usage:
    python scripts/view_logs.py [--file NAME] [--level LEVEL] [--search TERM] [--tail N] [--list]
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from doc2code.management.log_viewer import main

if __name__ == "__main__":
    sys.exit(main())
