#!/usr/bin/env python3
"""Run the preview server."""

import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from preview_hub.cli import main


if __name__ == "__main__":
    sys.exit(main())
