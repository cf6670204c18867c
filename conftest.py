"""Root conftest.py: makes the local statewalk package take precedence over any installed copy."""

from __future__ import annotations

import sys
from pathlib import Path

# `import statewalk` resolves to src/ even when an older build is installed.
_src_root = str(Path(__file__).parent / "src")
if _src_root not in sys.path:
    sys.path.insert(0, _src_root)
