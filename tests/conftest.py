"""Pytest configuration for eel escape tests."""
from __future__ import annotations

import sys
from pathlib import Path

# Top-level modules live in the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
