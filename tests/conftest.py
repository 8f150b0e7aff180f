"""Pytest configuration.

The repository uses a flat `src/` layout imported as the `src.*` namespace. This conftest makes that
namespace importable when running `pytest` from a checkout without installing the project.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
