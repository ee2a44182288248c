from __future__ import annotations

"""Centralized path utilities for the project.

Absolute `Path` objects to the directories the runner reads from and
writes to, so no module hard-codes a relative path.
"""

from pathlib import Path


# The `portfolio` package is one level below the project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Optional replacement content documents (YAML/JSON)
CONTENT_DIR = PROJECT_ROOT / "content"
LOGS_DIR = PROJECT_ROOT / "logs"
