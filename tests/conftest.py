"""Shared pytest configuration.

Log files and the custom clause store are redirected to a throwaway
directory before the package reads its settings.
"""

import os
import tempfile
from datetime import datetime, timezone

import pytest

_SCRATCH_DIR = tempfile.mkdtemp(prefix="contract_clarity_tests_")

os.environ.setdefault("LOG_DIR", os.path.join(_SCRATCH_DIR, "logs"))
os.environ.setdefault("CUSTOM_CLAUSES_FILE", os.path.join(_SCRATCH_DIR, "custom_clauses.json"))


@pytest.fixture
def now() -> datetime:
    """Fixed extraction time used by date tests."""
    return datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)
