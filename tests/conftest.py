"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _qtcmd_env_defaults(monkeypatch):
    """Keep QTCMD_* settings from the developer's shell out of the tests."""

    for key in (
        "QTCMD_API_HOST",
        "QTCMD_TIMEOUT",
        "QTCMD_VERIFY_SSL",
        "QTCMD_MAX_RETRIES",
        "QTCMD_LOG_LEVEL",
        "QTCMD_LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
