"""
Shared fixtures for docdiff tests.
"""

import pytest

from docdiff.core.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from default limits."""
    for name in ("DOCDIFF_MAX_BYTES", "DOCDIFF_MAX_LINES", "DOCDIFF_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
