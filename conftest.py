"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _default_company_env(monkeypatch):
    """Keep receipt headers independent of the developer's .env / shell."""
    monkeypatch.delenv("COMPANY_NAME", raising=False)
    monkeypatch.delenv("COMPANY_ADDRESS", raising=False)
