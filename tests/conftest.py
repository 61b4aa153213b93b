from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _clean_tapevm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TAPEVM_EOF_POLICY", raising=False)
    monkeypatch.delenv("TAPEVM_ECHO_BANNER", raising=False)
