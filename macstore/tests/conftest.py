from __future__ import annotations

from pathlib import Path

import pytest

from macstore.config import settings


@pytest.fixture(autouse=True)
def _isolate_data_dir(monkeypatch, tmp_path):
    """Redirect the default data directory to a temp directory.

    Keeps tests from creating /var/lib/cni/networks.
    """
    monkeypatch.setattr(settings, "data_dir", str(tmp_path / "networks"))
    yield


@pytest.fixture
def record_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "records"
    directory.mkdir()
    return directory
