import pytest
from fastapi.testclient import TestClient

from gamekit.app import create_app
from gamekit.config import settings
from gamekit.globals import template_catalog


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_DIR", str(tmp_path / "db"))
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    monkeypatch.setattr(template_catalog, "file_path", str(tmp_path / "missing.csv"))
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
