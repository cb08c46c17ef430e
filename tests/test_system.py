# SPDX-License-Identifier: Apache-2.0
"""System router API tests."""
from fastapi.testclient import TestClient

from ceremony import __version__
from ceremony.main import app

client = TestClient(app)


def test_health():
    r = client.get("/system/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_version():
    r = client.get("/system/version")
    assert r.status_code == 200
    assert r.json()["version"] == __version__
