"""Shared fixtures: a fake store executor, a mocked session and a test client."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.core.security import create_token
from app.database import get_db
from app.main import app
from app.services import company_service, job_service


class FakeStore:
    """Stands in for run_query: records every statement and replays queued results."""

    def __init__(self):
        self.calls = []
        self.results = []

    def queue(self, *results):
        self.results.extend(results)

    def __call__(self, db, sql, values=()):
        self.calls.append((" ".join(sql.split()), list(values)))
        if not self.results:
            return []
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def store(monkeypatch):
    fake = FakeStore()
    monkeypatch.setattr(company_service, "run_query", fake)
    monkeypatch.setattr(job_service, "run_query", fake)
    return fake


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def client(db, store):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {create_token('u1')}"}


@pytest.fixture
def company_row():
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    }


@pytest.fixture
def job_row():
    return {
        "id": 1,
        "title": "J1",
        "salary": 100,
        "equity": "0.1",
        "company_handle": "c1",
    }
