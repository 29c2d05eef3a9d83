from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Point the engine at a throwaway sqlite file before anything imports jobly.database.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ.setdefault("ADMIN_EMAILS", '["admin@example.com"]')
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "DEBUG"


COMPANIES = [
    {"handle": "c1", "name": "C1", "description": "Desc1", "num_employees": 1, "logo_url": "http://c1.img"},
    {"handle": "c2", "name": "C2", "description": "Desc2", "num_employees": 2, "logo_url": "http://c2.img"},
    {"handle": "c3", "name": "C3", "description": "Desc3", "num_employees": 3, "logo_url": "http://c3.img"},
]

JOBS = [
    {"title": "j1", "salary": 100000, "equity": 0.1, "company_handle": "c1"},
    {"title": "j2", "salary": 75000, "equity": 0, "company_handle": "c2"},
    {"title": "j3", "salary": 50000, "equity": None, "company_handle": "c3"},
]


@pytest.fixture()
def seeded_db() -> dict[str, int]:
    """Recreate all tables and seed companies c1..c3 and jobs j1..j3.

    Returns a title -> id map for the seeded jobs.
    """

    from jobly.database import Base, SessionLocal, engine
    from jobly.models import Company, Job

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        db.add_all([Company(**c) for c in COMPANIES])
        db.flush()
        jobs = [Job(**j) for j in JOBS]
        db.add_all(jobs)
        db.commit()
        return {job.title: job.id for job in jobs}


@pytest.fixture()
def client(seeded_db: dict[str, int]) -> Any:
    from jobly.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


def _register_and_login(client: TestClient, email: str, password: str = "SecretPass123") -> str:
    r = client.post("/auth/register", json={"email": email, "password": password})
    assert r.status_code == 201
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200
    return r.json()["access_token"]


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    token = _register_and_login(client, "admin@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def user_headers(client: TestClient) -> dict[str, str]:
    token = _register_and_login(client, "user@example.com")
    return {"Authorization": f"Bearer {token}"}
