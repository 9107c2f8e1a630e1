"""Shared base for API tests: a fresh in-memory database per test behind FastAPI's TestClient."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from medicine_cabinet.core.database import get_db
from medicine_cabinet.main import app
from medicine_cabinet.models import Base

DEFAULT_PASSWORD = "correct-horse-battery"


class ApiTestCase(unittest.TestCase):
    """Overrides get_db with a per-test SQLite database shared across threads."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.app = app
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def register(self, user_name: str = "alice", password: str = DEFAULT_PASSWORD, **extra: Any):
        body = {"userName": user_name, "password": password, **extra}
        return self.client.post("/users", json=body)

    def login(self, user_name: str = "alice", password: str = DEFAULT_PASSWORD) -> str:
        resp = self.client.post("/auth/login", json={"userName": user_name, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["authToken"]

    def register_and_login(self, user_name: str = "alice") -> str:
        resp = self.register(user_name)
        self.assertEqual(resp.status_code, 201, resp.text)
        return self.login(user_name)

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def create_strain(self, token: str, name: str = "Blue Dream", **fields: Any) -> dict[str, Any]:
        resp = self.client.post(
            "/strains", json={"name": name, **fields}, headers=self.auth(token)
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()
