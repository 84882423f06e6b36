"""Shared helpers for tests: isolated settings and an app backed by in-memory SQLite."""

import unittest

from fastapi.testclient import TestClient

from roster.core.config import Settings
from roster.main import create_app

TEST_SECRET = "test-secret"


def make_settings(**overrides: object) -> Settings:
    """Settings that never read .env and use a private in-memory database."""
    values: dict[str, object] = {
        "APP_ENV": "dev",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_SECRET,
        "BCRYPT_ROUNDS": 4,
        "AUTO_CREATE_TABLES": True,
        "SEED_DEFAULTS": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class ApiTestCase(unittest.TestCase):
    """Starts a fresh app (lifespan included) per test; defaults are seeded."""

    def setUp(self) -> None:
        self.settings = make_settings()
        self.app = create_app(self.settings)
        self._client = TestClient(self.app)
        self.client = self._client.__enter__()
        self.addCleanup(self._client.__exit__, None, None, None)

    def login(self, username: str, password: str) -> str:
        response = self.client.post("/login", json={"username": username, "password": password})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def role_id(self, name: str) -> int:
        roles = self.client.get("/roles").json()
        return next(r["id"] for r in roles if r["name"] == name)
