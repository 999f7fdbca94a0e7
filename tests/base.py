import os
import shutil
import tempfile
import unittest

from fastapi.testclient import TestClient

from fritter_api.app.core.config import settings
from fritter_api.app.core.db import init_db
from fritter_api.app.main import create_app


class DatabaseTestCase(unittest.TestCase):
    """Points the application at a fresh SQLite file for every test."""

    def setUp(self):
        self._tmpdir = tempfile.mkdtemp()
        self._old_database_url = settings.database_url
        settings.database_url = os.path.join(self._tmpdir, "test.db")
        init_db()

    def tearDown(self):
        settings.database_url = self._old_database_url
        shutil.rmtree(self._tmpdir, ignore_errors=True)


class ApiTestCase(DatabaseTestCase):
    def setUp(self):
        super().setUp()
        self.client = TestClient(create_app())

    def register(self, username, password="secret"):
        response = self.client.post("/api/v1/users/", json={"username": username, "password": password})
        self.assertEqual(response.status_code, 201, response.text)
        return self.login(username, password)

    def login(self, username, password="secret"):
        response = self.client.post("/api/v1/users/login", json={"username": username, "password": password})
        self.assertEqual(response.status_code, 200, response.text)
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    def create_post(self, headers, content="hello world"):
        response = self.client.post("/api/v1/posts/", json={"content": content}, headers=headers)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["post"]
