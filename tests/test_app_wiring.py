"""Tests for app wiring: health check, root route, API prefix, bootstrap CLI."""

import os
import tempfile
import unittest
from unittest.mock import patch

from sqlalchemy import create_engine

from paytrack.core.database import create_session_factory
from paytrack.core.security import verify_password
from paytrack.models import Base, User
from paytrack.scripts import create_user as create_user_script
from tests.support import make_client, make_session_factory, make_settings


class TestHealthAndRoot(unittest.TestCase):
    def test_health_connected(self) -> None:
        resp = make_client().get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(), {"status": "ok", "environment": "dev", "database": "connected"}
        )

    def test_root(self) -> None:
        self.assertEqual(make_client().get("/").json(), {"message": "Paytrack API"})


class TestApiPrefix(unittest.TestCase):
    def test_routes_mount_under_prefix(self) -> None:
        client = make_client(make_settings(API_PREFIX="/api/v1"), make_session_factory())
        self.assertEqual(client.get("/api/v1/payments").status_code, 200)
        self.assertEqual(client.get("/payments").status_code, 404)


class TestCreateUserScript(unittest.TestCase):
    """The bootstrap CLI writes straight to the store without an admin token."""

    def setUp(self) -> None:
        fd, self.db_path = tempfile.mkstemp(suffix=".sqlite")
        os.close(fd)
        self.url = f"sqlite:///{self.db_path}"
        Base.metadata.create_all(create_engine(self.url))
        self.settings = make_settings()

    def tearDown(self) -> None:
        os.remove(self.db_path)

    def _run(self, *argv: str) -> int:
        with patch.object(
            create_user_script, "get_settings", return_value=self.settings
        ), patch.object(
            create_user_script,
            "create_db_engine",
            side_effect=lambda url: create_engine(self.url),
        ):
            return create_user_script.main(list(argv))

    def _users(self) -> list[User]:
        db = create_session_factory(create_engine(self.url))()
        try:
            return db.query(User).all()
        finally:
            db.close()

    def test_creates_admin_by_default(self) -> None:
        self.assertEqual(self._run("u1", "p1"), 0)
        users = self._users()
        self.assertEqual([(u.username, u.role) for u in users], [("u1", "admin")])
        self.assertTrue(verify_password("p1", users[0].password_hash))
        self.assertNotEqual(users[0].password_hash, "p1")

    def test_duplicate_username_exits_nonzero(self) -> None:
        self.assertEqual(self._run("u1", "p1", "intern"), 0)
        self.assertEqual(self._run("u1", "other", "admin"), 1)
        self.assertEqual(len(self._users()), 1)

    def test_unknown_role_rejected_by_argparse(self) -> None:
        with self.assertRaises(SystemExit):
            self._run("u1", "p1", "manager")
        self.assertEqual(self._users(), [])


if __name__ == "__main__":
    unittest.main()
