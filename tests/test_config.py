"""Unit tests for paytrack.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from paytrack.core.config import DEFAULT_JWT_SECRET, Settings
from paytrack.core.roles import is_valid_role
from tests.support import make_settings


class TestDefaults(unittest.TestCase):
    def test_token_lifetime_defaults_to_seven_days(self) -> None:
        self.assertEqual(make_settings().JWT_EXPIRE_MINUTES, 7 * 24 * 60)

    def test_default_roles_are_server_roles(self) -> None:
        self.assertEqual(make_settings().USER_ROLES, ["admin", "viewer", "intern"])

    def test_reads_are_open_by_default(self) -> None:
        self.assertFalse(make_settings().REQUIRE_AUTH_FOR_READS)


class TestUserRoles(unittest.TestCase):
    def test_comma_separated_string(self) -> None:
        settings = make_settings(USER_ROLES=" admin, manager ,intern,admin ")
        self.assertEqual(settings.USER_ROLES, ["admin", "manager", "intern"])

    def test_admin_is_required(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(USER_ROLES="viewer,intern")

    def test_is_valid_role_is_exact(self) -> None:
        settings = make_settings()
        self.assertTrue(is_valid_role("viewer", settings))
        self.assertFalse(is_valid_role("Viewer", settings))
        self.assertFalse(is_valid_role("manager", settings))


class TestValidators(unittest.TestCase):
    def test_database_url_must_be_postgres(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://localhost/db")

    def test_expire_minutes_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=10081)

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            make_settings(BCRYPT_ROUNDS=17)

    def test_blank_jwt_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET="   ")

    def test_prod_rejects_default_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(APP_ENV="prod", JWT_SECRET=DEFAULT_JWT_SECRET)
        settings = Settings(APP_ENV="prod", JWT_SECRET="a-real-secret")
        self.assertEqual(settings.APP_ENV, "prod")

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(make_settings(API_PREFIX="/api/v1/").API_PREFIX, "/api/v1")
        with self.assertRaises(ValidationError):
            make_settings(API_PREFIX="api")

    def test_default_limit_cannot_exceed_max(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(PAYMENTS_DEFAULT_PAGE_LIMIT=50, PAYMENTS_MAX_PAGE_LIMIT=20)


if __name__ == "__main__":
    unittest.main()
