"""Test-wide environment: cheap bcrypt and a fixed JWT secret before settings are cached."""

import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("APP_ENV", "dev")
