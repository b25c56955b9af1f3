"""Shared builders for tests: settings, in-memory SQLite store, app client, bootstrap users."""

from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from paytrack.core.config import Settings
from paytrack.core.security import hash_password
from paytrack.main import create_app
from paytrack.models import Base, User


def make_settings(**overrides: Any) -> Settings:
    """Settings with a known secret and the minimum bcrypt cost."""
    values: dict[str, Any] = {"JWT_SECRET": "test-secret", "BCRYPT_ROUNDS": 4}
    values.update(overrides)
    return Settings(**values)


def make_session_factory() -> sessionmaker[Session]:
    """Fresh in-memory SQLite database shared by every session from the factory."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_client(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
    **client_kwargs: Any,
) -> TestClient:
    app = create_app(
        settings or make_settings(),
        session_factory or make_session_factory(),
    )
    return TestClient(app, **client_kwargs)


def bootstrap_user(
    session_factory: sessionmaker[Session],
    username: str,
    password: str,
    role: str,
    settings: Settings | None = None,
) -> int:
    """Insert a user straight into the store (no admin token), as the bootstrap CLI does."""
    db = session_factory()
    try:
        user = User(
            username=username,
            password_hash=hash_password(password, settings or make_settings()),
            role=role,
        )
        db.add(user)
        db.commit()
        return user.id
    finally:
        db.close()


def count_users(session_factory: sessionmaker[Session]) -> int:
    db = session_factory()
    try:
        return db.query(User).count()
    finally:
        db.close()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
