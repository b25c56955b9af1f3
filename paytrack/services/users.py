"""User creation and listing against the users table."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from paytrack.core.config import get_settings
from paytrack.core.errors import AuthorizationError, ConflictError, ValidationError
from paytrack.core.roles import ADMIN_ROLE, is_valid_role
from paytrack.core.security import TokenClaims, hash_password
from paytrack.models import User

if TYPE_CHECKING:
    from paytrack.core.config import Settings

logger = logging.getLogger(__name__)


def create_user(
    db: Session,
    requester: TokenClaims | None,
    username: str,
    password: str,
    role: str,
    settings: "Settings | None" = None,
) -> User:
    """
    Create a user on behalf of an admin requester.

    Uniqueness of username is left to the database's unique index; a violation
    is rolled back and reported as ConflictError, so no row is written.
    """
    settings = settings or get_settings()
    if requester is None or requester.role != ADMIN_ROLE:
        raise AuthorizationError("Only admin can add users")
    return insert_user(db, username, password, role, settings)


def insert_user(
    db: Session,
    username: str,
    password: str,
    role: str,
    settings: "Settings | None" = None,
) -> User:
    """Validate role, hash the password and insert. Used directly by the bootstrap CLI."""
    settings = settings or get_settings()
    if not is_valid_role(role, settings):
        raise ValidationError(
            f"Invalid role. Must be one of: {', '.join(settings.USER_ROLES)}."
        )

    now = datetime.now(UTC)
    user = User(
        username=username,
        password_hash=hash_password(password, settings),
        role=role,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("User creation rejected: username taken")
        raise ConflictError("Username already exists.") from e
    db.refresh(user)
    logger.info("User created", extra={"user_id": user.id, "role": user.role})
    return user


def list_users(db: Session) -> list[User]:
    """All users ordered by id. Callers must not expose password_hash."""
    return db.query(User).order_by(User.id).all()
