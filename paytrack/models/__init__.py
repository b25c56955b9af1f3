"""SQLAlchemy ORM models."""

from paytrack.models.base import Base
from paytrack.models.payment import Payment
from paytrack.models.user import User

__all__ = ["Base", "Payment", "User"]
