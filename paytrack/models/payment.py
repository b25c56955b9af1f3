"""ORM model for recorded payments."""

from sqlalchemy import Column, DateTime, Float, Integer, String, func

from paytrack.models.base import Base


class Payment(Base):
    """A single payment. Inserted once, never updated or deleted."""

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Float, nullable=False)
    receiver = Column(String(255), nullable=False)
    status = Column(String(16), nullable=False, default="pending", index=True)
    method = Column(String(32), nullable=False, default="card", index=True)
    reference_id = Column(String(255), nullable=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
