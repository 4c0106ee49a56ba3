# app/ticket/models.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, String, Text
from app.core.database import Base


class TicketStatus(str, enum.Enum):
    new = "new"
    open = "open"
    closed = "closed"


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(32), primary_key=True, default=_new_id)
    user = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    product = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        Enum(TicketStatus, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        default=TicketStatus.new,
        nullable=False,
        index=True,
    )
    tutor = Column(String, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now, nullable=False)
