# app/ticket/schemas.py
from datetime import datetime
from pydantic import BaseModel
from app.ticket.models import TicketStatus

class TicketCreate(BaseModel):
    # Presence is checked by the service so the error carries a readable message
    product: str | None = None
    description: str | None = None

class TicketUpdate(BaseModel):
    """Fields a ticket's owner or an admin may change; anything else is dropped."""

    product: str | None = None
    description: str | None = None
    status: TicketStatus | None = None
    tutor: str | None = None

    model_config = {"extra": "ignore"}

class TicketOut(BaseModel):
    id: str
    user: str
    product: str
    description: str
    status: TicketStatus
    tutor: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

class DeleteResult(BaseModel):
    success: bool = True
