# app/ticket/services.py
import logging

from sqlalchemy.orm import Session
from app.core.errors import BadRequestError, NotAuthorizedError, TicketNotFoundError
from app.ticket.models import Ticket, TicketStatus
from app.ticket.schemas import TicketCreate, TicketUpdate
from app.user.models import User
from app.user.services import get_user, require_user

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("product", "description", "status")


def can_access(ticket: Ticket, user: User) -> bool:
    return ticket.user == user.id or bool(user.is_admin)

def can_view_all(user: User) -> bool:
    return bool(user.is_admin or user.is_tutor)


def get_ticket(db: Session, ticket_id: str) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()

def _load_accessible_ticket(db: Session, ticket_id: str, user_id: str) -> Ticket:
    user = require_user(db, user_id)
    ticket = get_ticket(db, ticket_id)
    if not ticket:
        raise TicketNotFoundError()
    if not can_access(ticket, user):
        logger.warning("User %s denied access to ticket %s", user_id, ticket_id)
        raise NotAuthorizedError()
    return ticket


def get_user_tickets(db: Session, user_id: str) -> list[Ticket]:
    require_user(db, user_id)
    return db.query(Ticket).filter(Ticket.user == user_id).all()

def get_all_tickets(db: Session, user_id: str) -> list[Ticket]:
    user = require_user(db, user_id)
    if not can_view_all(user):
        logger.warning("User %s denied the all-tickets view", user_id)
        raise NotAuthorizedError("Not a tutor.")
    return db.query(Ticket).all()

def get_user_ticket(db: Session, ticket_id: str, user_id: str) -> Ticket:
    return _load_accessible_ticket(db, ticket_id, user_id)

def create_ticket(db: Session, payload: TicketCreate, user_id: str) -> Ticket:
    if not payload.product or not payload.description:
        raise BadRequestError("Please add a product and description")
    require_user(db, user_id)

    db_ticket = Ticket(
        product=payload.product,
        description=payload.description,
        user=user_id,
        status=TicketStatus.new,
        tutor=None,
    )
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s created by user %s", db_ticket.id, user_id)
    return db_ticket

def update_ticket(db: Session, ticket_id: str, payload: TicketUpdate, user_id: str) -> Ticket:
    db_ticket = _load_accessible_ticket(db, ticket_id, user_id)
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        return db_ticket
    # Only the tutor may be cleared
    if any(changes.get(f) in (None, "") for f in REQUIRED_FIELDS if f in changes):
        raise BadRequestError("Product, description and status cannot be empty")
    if changes.get("tutor") is not None and not get_user(db, changes["tutor"]):
        raise BadRequestError("Tutor not found")
    for field, value in changes.items():
        setattr(db_ticket, field, value)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s updated by user %s: %s", ticket_id, user_id, sorted(changes))
    return db_ticket

def delete_ticket(db: Session, ticket_id: str, user_id: str) -> None:
    db_ticket = _load_accessible_ticket(db, ticket_id, user_id)
    db.delete(db_ticket)
    db.commit()
    logger.info("Ticket %s deleted by user %s", ticket_id, user_id)
