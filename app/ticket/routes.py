# app/ticket/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.security import get_current_user_id
from app.ticket.schemas import DeleteResult, TicketCreate, TicketOut, TicketUpdate
from app.ticket import services as ticket_service
router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.get("", response_model=list[TicketOut])
def list_own(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return ticket_service.get_user_tickets(db, user_id)


# Declared before /{ticket_id} so the literal path wins
@router.get("/tutor-view", response_model=list[TicketOut])
def list_all(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return ticket_service.get_all_tickets(db, user_id)


@router.post("", response_model=TicketOut)
def create(
    ticket: TicketCreate | None = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return ticket_service.create_ticket(db, ticket or TicketCreate(), user_id)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return ticket_service.get_user_ticket(db, ticket_id, user_id)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(
    ticket_id: str,
    ticket: TicketUpdate | None = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return ticket_service.update_ticket(db, ticket_id, ticket or TicketUpdate(), user_id)


@router.delete("/{ticket_id}", response_model=DeleteResult)
def delete(ticket_id: str, user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    ticket_service.delete_ticket(db, ticket_id, user_id)
    return DeleteResult(success=True)
