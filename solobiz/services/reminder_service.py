import logging
from datetime import datetime

from fastapi import HTTPException
from sqlalchemy.orm import Session

from solobiz.db.store import EntityStore
from solobiz.models.client import Client
from solobiz.models.reminder import Reminder
from solobiz.schemas.reminder import ReminderCreate
from solobiz.services.client_service import get_client_or_404

logger = logging.getLogger(__name__)


def build_reminder(
    client_id: int,
    message: str,
    due_date: datetime,
    *,
    completed: bool = False,
) -> Reminder:
    return Reminder(
        client_id=client_id,
        message=message,
        due_date=due_date,
        completed=bool(completed),
    )


def list_open_reminders(db: Session) -> list[dict]:
    rows = (
        db.query(Reminder, Client.name)
        .outerjoin(Client, Client.id == Reminder.client_id)
        .filter(Reminder.completed == False)
        .order_by(Reminder.due_date.asc(), Reminder.id.asc())
        .all()
    )

    return [
        {
            "id": reminder.id,
            "client_id": reminder.client_id,
            "client_name": client_name,
            "message": reminder.message,
            "due_date": reminder.due_date,
            "completed": reminder.completed,
        }
        for reminder, client_name in rows
    ]


def create_reminder(db: Session, payload: ReminderCreate) -> int:
    get_client_or_404(db, payload.client_id)

    reminder = build_reminder(payload.client_id, payload.message, payload.due_date)
    reminder_id = EntityStore(db, Reminder).insert(reminder)

    logger.info("Reminder %s created for client %s", reminder_id, payload.client_id)
    return reminder_id


def complete_reminder(db: Session, reminder_id: int) -> None:
    if not EntityStore(db, Reminder).update(reminder_id, completed=True):
        logger.warning("Reminder %s not found", reminder_id)
        raise HTTPException(status_code=404, detail="Reminder not found")

    logger.info("Reminder %s completed", reminder_id)
