from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from solobiz.core.dependencies import get_db
from solobiz.schemas.common import CreatedResponse, SuccessResponse
from solobiz.schemas.reminder import ReminderCreate, ReminderResponse
from solobiz.services.reminder_service import (
    complete_reminder,
    create_reminder,
    list_open_reminders,
)

router = APIRouter(prefix="/api/reminders", tags=["Reminders"])


@router.get("", response_model=List[ReminderResponse])
def get_reminders(db: Session = Depends(get_db)):
    return list_open_reminders(db)


@router.post("", response_model=CreatedResponse)
def add_reminder(payload: ReminderCreate, db: Session = Depends(get_db)):
    return {"id": create_reminder(db, payload)}


@router.patch("/{reminder_id}/complete", response_model=SuccessResponse)
def mark_reminder_complete(reminder_id: int, db: Session = Depends(get_db)):
    complete_reminder(db, reminder_id)
    return {"success": True}
