from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from solobiz.schemas.common import naive_utc, require_text


class ReminderCreate(BaseModel):
    client_id: int
    message: str
    due_date: datetime

    @field_validator("message")
    @classmethod
    def message_required(cls, value: str) -> str:
        return require_text(value, "message")

    @field_validator("due_date")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        return naive_utc(value)


class ReminderResponse(BaseModel):
    id: int
    client_id: int
    client_name: Optional[str] = None
    message: str
    due_date: datetime
    completed: bool

    class Config:
        from_attributes = True
