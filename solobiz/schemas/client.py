from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from solobiz.schemas.common import require_text
from solobiz.schemas.reminder import ReminderResponse
from solobiz.schemas.service import ServiceResponse


class ClientCreate(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        return require_text(value, "name")


class ClientResponse(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ClientDetailResponse(ClientResponse):
    services: List[ServiceResponse] = []
    reminders: List[ReminderResponse] = []
