from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Timestamps are stored as naive UTC
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def require_text(value: str, field_name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field_name} must not be empty")
    return value


class CreatedResponse(BaseModel):
    id: int


class SuccessResponse(BaseModel):
    success: bool = True
