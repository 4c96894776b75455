from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from solobiz.models.service import ServiceStatus
from solobiz.schemas.common import naive_utc, require_text


class ServiceCreate(BaseModel):
    client_id: int
    description: str
    value: float = Field(ge=0, allow_inf_nan=False)
    date: Optional[datetime] = None
    status: ServiceStatus = ServiceStatus.PENDING
    completion_date: Optional[datetime] = None

    @field_validator("description")
    @classmethod
    def description_required(cls, value: str) -> str:
        return require_text(value, "description")

    @field_validator("date", "completion_date")
    @classmethod
    def to_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return naive_utc(value)


class ServiceStatusUpdate(BaseModel):
    status: ServiceStatus
    completion_date: Optional[datetime] = None

    @field_validator("completion_date")
    @classmethod
    def to_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return naive_utc(value)


class ServiceResponse(BaseModel):
    id: int
    client_id: int
    client_name: Optional[str] = None
    description: str
    value: float
    date: datetime
    # Stored as free text; rows outside ServiceStatus still serialize
    status: str
    completion_date: Optional[datetime] = None

    class Config:
        from_attributes = True
