from pydantic import BaseModel, field_validator

from solobiz.schemas.common import require_text


class AssistantRequest(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def message_required(cls, value: str) -> str:
        return require_text(value, "message")


class AssistantReply(BaseModel):
    reply: str
