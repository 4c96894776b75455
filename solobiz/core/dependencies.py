from typing import Generator

from sqlalchemy.orm import Session

from solobiz.core.config import settings
from solobiz.db.session import SessionLocal
from solobiz.services.assistant_service import AssistantService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_assistant() -> AssistantService:
    return AssistantService(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
    )
