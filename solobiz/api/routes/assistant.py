from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from solobiz.core.dependencies import get_assistant, get_db
from solobiz.schemas.assistant import AssistantReply, AssistantRequest
from solobiz.services.assistant_service import AssistantService, build_assistant_context

router = APIRouter(prefix="/api/assistant", tags=["Assistant"])


@router.post("/chat", response_model=AssistantReply)
def chat(
    payload: AssistantRequest,
    db: Session = Depends(get_db),
    assistant: AssistantService = Depends(get_assistant),
):
    context = build_assistant_context(db)
    return {"reply": assistant.chat(payload.message, context)}
