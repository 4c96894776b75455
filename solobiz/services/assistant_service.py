"""
Natural-language business assistant.

Questions are forwarded to Google Gemini together with a JSON snapshot of
the dashboard, so the model can answer about revenue, inactive clients or
upcoming follow-ups.  The provider is optional: without an API key the
assistant answers with a fixed notice, and provider failures are logged
and turned into a fixed apology instead of an error response.
"""

import json
import logging
from typing import Any

from google import genai
from google.genai import types
from sqlalchemy.orm import Session

from solobiz.db.store import EntityStore
from solobiz.models.client import Client
from solobiz.models.service import Service
from solobiz.services.analytics_service import get_dashboard_stats
from solobiz.services.reminder_service import list_open_reminders

logger = logging.getLogger(__name__)


NOT_CONFIGURED_REPLY = "The assistant is not configured. Set GEMINI_API_KEY to enable it."
EMPTY_REPLY = "Sorry, I could not process your request right now."
ERROR_REPLY = (
    "Something went wrong while talking to the assistant. "
    "Check your connection or try again later."
)

CONTEXT_RECENT_SERVICES = 5

SYSTEM_INSTRUCTION = """\
You are SoloBiz, a virtual assistant that helps freelancers and independent
professionals run their business.
You have access to the following data about the user's business (JSON):
{context}

Answer in a professional, friendly and helpful way.
Help the user analyse their revenue, identify inactive clients, suggest
reminders or give management tips.
Keep answers short and useful, and reply in the language the user writes in.
"""


def build_assistant_context(db: Session) -> dict:
    stats = get_dashboard_stats(db)

    return {
        "stats": stats,
        "clientsCount": len(EntityStore(db, Client).list()),
        "servicesCount": len(EntityStore(db, Service).list()),
        "pendingReminders": len(list_open_reminders(db)),
        "recentServices": stats["recentServices"][:CONTEXT_RECENT_SERVICES],
    }


def render_system_instruction(context: dict) -> str:
    return SYSTEM_INSTRUCTION.format(
        context=json.dumps(context, default=str, ensure_ascii=False)
    )


class AssistantService:
    """Thin wrapper around the Gemini client."""

    def __init__(self, api_key: str, model: str, client: Any = None):
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def enabled(self) -> bool:
        return self._client is not None or bool(self.api_key)

    @property
    def client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def chat(self, message: str, context: dict) -> str:
        if not self.enabled:
            logger.warning("Assistant request ignored: GEMINI_API_KEY is not set")
            return NOT_CONFIGURED_REPLY

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=message,
                config=types.GenerateContentConfig(
                    system_instruction=render_system_instruction(context),
                ),
            )
        except Exception:
            logger.exception("Assistant provider call failed")
            return ERROR_REPLY

        return getattr(response, "text", None) or EMPTY_REPLY
