import logging
from datetime import datetime

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from solobiz.db.store import EntityStore
from solobiz.models.client import Client
from solobiz.models.reminder import Reminder
from solobiz.models.service import Service
from solobiz.schemas.client import ClientCreate

logger = logging.getLogger(__name__)


def build_client(
    name: str,
    *,
    email: str | None = None,
    phone: str | None = None,
    notes: str | None = None,
    created_at: datetime | None = None,
    now: datetime | None = None,
) -> Client:
    return Client(
        name=name,
        email=email,
        phone=phone,
        notes=notes,
        created_at=created_at or now or datetime.utcnow(),
    )


def list_clients(db: Session, search: str | None = None):
    query = db.query(Client)

    if search and search.strip():
        term = search.strip().lower()
        term = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        query = query.filter(func.lower(Client.name).like(f"%{term}%", escape="\\"))

    return query.order_by(Client.name.asc(), Client.id.asc()).all()


def get_client_or_404(db: Session, client_id: int) -> Client:
    client = EntityStore(db, Client).get(client_id)
    if not client:
        logger.warning("Client %s not found", client_id)
        raise HTTPException(status_code=404, detail="Client not found")
    return client


def get_client_detail(db: Session, client_id: int) -> dict:
    client = get_client_or_404(db, client_id)

    services = EntityStore(db, Service).list_by_client(
        client_id,
        Service.date.desc(),
        Service.id.desc(),
    )
    reminders = EntityStore(db, Reminder).list_by_client(
        client_id,
        Reminder.due_date.asc(),
        Reminder.id.asc(),
        completed=False,
    )

    return {
        "id": client.id,
        "name": client.name,
        "email": client.email,
        "phone": client.phone,
        "notes": client.notes,
        "created_at": client.created_at,
        "services": services,
        "reminders": reminders,
    }


def create_client(db: Session, payload: ClientCreate) -> int:
    client = build_client(
        payload.name,
        email=payload.email,
        phone=payload.phone,
        notes=payload.notes,
    )
    client_id = EntityStore(db, Client).insert(client)

    logger.info("Client %s created: %s", client_id, client.name)
    return client_id


def delete_client(db: Session, client_id: int) -> None:
    """Delete a client together with its reminders and services.

    Dependents go first so no reminder or service is ever left pointing
    at a missing client.  Each step commits on its own; a failure half
    way leaves the already removed dependents removed.
    """
    get_client_or_404(db, client_id)

    removed_reminders = EntityStore(db, Reminder).delete_by_client(client_id)
    removed_services = EntityStore(db, Service).delete_by_client(client_id)
    EntityStore(db, Client).delete(client_id)

    logger.info(
        "Client %s deleted with %s services and %s reminders",
        client_id,
        removed_services,
        removed_reminders,
    )
