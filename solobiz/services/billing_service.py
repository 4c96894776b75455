import logging
from datetime import datetime

from fastapi import HTTPException
from sqlalchemy.orm import Session

from solobiz.db.store import EntityStore
from solobiz.models.client import Client
from solobiz.models.service import Service, ServiceStatus
from solobiz.schemas.service import ServiceCreate, ServiceStatusUpdate
from solobiz.services.client_service import get_client_or_404

logger = logging.getLogger(__name__)


def resolve_completion_date(
    status: ServiceStatus,
    completion_date: datetime | None,
    now: datetime | None = None,
) -> datetime | None:
    """Completed services always carry a completion date; pending ones never do."""
    if ServiceStatus(status) == ServiceStatus.COMPLETED:
        return completion_date or now or datetime.utcnow()
    return None


def build_service(
    client_id: int,
    description: str,
    value: float,
    *,
    date: datetime | None = None,
    status: ServiceStatus = ServiceStatus.PENDING,
    completion_date: datetime | None = None,
    now: datetime | None = None,
) -> Service:
    now = now or datetime.utcnow()
    status = ServiceStatus(status)

    return Service(
        client_id=client_id,
        description=description,
        value=round(float(value or 0), 2),
        date=date or now,
        status=status.value,
        completion_date=resolve_completion_date(status, completion_date, now),
    )


def _service_row(service: Service, client_name: str | None) -> dict:
    return {
        "id": service.id,
        "client_id": service.client_id,
        "client_name": client_name,
        "description": service.description,
        "value": service.value,
        "date": service.date,
        "status": service.status,
        "completion_date": service.completion_date,
    }


def list_services(db: Session) -> list[dict]:
    rows = (
        db.query(Service, Client.name)
        .outerjoin(Client, Client.id == Service.client_id)
        .order_by(Service.date.desc(), Service.id.desc())
        .all()
    )

    return [_service_row(service, client_name) for service, client_name in rows]


def create_service(db: Session, payload: ServiceCreate) -> int:
    get_client_or_404(db, payload.client_id)

    service = build_service(
        payload.client_id,
        payload.description,
        payload.value,
        date=payload.date,
        status=payload.status,
        completion_date=payload.completion_date,
    )
    service_id = EntityStore(db, Service).insert(service)

    logger.info(
        "Service %s created for client %s (%s, %.2f)",
        service_id,
        payload.client_id,
        service.status,
        service.value,
    )
    return service_id


def update_service_status(db: Session, service_id: int, payload: ServiceStatusUpdate) -> None:
    store = EntityStore(db, Service)
    service = store.get(service_id)

    if not service:
        logger.warning("Service %s not found", service_id)
        raise HTTPException(status_code=404, detail="Service not found")

    completion_date = payload.completion_date
    # Re-completing keeps the original completion date unless a new one is given
    if completion_date is None and service.status == payload.status.value:
        completion_date = service.completion_date

    store.update(
        service_id,
        status=payload.status.value,
        completion_date=resolve_completion_date(payload.status, completion_date),
    )

    logger.info("Service %s marked %s", service_id, payload.status.value)
