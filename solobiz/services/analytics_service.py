import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any, Iterable

from sqlalchemy.orm import Session

from solobiz.core.config import settings
from solobiz.db.store import EntityStore
from solobiz.models.client import Client
from solobiz.models.reminder import Reminder
from solobiz.models.service import Service, ServiceStatus

logger = logging.getLogger(__name__)


def _field(entity: Any, name: str) -> Any:
    if isinstance(entity, Mapping):
        return entity.get(name)
    return getattr(entity, name, None)


def _as_datetime(value: Any) -> datetime | None:
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _amount(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _round_money(value: float) -> float:
    return round(float(value or 0), 2)


def _status(entity: Any) -> Any:
    status = _field(entity, "status")
    return getattr(status, "value", status)


def _month_label(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}"


def recent_month_labels(now: datetime, count: int = 6) -> list[str]:
    """Return ``count`` "YYYY-MM" labels ending at the month of ``now``, oldest first."""
    year, month = now.year, now.month
    labels = []

    for _ in range(count):
        labels.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            month = 12
            year -= 1

    labels.reverse()
    return labels


def _most_recent(entities: list, timestamp_field: str, limit: int) -> list:
    # Newest first, ties broken by id descending; undated rows go last
    def sort_key(entity):
        moment = _as_datetime(_field(entity, timestamp_field))
        entity_id = _field(entity, "id")
        return (
            moment is not None,
            moment or datetime.min,
            entity_id if isinstance(entity_id, int) else -1,
        )

    return sorted(entities, key=sort_key, reverse=True)[:limit]


def _service_row(service: Any, client_names: dict) -> dict:
    client_id = _field(service, "client_id")
    return {
        "id": _field(service, "id"),
        "client_id": client_id,
        "client_name": client_names.get(client_id),
        "description": _field(service, "description"),
        "value": _amount(_field(service, "value")),
        "date": _field(service, "date"),
        "status": _status(service),
        "completion_date": _field(service, "completion_date"),
    }


def _client_row(client: Any) -> dict:
    return {
        "id": _field(client, "id"),
        "name": _field(client, "name"),
        "email": _field(client, "email"),
        "phone": _field(client, "phone"),
        "notes": _field(client, "notes"),
        "created_at": _field(client, "created_at"),
    }


# =====================================================
# DASHBOARD SNAPSHOT
# =====================================================

def compute_stats(
    clients: Iterable[Any],
    services: Iterable[Any],
    reminders: Iterable[Any],
    now: datetime | str | None = None,
    *,
    recent_services_limit: int | None = None,
    recent_clients_limit: int | None = None,
    months: int | None = None,
) -> dict:
    """Build the dashboard snapshot from complete entity collections.

    Entities may be ORM instances or plain mappings.  Nothing is cached
    and the inputs are never modified, so calling this twice on the same
    collections with the same ``now`` gives the same result.  Month
    buckets are calendar aligned and derived from ``now``, which defaults
    to the current UTC wall clock.
    """
    now = _as_datetime(now) or datetime.utcnow()
    if recent_services_limit is None:
        recent_services_limit = settings.RECENT_SERVICES_LIMIT
    if recent_clients_limit is None:
        recent_clients_limit = settings.RECENT_CLIENTS_LIMIT
    if months is None:
        months = settings.REVENUE_MONTHS

    clients = list(clients)
    services = list(services)
    reminders = list(reminders)

    completed = [s for s in services if _status(s) == ServiceStatus.COMPLETED.value]
    pending_count = sum(1 for s in services if _status(s) == ServiceStatus.PENDING.value)
    active_reminders = sum(1 for r in reminders if not _field(r, "completed"))

    total_revenue = sum(_amount(_field(s, "value")) for s in completed)

    buckets = {label: 0.0 for label in recent_month_labels(now, months)}
    for service in completed:
        moment = _as_datetime(_field(service, "date"))
        if moment is None:
            continue
        label = _month_label(moment)
        if label in buckets:
            buckets[label] += _amount(_field(service, "value"))

    client_names = {_field(c, "id"): _field(c, "name") for c in clients}

    return {
        "totalClients": len(clients),
        "totalRevenue": _round_money(total_revenue),
        "activeReminders": active_reminders,
        "pendingServices": pending_count,
        "recentServices": [
            _service_row(s, client_names)
            for s in _most_recent(services, "date", recent_services_limit)
        ],
        "monthlyRevenue": [
            {"month": label, "total": _round_money(total)}
            for label, total in buckets.items()
        ],
        "recentClients": [
            _client_row(c)
            for c in _most_recent(clients, "created_at", recent_clients_limit)
        ],
    }


def get_dashboard_stats(db: Session, now: datetime | None = None) -> dict:
    clients = EntityStore(db, Client).list()
    services = EntityStore(db, Service).list()
    reminders = EntityStore(db, Reminder).list()

    stats = compute_stats(clients, services, reminders, now=now)

    logger.debug(
        "Dashboard stats computed: %s clients, %s services, %s reminders",
        len(clients),
        len(services),
        len(reminders),
    )
    return stats
