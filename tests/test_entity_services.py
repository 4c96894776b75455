"""
Tests for client, billable service and reminder business logic.
"""

from datetime import datetime

import pytest
from fastapi import HTTPException

from solobiz.db.store import EntityStore
from solobiz.models.client import Client
from solobiz.models.reminder import Reminder
from solobiz.models.service import Service, ServiceStatus
from solobiz.schemas.client import ClientCreate
from solobiz.schemas.reminder import ReminderCreate
from solobiz.schemas.service import ServiceCreate, ServiceStatusUpdate
from solobiz.services.billing_service import (
    build_service,
    create_service,
    list_services,
    update_service_status,
)
from solobiz.services.client_service import (
    build_client,
    create_client,
    delete_client,
    get_client_detail,
    list_clients,
)
from solobiz.services.reminder_service import (
    build_reminder,
    complete_reminder,
    create_reminder,
    list_open_reminders,
)


NOW = datetime(2024, 6, 30, 12, 0, 0)


class TestRecordBuilders:
    """Tests for explicit record construction with defaults."""

    def test_build_client_defaults_created_at(self):
        client = build_client("Ana", now=NOW)

        assert client.name == "Ana"
        assert client.email is None
        assert client.created_at == NOW

    def test_build_service_defaults(self):
        service = build_service(1, "Logo design", 150, now=NOW)

        assert service.date == NOW
        assert service.status == ServiceStatus.PENDING.value
        assert service.completion_date is None
        assert service.value == 150

    def test_build_completed_service_fills_completion_date(self):
        service = build_service(1, "Logo", 150, status=ServiceStatus.COMPLETED, now=NOW)

        assert service.status == "completed"
        assert service.completion_date == NOW

    def test_build_completed_service_keeps_given_completion_date(self):
        finished = datetime(2024, 6, 2)

        service = build_service(
            1, "Logo", 150, status="completed", completion_date=finished, now=NOW
        )

        assert service.completion_date == finished

    def test_build_pending_service_drops_completion_date(self):
        service = build_service(1, "Logo", 150, completion_date=datetime(2024, 6, 2), now=NOW)

        assert service.completion_date is None

    def test_build_service_rejects_unknown_status(self):
        with pytest.raises(ValueError):
            build_service(1, "Logo", 150, status="archived", now=NOW)

    def test_build_reminder_defaults_open(self):
        reminder = build_reminder(1, "Call back", NOW)

        assert reminder.completed is False
        assert reminder.due_date == NOW


class TestClientService:

    def test_list_clients_orders_by_name_and_searches(self, db):
        for name in ["carla", "Ana Paula", "Bruno", "Mariana"]:
            create_client(db, ClientCreate(name=name))

        assert [c.name for c in list_clients(db)] == ["Ana Paula", "Bruno", "Mariana", "carla"]
        assert [c.name for c in list_clients(db, search="ANA")] == ["Ana Paula", "Mariana"]

    def test_search_treats_wildcards_literally(self, db):
        for name in ["Ana", "Bruno", "A_B Studio", "100% Design"]:
            create_client(db, ClientCreate(name=name))

        assert [c.name for c in list_clients(db, search="_")] == ["A_B Studio"]
        assert [c.name for c in list_clients(db, search="%")] == ["100% Design"]
        assert [c.name for c in list_clients(db, search="a_b")] == ["A_B Studio"]

    def test_client_detail_includes_services_and_open_reminders(self, db):
        client_id = create_client(db, ClientCreate(name="Ana"))
        create_service(db, ServiceCreate(client_id=client_id, description="Old", value=10,
                                         date=datetime(2024, 5, 1)))
        create_service(db, ServiceCreate(client_id=client_id, description="New", value=20,
                                         date=datetime(2024, 6, 1)))
        late = create_reminder(db, ReminderCreate(client_id=client_id, message="Later",
                                                  due_date=datetime(2024, 8, 1)))
        soon = create_reminder(db, ReminderCreate(client_id=client_id, message="Soon",
                                                  due_date=datetime(2024, 7, 1)))
        done = create_reminder(db, ReminderCreate(client_id=client_id, message="Done",
                                                  due_date=datetime(2024, 6, 1)))
        complete_reminder(db, done)

        detail = get_client_detail(db, client_id)

        assert detail["name"] == "Ana"
        assert [s.description for s in detail["services"]] == ["New", "Old"]
        assert [r.id for r in detail["reminders"]] == [soon, late]

    def test_client_detail_unknown_client(self, db):
        with pytest.raises(HTTPException) as exc:
            get_client_detail(db, 123)

        assert exc.value.status_code == 404

    def test_delete_client_cascades(self, db):
        client = build_client("Ana", now=NOW)
        client.id = 1
        EntityStore(db, Client).insert(client)
        other_id = create_client(db, ClientCreate(name="Bruno"))

        service = build_service(1, "Logo", 100, now=NOW)
        service.id = 7
        EntityStore(db, Service).insert(service)
        reminder = build_reminder(1, "Call", NOW)
        reminder.id = 9
        EntityStore(db, Reminder).insert(reminder)
        create_service(db, ServiceCreate(client_id=other_id, description="Keep", value=5))

        delete_client(db, 1)

        assert EntityStore(db, Client).get(1) is None
        assert EntityStore(db, Service).get(7) is None
        assert EntityStore(db, Reminder).get(9) is None
        assert EntityStore(db, Service).list_by_client(1) == []
        assert EntityStore(db, Reminder).list_by_client(1) == []
        assert [s.description for s in EntityStore(db, Service).list()] == ["Keep"]

    def test_delete_unknown_client(self, db):
        with pytest.raises(HTTPException) as exc:
            delete_client(db, 42)

        assert exc.value.status_code == 404


class TestBillingService:

    def test_create_service_requires_existing_client(self, db):
        with pytest.raises(HTTPException) as exc:
            create_service(db, ServiceCreate(client_id=5, description="Logo", value=10))

        assert exc.value.status_code == 404

    def test_list_services_joins_client_name(self, db):
        client_id = create_client(db, ClientCreate(name="Ana"))
        create_service(db, ServiceCreate(client_id=client_id, description="A", value=10,
                                         date=datetime(2024, 1, 1)))
        create_service(db, ServiceCreate(client_id=client_id, description="B", value=10,
                                         date=datetime(2024, 2, 1)))

        rows = list_services(db)

        assert [r["description"] for r in rows] == ["B", "A"]
        assert {r["client_name"] for r in rows} == {"Ana"}

    def test_update_status_sets_and_clears_completion_date(self, db):
        client_id = create_client(db, ClientCreate(name="Ana"))
        service_id = create_service(db, ServiceCreate(client_id=client_id, description="Logo",
                                                      value=10))

        update_service_status(db, service_id, ServiceStatusUpdate(status="completed"))
        service = EntityStore(db, Service).get(service_id)
        assert service.status == "completed"
        assert service.completion_date is not None

        update_service_status(db, service_id, ServiceStatusUpdate(status="pending"))
        service = EntityStore(db, Service).get(service_id)
        assert service.status == "pending"
        assert service.completion_date is None

    def test_recompleting_keeps_completion_date(self, db):
        client_id = create_client(db, ClientCreate(name="Ana"))
        finished = datetime(2024, 6, 2, 15, 0, 0)
        service_id = create_service(db, ServiceCreate(client_id=client_id, description="Logo",
                                                      value=10, status="completed",
                                                      completion_date=finished))

        update_service_status(db, service_id, ServiceStatusUpdate(status="completed"))

        assert EntityStore(db, Service).get(service_id).completion_date == finished

    def test_update_unknown_service(self, db):
        with pytest.raises(HTTPException) as exc:
            update_service_status(db, 77, ServiceStatusUpdate(status="completed"))

        assert exc.value.status_code == 404


class TestReminderService:

    def test_open_reminders_sorted_by_due_date(self, db):
        client_id = create_client(db, ClientCreate(name="Ana"))
        first = create_reminder(db, ReminderCreate(client_id=client_id, message="B",
                                                   due_date=datetime(2024, 9, 1)))
        second = create_reminder(db, ReminderCreate(client_id=client_id, message="A",
                                                    due_date=datetime(2024, 8, 1)))

        rows = list_open_reminders(db)

        assert [r["id"] for r in rows] == [second, first]
        assert rows[0]["client_name"] == "Ana"

    def test_completed_reminders_are_hidden(self, db):
        client_id = create_client(db, ClientCreate(name="Ana"))
        reminder_id = create_reminder(db, ReminderCreate(client_id=client_id, message="Call",
                                                         due_date=NOW))

        complete_reminder(db, reminder_id)

        assert list_open_reminders(db) == []
        assert EntityStore(db, Reminder).get(reminder_id).completed is True

    def test_complete_unknown_reminder(self, db):
        with pytest.raises(HTTPException) as exc:
            complete_reminder(db, 3)

        assert exc.value.status_code == 404

    def test_create_reminder_requires_existing_client(self, db):
        with pytest.raises(HTTPException):
            create_reminder(db, ReminderCreate(client_id=8, message="Call", due_date=NOW))
