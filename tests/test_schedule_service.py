"""
Testes para o schedule_service
"""
import pytest

from gaj.core.config import settings
from gaj.core.errors import InvalidTimeWindow, NotFound, ValidationError
from gaj.schemas import schedule_schema
from gaj.services import schedule_service


def make_schedule_in(**overrides):
    data = {
        "lawyer": "Dr. Carlos",
        "client": "João da Silva",
        "process_number": "0001234-56.2024.8.26.0100",
        "online": True,
        "date": "2024-02-10",
        "time": "09:30",
        "notes": "Levar documentos",
    }
    data.update(overrides)
    return schedule_schema.ScheduleCreate(**data)


class TestCreateSchedule:
    """Testes para create_schedule"""

    def test_roundtrip(self, db_session):
        created = schedule_service.create_schedule(db_session, make_schedule_in())
        found = schedule_service.get_schedule(db_session, created.id)

        assert found.lawyer == "Dr. Carlos"
        assert found.client == "João da Silva"
        assert found.process_number == "0001234-56.2024.8.26.0100"
        assert found.online is True
        assert found.date == "2024-02-10"
        assert found.time == "09:30"
        assert found.notes == "Levar documentos"

    def test_optional_fields_default_to_empty(self, db_session):
        created = schedule_service.create_schedule(
            db_session, make_schedule_in(process_number=None, notes=None, online=None)
        )
        assert created.process_number == ""
        assert created.notes == ""
        assert created.online is False

    @pytest.mark.parametrize("field", ["lawyer", "client", "date", "time"])
    def test_missing_required(self, db_session, field):
        with pytest.raises(ValidationError):
            schedule_service.create_schedule(db_session, make_schedule_in(**{field: ""}))

    @pytest.mark.parametrize("time", ["05:59", "18:01", "25:00", "noon"])
    def test_time_outside_window(self, db_session, time):
        with pytest.raises(InvalidTimeWindow):
            schedule_service.create_schedule(db_session, make_schedule_in(time=time))

    def test_time_message_follows_configured_window(self, db_session, monkeypatch):
        monkeypatch.setattr(settings, "SCHEDULE_START_TIME", "08:00")
        monkeypatch.setattr(settings, "SCHEDULE_END_TIME", "17:30")

        with pytest.raises(InvalidTimeWindow) as exc_info:
            schedule_service.create_schedule(db_session, make_schedule_in(time="07:00"))
        assert exc_info.value.message == "Horário inválido (deve ser entre 08:00 e 17:30)"

    @pytest.mark.parametrize("time", ["06:00", "18:00", "9:30"])
    def test_window_edges(self, db_session, time):
        assert schedule_service.create_schedule(db_session, make_schedule_in(time=time)).id

    def test_double_booking_is_accepted(self, db_session):
        first = schedule_service.create_schedule(db_session, make_schedule_in())
        second = schedule_service.create_schedule(db_session, make_schedule_in())
        assert first.id != second.id


class TestQueries:
    """Testes para listagens"""

    def test_list_all(self, db_session):
        schedule_service.create_schedule(db_session, make_schedule_in(date="2024-02-10"))
        schedule_service.create_schedule(db_session, make_schedule_in(date="2024-02-11"))
        assert len(schedule_service.list_schedules(db_session)) == 2

    def test_list_by_date_exact_match(self, db_session):
        schedule_service.create_schedule(db_session, make_schedule_in(date="2024-02-10"))
        schedule_service.create_schedule(db_session, make_schedule_in(date="2024-02-11"))

        result = schedule_service.list_by_date(db_session, "2024-02-10")
        assert [s.date for s in result] == ["2024-02-10"]
        assert schedule_service.list_by_date(db_session, "2024-02") == []

    def test_list_dates(self, db_session):
        schedule_service.create_schedule(db_session, make_schedule_in(date="2024-02-10"))
        schedule_service.create_schedule(db_session, make_schedule_in(date="2024-02-10"))
        schedule_service.create_schedule(db_session, make_schedule_in(date="2024-03-01"))

        assert schedule_service.list_dates(db_session) == {"2024-02-10", "2024-03-01"}

    def test_get_not_found(self, db_session):
        with pytest.raises(NotFound):
            schedule_service.get_schedule(db_session, 9999)


class TestUpdateAndDelete:
    """Testes para update_schedule e delete_schedule"""

    def test_update_online_only(self, db_session):
        created = schedule_service.create_schedule(db_session, make_schedule_in(online=True))
        update = schedule_schema.ScheduleUpdate.model_validate({"online": False, "time": "23:00", "lawyer": "X"})

        updated = schedule_service.update_schedule(db_session, created.id, update)

        assert updated.online is False
        assert updated.time == "09:30"
        assert updated.lawyer == "Dr. Carlos"

    def test_update_requires_online(self, db_session):
        created = schedule_service.create_schedule(db_session, make_schedule_in())
        with pytest.raises(ValidationError):
            schedule_service.update_schedule(db_session, created.id, schedule_schema.ScheduleUpdate())

    def test_update_online_null_stores_false(self, db_session):
        created = schedule_service.create_schedule(db_session, make_schedule_in(online=True))
        update = schedule_schema.ScheduleUpdate.model_validate({"online": None})

        assert schedule_service.update_schedule(db_session, created.id, update).online is False

    def test_update_not_found(self, db_session):
        with pytest.raises(NotFound):
            schedule_service.update_schedule(db_session, 9999, schedule_schema.ScheduleUpdate(online=True))

    def test_delete(self, db_session):
        created = schedule_service.create_schedule(db_session, make_schedule_in())
        schedule_service.delete_schedule(db_session, created.id)

        with pytest.raises(NotFound):
            schedule_service.get_schedule(db_session, created.id)

    def test_delete_not_found(self, db_session):
        with pytest.raises(NotFound):
            schedule_service.delete_schedule(db_session, 9999)
