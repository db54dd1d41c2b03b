import logging
from typing import List, Set

from sqlalchemy.orm import Session

from gaj.core.config import settings
from gaj.core.errors import InvalidTimeWindow, NotFound, ValidationError
from gaj.core.validators import is_valid_time
from gaj.models import schedule_model
from gaj.schemas import schedule_schema

logger = logging.getLogger(__name__)


def create_schedule(db: Session, schedule_in: schedule_schema.ScheduleCreate) -> schedule_model.Schedule:
    # Não há checagem de conflito: dois agendamentos no mesmo horário são aceitos
    if not schedule_in.lawyer or not schedule_in.client or not schedule_in.date or not schedule_in.time:
        raise ValidationError("Campos obrigatórios ausentes")
    if not is_valid_time(schedule_in.time):
        raise InvalidTimeWindow.for_window(
            settings.SCHEDULE_START_TIME, settings.SCHEDULE_END_TIME
        )

    db_schedule = schedule_model.Schedule(
        lawyer=schedule_in.lawyer,
        client=schedule_in.client,
        process_number=schedule_in.process_number or "",
        online=bool(schedule_in.online),
        date=schedule_in.date,
        time=schedule_in.time,
        notes=schedule_in.notes or "",
    )
    db.add(db_schedule)
    db.commit()
    db.refresh(db_schedule)
    logger.info(f"Agendamento {db_schedule.id} criado para {db_schedule.date} {db_schedule.time}")
    return db_schedule


def list_schedules(db: Session) -> List[schedule_model.Schedule]:
    return db.query(schedule_model.Schedule).order_by(schedule_model.Schedule.id).all()


def get_schedule(db: Session, schedule_id: int) -> schedule_model.Schedule:
    schedule = db.get(schedule_model.Schedule, schedule_id)
    if not schedule:
        raise NotFound("Agendamento não encontrado")
    return schedule


def list_by_date(db: Session, date: str) -> List[schedule_model.Schedule]:
    return (
        db.query(schedule_model.Schedule)
        .filter(schedule_model.Schedule.date == date)
        .order_by(schedule_model.Schedule.id)
        .all()
    )


def list_dates(db: Session) -> Set[str]:
    """Datas que possuem ao menos um agendamento"""
    rows = db.query(schedule_model.Schedule.date).distinct().all()
    return {row[0] for row in rows}


def update_schedule(
    db: Session,
    schedule_id: int,
    schedule_in: schedule_schema.ScheduleUpdate,
) -> schedule_model.Schedule:
    # null conta como falso; só a ausência do campo é erro
    if "online" not in schedule_in.model_fields_set:
        raise ValidationError("Campo online requerido")
    schedule = get_schedule(db, schedule_id)
    schedule.online = bool(schedule_in.online)
    db.commit()
    db.refresh(schedule)
    return schedule


def delete_schedule(db: Session, schedule_id: int) -> None:
    schedule = get_schedule(db, schedule_id)
    db.delete(schedule)
    db.commit()
    logger.info(f"Agendamento {schedule_id} removido")
