from typing import Optional, Union

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gaj.core.dependencies import get_db
from gaj.core.errors import NotFound, ValidationError
from gaj.schemas import schedule_schema
from gaj.services import schedule_service

router = APIRouter(
    prefix="/schedules",
    tags=["Agendamentos"],
)


def _is_id(param: str) -> bool:
    return param.isascii() and param.isdigit()


def _parse_id(param: str) -> int:
    # id não numérico nunca corresponde a um registro
    if not _is_id(param):
        raise NotFound("Agendamento não encontrado")
    return int(param)


@router.get("", response_model=schedule_schema.ScheduleList)
def list_schedules(db: Session = Depends(get_db)):
    return schedule_schema.ScheduleList(schedules=schedule_service.list_schedules(db))


@router.get(
    "/{param}",
    response_model=Union[schedule_schema.ScheduleDetail, schedule_schema.SchedulesByDate],
    summary="Busca agendamento por id ou lista agendamentos de uma data",
)
def get_schedule_or_date(param: str, db: Session = Depends(get_db)):
    """
    - numérico: busca o agendamento pelo id
    - qualquer outro valor: lista os agendamentos da data (YYYY-MM-DD)
    """
    if _is_id(param):
        schedule = schedule_service.get_schedule(db, int(param))
        return schedule_schema.ScheduleDetail(schedule=schedule)
    return schedule_schema.SchedulesByDate(date=param, schedules=schedule_service.list_by_date(db, param))


@router.post("", response_model=schedule_schema.ScheduleCreated, status_code=status.HTTP_201_CREATED)
def create_schedule(
    schedule_in: Optional[schedule_schema.ScheduleCreate] = None,
    db: Session = Depends(get_db),
):
    if schedule_in is None:
        raise ValidationError("Body requerido")
    schedule = schedule_service.create_schedule(db, schedule_in)
    return schedule_schema.ScheduleCreated(id=schedule.id, message="Agendamento criado")


@router.put("/{schedule_id}", response_model=schedule_schema.ScheduleUpdated)
def update_schedule(
    schedule_id: str,
    schedule_in: Optional[schedule_schema.ScheduleUpdate] = None,
    db: Session = Depends(get_db),
):
    if schedule_in is None:
        raise ValidationError("Body requerido")
    schedule = schedule_service.update_schedule(db, _parse_id(schedule_id), schedule_in)
    return schedule_schema.ScheduleUpdated(id=schedule.id, online=schedule.online)


@router.delete("/{schedule_id}", response_model=schedule_schema.ScheduleDeleted)
def delete_schedule(schedule_id: str, db: Session = Depends(get_db)):
    schedule_service.delete_schedule(db, _parse_id(schedule_id))
    return schedule_schema.ScheduleDeleted(message="Agendamento removido")
