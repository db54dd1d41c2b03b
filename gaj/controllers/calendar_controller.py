from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from gaj.core.dependencies import get_db
from gaj.schemas.calendar_schema import MonthGrid
from gaj.services import calendar_service, schedule_service

router = APIRouter(
    prefix="/calendar",
    tags=["Calendário"],
)


@router.get("", response_model=MonthGrid, summary="Grade do mês (padrão: mês atual)")
def current_month(
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, description="0-indexado (0 = janeiro)"),
    db: Session = Depends(get_db),
):
    today = date.today()
    year = today.year if year is None else year
    month = today.month - 1 if month is None else month
    return calendar_service.project_month(year, month, schedule_service.list_dates(db))


@router.get("/{year}/{month}", response_model=MonthGrid, summary="Grade de um mês")
def month_grid(year: int, month: int, db: Session = Depends(get_db)):
    return calendar_service.project_month(year, month, schedule_service.list_dates(db))
