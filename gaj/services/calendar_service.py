"""
Projeção do calendário mensal

Monta a grade de um mês (semanas de domingo a sábado) e marca os dias
que possuem pelo menos um agendamento. Meses são 0-indexados (0 = janeiro).
"""
from datetime import date
from typing import Iterable, List, Tuple

from gaj.core.errors import ValidationError
from gaj.schemas.calendar_schema import DayCell, EmptyCell, MonthGrid, MonthRef

DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 1 and is_leap_year(year):
        return 29
    return DAYS_PER_MONTH[month]


def first_weekday(year: int, month: int) -> int:
    """Dia da semana do dia 1, com 0 = domingo"""
    return date(year, month + 1, 1).isoweekday() % 7


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Avança ou recua `delta` meses, ajustando o ano"""
    total = year * 12 + month + delta
    return total // 12, total % 12


def _validate_month(year: int, month: int) -> None:
    if not 0 <= month <= 11:
        raise ValidationError("Mês inválido (deve ser entre 0 e 11)")
    if not 1 <= year <= 9999:
        raise ValidationError("Ano inválido")


def project_month(year: int, month: int, schedule_dates: Iterable[str]) -> MonthGrid:
    _validate_month(year, month)
    dates = set(schedule_dates)

    start = first_weekday(year, month)
    total_days = days_in_month(year, month)
    weeks = -(-(start + total_days) // 7)

    cells: List = []
    for idx in range(weeks * 7):
        day_number = idx - start + 1
        if day_number < 1 or day_number > total_days:
            cells.append(EmptyCell())
            continue
        date_str = f"{year:04d}-{month + 1:02d}-{day_number:02d}"
        cells.append(DayCell(day_number=day_number, date=date_str, has_events=date_str in dates))

    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)
    return MonthGrid(
        year=year,
        month=month,
        first_weekday=start,
        days_in_month=total_days,
        cells=cells,
        previous=MonthRef(year=prev_year, month=prev_month),
        next=MonthRef(year=next_year, month=next_month),
    )
