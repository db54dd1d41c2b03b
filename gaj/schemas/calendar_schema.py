from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Union

class DayCell(BaseModel):
    kind: Literal["day"] = "day"
    day_number: int
    date: str
    has_events: bool

class EmptyCell(BaseModel):
    """Posição da grade antes do dia 1 ou depois do último dia do mês"""
    kind: Literal["empty"] = "empty"

CalendarCell = Annotated[Union[DayCell, EmptyCell], Field(discriminator="kind")]

class MonthRef(BaseModel):
    year: int
    month: int = Field(..., ge=0, le=11, description="Mês 0-indexado (0 = janeiro)")

class MonthGrid(BaseModel):
    year: int
    month: int
    first_weekday: int = Field(..., description="0 = domingo")
    days_in_month: int
    cells: List[CalendarCell]
    previous: MonthRef
    next: MonthRef
