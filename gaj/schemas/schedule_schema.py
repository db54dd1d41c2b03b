from pydantic import BaseModel
from typing import List, Optional

class ScheduleCreate(BaseModel):
    lawyer: Optional[str] = None
    client: Optional[str] = None
    process_number: Optional[str] = None
    online: Optional[bool] = False
    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[str] = None

class ScheduleUpdate(BaseModel):
    # apenas "online" é alterável; demais campos enviados são ignorados
    online: Optional[bool] = None

class ScheduleOut(BaseModel):
    id: int
    lawyer: str
    client: str
    process_number: Optional[str] = None
    online: bool
    date: str
    time: str
    notes: Optional[str] = None

    class Config:
        from_attributes = True

class ScheduleList(BaseModel):
    schedules: List[ScheduleOut]

class ScheduleDetail(BaseModel):
    schedule: ScheduleOut

class SchedulesByDate(BaseModel):
    date: str
    schedules: List[ScheduleOut]

class ScheduleCreated(BaseModel):
    success: bool = True
    id: int
    message: str

class ScheduleUpdated(BaseModel):
    success: bool = True
    id: int
    online: bool

class ScheduleDeleted(BaseModel):
    success: bool = True
    message: str
