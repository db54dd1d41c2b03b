from sqlalchemy import Column, Integer, String, Boolean
from gaj.core.database import Base

class Schedule(Base):
    __tablename__ = "schedules"

    id              = Column(Integer, primary_key=True, index=True)
    # advogado em texto livre (nome ou email), sem chave estrangeira para users
    lawyer          = Column(String, nullable=False)
    client          = Column(String, nullable=False)
    process_number  = Column(String, nullable=True, default="")
    online          = Column(Boolean, default=False, nullable=False)
    date            = Column(String(10), nullable=False, index=True)   # YYYY-MM-DD
    time            = Column(String(5), nullable=False)                # HH:MM
    notes           = Column(String, nullable=True, default="")
