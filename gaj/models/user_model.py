from sqlalchemy import Column, Integer, String, Boolean
from gaj.core.database import Base

class User(Base):
    __tablename__ = "users"

    id        = Column(Integer, primary_key=True, index=True)
    name      = Column(String, nullable=False)
    email     = Column(String, unique=True, index=True, nullable=False)
    # hash bcrypt ou texto puro (legado)
    password  = Column(String, nullable=False)
    cpf       = Column(String, nullable=True, default="")
    is_admin  = Column(Boolean, default=False, nullable=False)
    approved  = Column(Boolean, default=False, nullable=False, index=True)
