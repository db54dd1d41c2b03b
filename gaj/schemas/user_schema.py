from pydantic import BaseModel
from typing import List, Optional

# Campos obrigatórios são validados no user_service para manter as
# mensagens de erro da API (400 com {"error": ...}).

class UserCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    cpf: Optional[str] = None
    approved: bool = False
    is_admin: bool = False

class UserOut(BaseModel):
    id: int
    name: str
    email: str
    cpf: Optional[str] = None
    is_admin: bool
    approved: bool

    class Config:
        from_attributes = True

class UserPublic(BaseModel):
    id: int
    name: str
    email: str
    is_admin: bool

    class Config:
        from_attributes = True

class UserList(BaseModel):
    users: List[UserOut]

class UserCreated(BaseModel):
    success: bool = True
    id: int
    message: str

class UserIdIn(BaseModel):
    id: Optional[int] = None

class UserAction(BaseModel):
    success: bool = True
    message: str

class AdminToggled(BaseModel):
    success: bool = True
    id: int
    is_admin: bool

class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class LoginOut(BaseModel):
    success: bool = True
    user: UserPublic
    access_token: str
    token_type: str = "bearer"

class CurrentUser(BaseModel):
    user: UserPublic
