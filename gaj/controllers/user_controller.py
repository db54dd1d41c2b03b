from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from gaj.core.config import settings
from gaj.core.dependencies import get_current_user, get_db, get_optional_user, require_admin
from gaj.core.errors import ValidationError
from gaj.core.rate_limit import limiter
from gaj.core.security import create_access_token
from gaj.models import user_model
from gaj.schemas import user_schema
from gaj.services import user_service

router = APIRouter(
    prefix="",
    tags=["Usuários"],
)


def _require_id(payload: Optional[user_schema.UserIdIn]) -> int:
    if payload is None or payload.id is None:
        raise ValidationError("Campo id é requerido")
    return payload.id


# Login
@router.post("/login", response_model=user_schema.LoginOut)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
def login(
    request: Request,
    payload: user_schema.LoginIn,
    db: Session = Depends(get_db)
):
    user = user_service.authenticate(db, payload.email, payload.password)
    token = create_access_token(user.id, user.is_admin)
    return user_schema.LoginOut(
        user=user_schema.UserPublic.model_validate(user),
        access_token=token,
    )


# Cadastro público e criação pelo painel admin
@router.post("/users", response_model=user_schema.UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: user_schema.UserCreate,
    db: Session = Depends(get_db),
    current_user: Optional[user_model.User] = Depends(get_optional_user),
):
    """
    Sem autorização obrigatória, as flags approved/is_admin do corpo são
    respeitadas. Com ENFORCE_ADMIN_AUTH ligado, só um admin autenticado
    pode defini-las; os demais caem no cadastro público pendente.
    """
    caller_is_admin = current_user is not None and current_user.is_admin
    if settings.ENFORCE_ADMIN_AUTH and not caller_is_admin:
        user = user_service.register(db, user_in)
    else:
        user = user_service.create_by_admin(db, user_in)

    message = "Usuário criado e aprovado" if user.approved else "Cadastro enviado, aguarde aprovação"
    return user_schema.UserCreated(id=user.id, message=message)


@router.get("/users/pending", response_model=user_schema.UserList, dependencies=[Depends(require_admin)])
def list_pending_users(db: Session = Depends(get_db)):
    return user_schema.UserList(users=user_service.list_pending(db))


# Aberta: alimenta a lista de advogados no formulário de agendamento
@router.get("/users/approved", response_model=user_schema.UserList)
def list_approved_users(db: Session = Depends(get_db)):
    return user_schema.UserList(users=user_service.list_approved(db))


@router.get("/users/me", response_model=user_schema.CurrentUser)
def read_users_me(
    current_user: user_model.User = Depends(get_current_user)
):
    return user_schema.CurrentUser(user=user_schema.UserPublic.model_validate(current_user))


@router.put("/users/approve", response_model=user_schema.UserAction, dependencies=[Depends(require_admin)])
def approve_user(
    payload: Optional[user_schema.UserIdIn] = None,
    db: Session = Depends(get_db),
):
    user_service.approve(db, _require_id(payload))
    return user_schema.UserAction(message="Usuário aprovado")


@router.delete("/users/reject", response_model=user_schema.UserAction, dependencies=[Depends(require_admin)])
def reject_user(
    payload: Optional[user_schema.UserIdIn] = None,
    db: Session = Depends(get_db),
):
    user_service.reject(db, _require_id(payload))
    return user_schema.UserAction(message="Usuário removido")


@router.put("/users/admin", response_model=user_schema.AdminToggled, dependencies=[Depends(require_admin)])
def toggle_user_admin(
    payload: Optional[user_schema.UserIdIn] = None,
    db: Session = Depends(get_db),
):
    user_id = _require_id(payload)
    is_admin = user_service.toggle_admin(db, user_id)
    return user_schema.AdminToggled(id=user_id, is_admin=is_admin)
