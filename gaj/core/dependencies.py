# Dependências compartilhadas: sessão do banco, startup e autorização
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from gaj.core import database
from gaj.core.config import settings
from gaj.core.errors import Forbidden, Unauthorized
from gaj.core.security import decode_access_token
from gaj.models import schedule_model, user_model  # registra as tabelas no Base
from gaj.services import user_service

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)


# Lifespan handler para startup (cria tabelas e admin padrão)
@asynccontextmanager
async def lifespan(app: FastAPI):
    database.Base.metadata.create_all(bind=database.engine)
    db = database.SessionLocal()
    try:
        user_service.ensure_default_admin(db)
    except Exception as e:
        logger.error(f"Erro ao garantir admin padrão: {e}", exc_info=True)
        raise
    finally:
        db.close()
    yield


def get_db():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> user_model.User:
    if not token:
        raise Unauthorized()
    payload = decode_access_token(token)
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise Unauthorized("Token inválido ou expirado")
    user = db.get(user_model.User, user_id)
    # usuário removido ou rebaixado para pendente perde a sessão
    if user is None or not user.approved:
        raise Unauthorized()
    return user


async def get_current_active_admin(
    current_user: user_model.User = Depends(get_current_user)
) -> user_model.User:
    if not current_user.is_admin:
        raise Forbidden()
    return current_user


async def get_optional_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[user_model.User]:
    if not token:
        return None
    try:
        return await get_current_user(token, db)
    except Unauthorized:
        return None


async def require_admin(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[user_model.User]:
    """
    Exige um admin autenticado somente quando ENFORCE_ADMIN_AUTH está ligado.
    Desligado, as rotas administrativas ficam abertas como no sistema legado.
    """
    if not settings.ENFORCE_ADMIN_AUTH:
        return None
    user = await get_current_user(token, db)
    return await get_current_active_admin(user)
