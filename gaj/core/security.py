"""
Senhas e tokens de sessão

Senhas armazenadas podem estar em dois formatos: hash bcrypt ou texto
puro (linhas legadas). O formato é resolvido pelo passlib no momento da
verificação; senhas legadas são convertidas para hash no primeiro login.
"""
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from jose import JWTError, jwt
from passlib.context import CryptContext

from gaj.core.config import settings
from gaj.core.errors import Unauthorized

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


@dataclass(frozen=True)
class PlaintextPassword:
    value: str

    def matches(self, password: str) -> bool:
        return secrets.compare_digest(self.value.encode("utf-8"), password.encode("utf-8"))


@dataclass(frozen=True)
class HashedPassword:
    digest: str

    def matches(self, password: str) -> bool:
        try:
            return pwd_context.verify(password, self.digest)
        except (ValueError, TypeError):
            logger.warning("Hash de senha armazenado está corrompido")
            return False


StoredPassword = Union[PlaintextPassword, HashedPassword]


def parse_stored_password(stored: Optional[str]) -> StoredPassword:
    """Identifica o formato da senha armazenada"""
    stored = stored or ""
    if pwd_context.identify(stored, required=False):
        return HashedPassword(stored)
    return PlaintextPassword(stored)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: Optional[str], stored: Optional[str]) -> bool:
    if not password:
        return False
    return parse_stored_password(stored).matches(password)


def password_needs_update(stored: Optional[str]) -> bool:
    """Verdadeiro para senhas em texto puro ou hashes com parâmetros obsoletos"""
    parsed = parse_stored_password(stored)
    if isinstance(parsed, PlaintextPassword):
        return True
    return pwd_context.needs_update(parsed.digest)


def create_access_token(user_id: int, is_admin: bool, expires_delta: Optional[timedelta] = None) -> str:
    expires = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload = {"sub": str(user_id), "is_admin": bool(is_admin), "exp": expires}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise Unauthorized("Token inválido ou expirado")
    if payload.get("sub") is None:
        raise Unauthorized("Token inválido ou expirado")
    return payload
