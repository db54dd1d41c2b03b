import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gaj.core.config import settings
from gaj.core.errors import DuplicateEmail, InvalidCredentials, NotFound, PendingApproval, ValidationError
from gaj.core.security import (
    PlaintextPassword,
    hash_password,
    parse_stored_password,
    password_needs_update,
    verify_password,
)
from gaj.models import user_model
from gaj.schemas import user_schema

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def get_user(db: Session, user_id: int) -> user_model.User:
    user = db.get(user_model.User, user_id)
    if not user:
        raise NotFound("Usuário não encontrado")
    return user


def get_user_by_email(db: Session, email: str) -> Optional[user_model.User]:
    return db.query(user_model.User).filter(user_model.User.email == email).first()


def _insert_user(
    db: Session,
    user_in: user_schema.UserCreate,
    approved: bool,
    is_admin: bool,
) -> user_model.User:
    if _is_blank(user_in.name) or _is_blank(user_in.email) or _is_blank(user_in.password):
        raise ValidationError("Campos name, email e password são requeridos")
    if get_user_by_email(db, user_in.email):
        raise DuplicateEmail()

    db_user = user_model.User(
        name=user_in.name,
        email=user_in.email,
        password=hash_password(user_in.password),
        cpf=user_in.cpf or "",
        approved=approved,
        is_admin=is_admin,
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # outra requisição gravou o mesmo email entre a consulta e o insert
        db.rollback()
        raise DuplicateEmail()
    db.refresh(db_user)
    logger.info(f"Usuário {db_user.id} criado (approved={approved}, is_admin={is_admin})")
    return db_user


def register(db: Session, user_in: user_schema.UserCreate) -> user_model.User:
    """Cadastro público: sempre pendente de aprovação e sem privilégios"""
    return _insert_user(db, user_in, approved=False, is_admin=False)


def create_by_admin(db: Session, user_in: user_schema.UserCreate) -> user_model.User:
    """Cadastro pelo painel admin: flags definidas por quem chama"""
    return _insert_user(db, user_in, approved=user_in.approved, is_admin=user_in.is_admin)


def list_approved(db: Session) -> List[user_model.User]:
    return (
        db.query(user_model.User)
        .filter(user_model.User.approved == True)
        .order_by(user_model.User.id)
        .all()
    )


def list_pending(db: Session) -> List[user_model.User]:
    return (
        db.query(user_model.User)
        .filter(user_model.User.approved == False)
        .order_by(user_model.User.id)
        .all()
    )


def approve(db: Session, user_id: int) -> user_model.User:
    user = get_user(db, user_id)
    if not user.approved:
        user.approved = True
        db.commit()
        db.refresh(user)
        logger.info(f"Usuário {user_id} aprovado")
    return user


def reject(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info(f"Usuário {user_id} removido")


def toggle_admin(db: Session, user_id: int) -> bool:
    user = get_user(db, user_id)
    user.is_admin = not user.is_admin
    db.commit()
    db.refresh(user)
    logger.info(f"Usuário {user_id} is_admin={user.is_admin}")
    return user.is_admin


def authenticate(db: Session, email: Optional[str], password: Optional[str]) -> user_model.User:
    """
    Autentica por email e senha.

    A ordem das verificações distingue usuário inexistente, pendente e
    senha incorreta, como o front-end espera.
    """
    if _is_blank(email) or not password:
        raise ValidationError("Email e password são requeridos")

    user = get_user_by_email(db, email)
    if not user:
        raise NotFound("Usuário não encontrado")
    if not user.approved:
        raise PendingApproval()
    if not verify_password(password, user.password):
        logger.warning(f"Senha incorreta para o usuário {user.id}")
        raise InvalidCredentials()

    if password_needs_update(user.password):
        user.password = hash_password(password)
        db.commit()
        db.refresh(user)
        logger.info(f"Senha do usuário {user.id} convertida para hash")
    return user


def ensure_default_admin(db: Session) -> user_model.User:
    """Cria o admin padrão ou converte sua senha legada para hash"""
    admin = get_user_by_email(db, settings.ADMIN_EMAIL)
    if not admin:
        admin = create_by_admin(
            db,
            user_schema.UserCreate(
                name=settings.ADMIN_NAME,
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
                approved=True,
                is_admin=True,
            ),
        )
        logger.info(f"Admin padrão '{settings.ADMIN_EMAIL}' criado")
    else:
        stored = parse_stored_password(admin.password)
        if isinstance(stored, PlaintextPassword) and stored.value:
            admin.password = hash_password(stored.value)
            db.commit()
            db.refresh(admin)
            logger.info("Senha do admin existente convertida para hash")
    return admin
