"""
Status e health check da API
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gaj.core.config import settings
from gaj.core.dependencies import get_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="",
    tags=["Health Check"],
)


def _check_database(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Erro ao conectar com banco de dados: {e}")
        return False


@router.get("/", summary="Status do servidor")
def root():
    return {"message": "Servidor GAJ rodando"}


@router.get("/info", summary="Nome e versão da API")
def info():
    return {
        "message": "Servidor GAJ rodando",
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@router.get(
    "/health/",
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Verifica o status da API e conectividade com o banco de dados"
)
def health_check(db: Session = Depends(get_db)):
    db_status = "healthy" if _check_database(db) else "unhealthy"
    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
        "database": {
            "status": db_status
        },
        "rate_limiting": {
            "enabled": settings.RATE_LIMIT_ENABLED,
            "login_limit": settings.LOGIN_RATE_LIMIT
        },
        "admin_auth_enforced": settings.ENFORCE_ADMIN_AUTH,
    }


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness Check",
    description="Verifica se a API está pronta para receber requisições"
)
def readiness_check(db: Session = Depends(get_db)):
    timestamp = datetime.now(timezone.utc).isoformat()
    if _check_database(db):
        return {"status": "ready", "timestamp": timestamp}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "timestamp": timestamp},
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness Check",
)
def liveness_check():
    return {
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
