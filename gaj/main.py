import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gaj.controllers import calendar_controller, health_controller, schedule_controller, user_controller
from gaj.core.config import settings
from gaj.core.dependencies import lifespan
from gaj.core.errors import GajError, InternalError
from gaj.core.rate_limit import RateLimitExceeded, limiter, rate_limit_exceeded_handler

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Cria a aplicação FastAPI com lifespan
app = FastAPI(title="GAJ Agenda API", version=settings.APP_VERSION, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Authorization"],
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


# --- Erros ---
@app.exception_handler(GajError)
async def gaj_error_handler(request: Request, exc: GajError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.warning(f"Validation error for {request.url.path}: {details}")
    return JSONResponse(status_code=400, content={"error": "JSON inválido", "details": details})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Erro de banco em {request.method} {request.url.path}", exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        logger.info(f"Rota não encontrada: {request.method} {request.url.path}")
        return JSONResponse(status_code=404, content={"error": "Rota não encontrada"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


# --- Endpoints ---
app.include_router(health_controller.router)
app.include_router(user_controller.router)
app.include_router(schedule_controller.router)
app.include_router(calendar_controller.router)
