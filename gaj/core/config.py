import re
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "gaj-agenda"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    SECRET_KEY: str
    DATABASE_URL: str = "sqlite:///./database.db"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    BCRYPT_ROUNDS: int = 10

    # Admin padrão criado no startup
    ADMIN_NAME: str = "Admin"
    ADMIN_EMAIL: str = "admin@admin.com"
    ADMIN_PASSWORD: str = "admin"

    # Quando falso, rotas administrativas não exigem token (comportamento legado)
    ENFORCE_ADMIN_AUTH: bool = False

    CORS_ORIGINS: str = "https://gaj-xi.vercel.app,http://localhost:5173,http://127.0.0.1:5173"

    # Janela de horários permitida para novos agendamentos
    SCHEDULE_START_TIME: str = "06:00"
    SCHEDULE_END_TIME: str = "18:00"

    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"

    @field_validator("SCHEDULE_START_TIME", "SCHEDULE_END_TIME")
    @classmethod
    def validate_window_bound(cls, value: str) -> str:
        if not re.fullmatch(r"([01]?\d|2[0-3]):([0-5]\d)", value):
            raise ValueError(f"horário inválido: {value!r} (esperado HH:MM)")
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
