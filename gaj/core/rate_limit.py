"""
Rate limiting para a API

Aplicado nas tentativas de login. Desligado com RATE_LIMIT_ENABLED=false.
"""
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from gaj.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)

rate_limit_exceeded_handler = _rate_limit_exceeded_handler

__all__ = ["limiter", "RateLimitExceeded", "rate_limit_exceeded_handler"]
