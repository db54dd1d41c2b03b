"""Validações compartilhadas"""

import re
from typing import Any, Optional

from gaj.core.config import settings

# H:MM ou HH:MM, hora 00-23 e minuto 00-59
TIME_PATTERN = re.compile(r"([01]?\d|2[0-3]):([0-5]\d)")


def time_to_minutes(value: Any) -> Optional[int]:
    """
    Converte "HH:MM" em minutos desde a meia-noite.

    Returns:
        Minutos, ou None se o valor não for um horário válido
    """
    if not isinstance(value, str):
        return None
    match = TIME_PATTERN.fullmatch(value)
    if not match:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def is_valid_time(value: Any, start: Optional[str] = None, end: Optional[str] = None) -> bool:
    """
    Verifica se o horário está dentro da janela permitida (inclusiva nas duas pontas).

    Args:
        value: Horário no formato H:MM ou HH:MM
        start: Início da janela (padrão SCHEDULE_START_TIME)
        end: Fim da janela (padrão SCHEDULE_END_TIME)
    """
    minutes = time_to_minutes(value)
    if minutes is None:
        return False
    start_minutes = time_to_minutes(start or settings.SCHEDULE_START_TIME)
    end_minutes = time_to_minutes(end or settings.SCHEDULE_END_TIME)
    if start_minutes is None or end_minutes is None:
        return False
    return start_minutes <= minutes <= end_minutes
