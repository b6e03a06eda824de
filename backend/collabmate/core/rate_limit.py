# Rate limiting configuration for CollabMate
# Использует slowapi, чтобы один клиент не заваливал заявками и сообщениями

from slowapi import Limiter
from slowapi.util import get_remote_address


# Лимитер по IP адресу клиента
limiter = Limiter(key_func=get_remote_address)

RATE_LIMITS = {
    # Создание заявок и предложений обмена
    "request_create": "30/minute",
    # Решения по заявкам и обменам
    "request_decide": "60/minute",
    # Сообщения в ветке обмена
    "swap_messages": "120/minute",
    # Аутентификация
    "auth_operations": "20/minute",
}

__all__ = ["limiter", "RATE_LIMITS"]
