"""Current-user inference for chat transcripts."""

from chat_analytics.identity.resolver import (
    is_system_actor,
    normalize_user,
    resolve_telegram_user,
    resolve_whatsapp_user,
)

__all__ = [
    "normalize_user",
    "resolve_whatsapp_user",
    "resolve_telegram_user",
    "is_system_actor",
]
