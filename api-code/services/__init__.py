from .chat_service import (
    FALLBACK_REPLY,
    ChatCompletionError,
    ChatCompletionService,
    ChatPayloadError,
    ChatStatusError,
    ChatTransportError,
)

__all__ = [
    "FALLBACK_REPLY",
    "ChatCompletionError",
    "ChatCompletionService",
    "ChatPayloadError",
    "ChatStatusError",
    "ChatTransportError",
]
