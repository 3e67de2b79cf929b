from .chat import ChatRequest, ChatResponse, HealthResponse

__all__ = ["ChatRequest", "ChatResponse", "HealthResponse"]
