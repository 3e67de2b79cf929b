from __future__ import annotations

from fastapi import APIRouter

from schemas import ChatRequest, ChatResponse
from services import ChatCompletionService


def build_chat_router(chat_service: ChatCompletionService) -> APIRouter:
    """Create the chat router wired to the provided chat service."""
    router = APIRouter(prefix="/api/v1", tags=["chat"])

    @router.post("/chat", response_model=ChatResponse)
    async def chat_endpoint(payload: ChatRequest) -> ChatResponse:
        reply = await chat_service.ask(payload.message)
        return ChatResponse(reply=reply, model=chat_service.model_name)

    return router
