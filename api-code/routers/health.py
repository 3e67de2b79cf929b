from __future__ import annotations

from fastapi import APIRouter

from schemas import HealthResponse
from services import ChatCompletionService


def build_health_router(chat_service: ChatCompletionService) -> APIRouter:
    router = APIRouter()

    @router.get("/healthz", response_model=HealthResponse)
    async def healthcheck() -> HealthResponse:
        issues = []
        if not chat_service.api_key:
            issues.append("CHAT_API_KEY is not configured.")

        return HealthResponse(
            status="healthy" if not issues else "degraded",
            model=chat_service.model_name,
            api_key_configured=bool(chat_service.api_key),
            issues=issues,
        )

    return router
