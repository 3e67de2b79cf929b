from __future__ import annotations

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: str = Field(..., description="User message forwarded verbatim to the provider.")


class ChatResponse(BaseModel):
    reply: str = Field(..., description="Provider reply, or the fallback text on failure.")
    model: str = Field(..., description="Backend model identifier.")


class HealthResponse(BaseModel):
    status: str = Field(..., description="'healthy' or 'degraded'.")
    model: str = Field(..., description="Configured model identifier.")
    api_key_configured: bool = Field(..., description="True when a provider credential is set.")
    issues: list[str] = Field(default_factory=list, description="Reasons for a degraded status.")
