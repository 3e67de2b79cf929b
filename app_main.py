from __future__ import annotations

import logging
import sys
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


PROJECT_ROOT = Path(__file__).resolve().parent
API_CODE_PATH = PROJECT_ROOT / "api-code"
if str(API_CODE_PATH) not in sys.path:
    sys.path.insert(0, str(API_CODE_PATH))

from env_loader import load_local_env  # noqa: E402
from routers import build_chat_router, build_health_router  # noqa: E402
from services import ChatCompletionService  # noqa: E402
from settings import Settings, get_settings  # noqa: E402


load_local_env()
settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("chat-relay")


def create_app(app_settings: Settings) -> FastAPI:
    """Build the relay application around a single chat service instance."""
    application = FastAPI(
        title="Chat Relay API",
        version="0.1.0",
        description="Server-side relay between the site chat widget and the completion provider.",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    chat_service = ChatCompletionService(
        app_settings.chat_api_key,
        api_url=app_settings.chat_api_url,
        model_name=app_settings.chat_model,
    )
    if not chat_service.api_key:
        logger.warning("CHAT_API_KEY is not set; every chat request will get the fallback reply.")

    application.include_router(build_chat_router(chat_service))
    application.include_router(build_health_router(chat_service))
    return application


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app_main:app", host="0.0.0.0", port=9001, reload=True)
