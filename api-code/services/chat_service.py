from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Union

import aiohttp


logger = logging.getLogger("chat-relay.chat")

DEFAULT_API_URL = "https://api.deepseek.com/v1/chat/completions"
DEFAULT_MODEL_NAME = "deepseek-chat"
FALLBACK_REPLY = "Lo siento, ocurrió un error :("


class ChatCompletionError(RuntimeError):
    """Base class for failures talking to the chat-completion endpoint."""


class ChatTransportError(ChatCompletionError):
    """Raised when the request never produced an HTTP response."""


class ChatStatusError(ChatCompletionError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status: int, detail: str = "") -> None:
        self.status = status
        self.detail = detail
        message = f"chat endpoint returned HTTP {status}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ChatPayloadError(ChatCompletionError):
    """Raised when the response body is not a usable completion envelope."""


class ChatCompletionService:
    """Forwards one user message to an OpenAI-compatible endpoint.

    ``ask`` always returns a string; failures are logged and replaced by
    ``FALLBACK_REPLY``. ``complete`` is the raising variant.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        api_url: str = DEFAULT_API_URL,
        model_name: str = DEFAULT_MODEL_NAME,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.model_name = model_name

    async def ask(self, message: str) -> str:
        if not self.api_key:
            logger.warning("CHAT_API_KEY missing; returning fallback reply.")
            return FALLBACK_REPLY

        try:
            return await self.complete(message)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Chat completion failed, using fallback: %s", exc)
            return FALLBACK_REPLY

    async def complete(self, message: str) -> str:
        payload = self.build_payload(message)
        # total=None: the call runs until the endpoint answers or the connection fails.
        timeout = aiohttp.ClientTimeout(total=None)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.api_url, json=payload, headers=self._headers()
                ) as response:
                    body = await response.read()
                    if response.status < 200 or response.status >= 300:
                        detail = body[:200].decode("utf-8", errors="replace")
                        raise ChatStatusError(response.status, detail)
        except aiohttp.ClientError as exc:
            raise ChatTransportError(str(exc) or exc.__class__.__name__) from exc

        return self.extract_reply(body)

    def build_payload(self, message: str) -> Dict[str, Any]:
        return {
            "model": self.model_name,
            "messages": [{"role": "user", "content": message}],
        }

    @staticmethod
    def extract_reply(raw: Union[bytes, str]) -> str:
        """Return ``choices[0].message.content`` from a completion body."""
        try:
            text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        except UnicodeDecodeError as exc:
            raise ChatPayloadError(f"response is not valid UTF-8: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ChatPayloadError(f"response is not JSON: {exc}") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ChatPayloadError(f"unexpected completion shape: {exc!r}") from exc

        if not isinstance(content, str):
            raise ChatPayloadError(
                f"completion content is {type(content).__name__}, expected str"
            )
        return content

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
