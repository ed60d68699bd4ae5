import asyncio
import base64
import logging
from typing import Any, Protocol

import google.generativeai as genai  # type: ignore[import-untyped]
from openai import AsyncOpenAI

from ..settings import Settings

logger = logging.getLogger(__name__)


class VisionClient(Protocol):
    """Anything that turns chat messages with an embedded image into reply text."""

    model_name: str

    async def complete(self, messages: list[dict[str, Any]], max_tokens: int) -> str: ...


class OpenAIVisionClient:
    def __init__(self, api_key: str, model_name: str) -> None:
        self.model_name = model_name
        self._client = AsyncOpenAI(api_key=api_key)

    async def complete(self, messages: list[dict[str, Any]], max_tokens: int) -> str:
        response = await self._client.chat.completions.create(
            model=self.model_name,
            messages=messages,  # type: ignore[arg-type]
            max_tokens=max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        await self._client.close()


def _split_data_uri(uri: str) -> tuple[str, bytes]:
    header, _, payload = uri.partition(",")
    mime_type = header.removeprefix("data:").split(";")[0] or "image/jpeg"
    return mime_type, base64.b64decode(payload)


class GeminiVisionClient:
    def __init__(self, api_key: str, model_name: str) -> None:
        self.model_name = model_name
        genai.configure(api_key=api_key)

    @staticmethod
    def _to_parts(messages: list[dict[str, Any]]) -> list[Any]:
        parts: list[Any] = []
        for message in messages:
            content = message.get("content")
            if isinstance(content, str):
                parts.append(content)
                continue
            for part in content or []:
                if part.get("type") == "text":
                    parts.append(part["text"])
                elif part.get("type") == "image_url":
                    mime_type, data = _split_data_uri(part["image_url"]["url"])
                    parts.append({"mime_type": mime_type, "data": data})
        return parts

    async def complete(self, messages: list[dict[str, Any]], max_tokens: int) -> str:
        model = genai.GenerativeModel(
            model_name=self.model_name,
            generation_config={"max_output_tokens": max_tokens},
        )
        parts = self._to_parts(messages)
        response = await asyncio.to_thread(model.generate_content, parts)
        return response.text


def build_vision_client(settings: Settings) -> VisionClient | None:
    """Build the process-wide client, or None when the credential is missing."""
    if not settings.api_key:
        return None

    if settings.vision_provider == "gemini":
        return GeminiVisionClient(settings.api_key, settings.gemini_vision_model)
    return OpenAIVisionClient(settings.api_key, settings.openai_model)
