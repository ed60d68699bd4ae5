from typing import Any

import pytest

from food_identifier.settings import Settings


class FakeVisionClient:
    """Records calls and returns a canned reply instead of calling the API."""

    model_name = "fake-vision"

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[list[dict[str, Any]], int]] = []

    async def complete(self, messages: list[dict[str, Any]], max_tokens: int) -> str:
        self.calls.append((messages, max_tokens))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="test-key", openai_model="gpt-4o", max_tokens=1000)


@pytest.fixture
def pizza_reply() -> str:
    return '{"mainItem":"pizza","ingredients":["cheese"],"confidence":"high"}'
