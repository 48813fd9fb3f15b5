from __future__ import annotations

import json
from typing import Callable, Dict, List

import httpx
import pytest

from mock_generator.config import Config

COMPLETIONS_URL = "https://llm.test/v1/chat/completions"


def completion_payload(*contents: str) -> Dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": index,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
            for index, content in enumerate(contents)
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 8, "total_tokens": 20},
    }


class FakeUpstream:
    """Records outbound calls and answers them from a route table."""

    def __init__(self) -> None:
        self.calls: List[httpx.Request] = []
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def route(self, url: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[url] = handler

    def completion(self, *contents: str) -> None:
        self.route(COMPLETIONS_URL, lambda request: httpx.Response(200, json=completion_payload(*contents)))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self.routes.get(str(request.url))
        if handler is None:
            return httpx.Response(404, text="not found")
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def completion_bodies(self) -> List[Dict]:
        return [json.loads(call.content) for call in self.calls if str(call.url) == COMPLETIONS_URL]


@pytest.fixture
def app_config(monkeypatch) -> Config:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://llm.test/")
    monkeypatch.setenv("OPENAI_SYSTEM_PROMPT", "Be rude.")
    monkeypatch.setenv("TRACE_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    monkeypatch.delenv("OPENAI_MAX_TOKENS", raising=False)
    return Config()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()
