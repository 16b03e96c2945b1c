"""Pytest configuration and fixtures."""

from types import SimpleNamespace
from typing import List, Optional

import pytest

from wyr.config import settings
from wyr.llm.normalizer import MarkerPolicy, OrSeparatorPolicy, ResponseNormalizer
from wyr.models.question import PromptRequest


def make_response(*texts: str, content_type: str = "output_text") -> SimpleNamespace:
    """Build an object shaped like an OpenAI Responses API reply."""
    content = [SimpleNamespace(type=content_type, text=text) for text in texts]
    return SimpleNamespace(output=[SimpleNamespace(type="message", content=content)] if texts else [])


class FakeClient:
    """Records prompt requests and replies with canned raw output."""

    def __init__(self, raw_output: str = "", error: Optional[Exception] = None) -> None:
        self.raw_output = raw_output
        self.error = error
        self.requests: List[PromptRequest] = []

    def invoke(self, request: PromptRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.raw_output


@pytest.fixture
def normalizer() -> ResponseNormalizer:
    return ResponseNormalizer(OrSeparatorPolicy(), MarkerPolicy())


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-test")
    return "sk-test"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)
