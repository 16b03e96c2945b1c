"""Thin wrapper around the OpenAI Responses API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from openai import OpenAI, OpenAIError

from wyr.config import settings
from wyr.errors import ConfigurationError, ServiceError
from wyr.models.question import PromptRequest

logger = logging.getLogger(__name__)

SCHEMA_NAME = "would_you_rather_question"


class OpenAIChatClient:
    """Sends one prompt per call; the SDK's own retries are disabled."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        api_key = api_key or settings.openai_api_key
        if not api_key or not api_key.strip():
            raise ConfigurationError("OPENAI_API_KEY is not configured in the environment.")
        self.model = model or settings.openai_model_chat
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url or settings.openai_base_url,
            max_retries=0,
        )

    def invoke(
        self,
        request: PromptRequest,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        """Return the raw model text for ``request``."""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "temperature": settings.temperature if temperature is None else temperature,
            "max_output_tokens": max_output_tokens or settings.max_output_tokens,
            "input": [
                {"role": "system", "content": request.system_prompt},
                {"role": "user", "content": request.user_prompt},
            ],
        }
        if request.response_schema is not None:
            kwargs["text"] = {
                "format": {
                    "type": "json_schema",
                    "name": SCHEMA_NAME,
                    "schema": request.response_schema,
                    "strict": True,
                }
            }

        try:
            response = self.client.responses.create(**kwargs)
        except OpenAIError as exc:
            logger.error("Generation request failed: %s", exc)
            raise ServiceError(str(exc) or exc.__class__.__name__) from exc

        text = self._extract_text(response)
        if not text:
            logger.error("Generation response had no output text (model=%s)", self.model)
            raise ServiceError("Model response did not contain any output text.")
        return text

    @staticmethod
    def _extract_text(response) -> str:
        chunks: list[str] = []
        for item in getattr(response, "output", None) or []:
            for content in getattr(item, "content", None) or []:
                content_type = getattr(content, "type", None)
                content_text = getattr(content, "text", None)
                if isinstance(content, dict):
                    content_type = content.get("type", content_type)
                    content_text = content.get("text", content_text)
                if content_type in {"output_text", "text"} and content_text:
                    chunks.append(str(content_text))
        return "\n".join(part.strip() for part in chunks if part).strip()
