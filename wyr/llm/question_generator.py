"""Glue module that turns a category into a question pair."""

from __future__ import annotations

import logging
from typing import Optional

from wyr.config import settings
from wyr.llm import prompts
from wyr.llm.normalizer import ResponseNormalizer
from wyr.llm.openai_client import OpenAIChatClient
from wyr.models.question import GenerationMode, QuestionPair

logger = logging.getLogger(__name__)


class QuestionGenerator:
    """Runs build -> invoke -> normalize once per call."""

    def __init__(
        self,
        client: OpenAIChatClient | None = None,
        normalizer: ResponseNormalizer | None = None,
        mode: Optional[GenerationMode] = None,
    ) -> None:
        self.client = client or OpenAIChatClient()
        self.normalizer = normalizer or ResponseNormalizer()
        self.mode = mode or settings.generation_mode

    def generate(self, category: str, mode: Optional[GenerationMode] = None) -> QuestionPair:
        mode = mode or self.mode
        request = prompts.build(category, mode)
        logger.debug("Requesting %s question for category %r", mode.value, category)
        raw_output = self.client.invoke(request)
        return self.normalizer.normalize(raw_output, mode)
