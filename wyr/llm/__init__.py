"""LLM integration helpers."""

from .normalizer import MarkerPolicy, OrSeparatorPolicy, ResponseNormalizer, Tier
from .openai_client import OpenAIChatClient
from .question_generator import QuestionGenerator

__all__ = [
    "MarkerPolicy",
    "OpenAIChatClient",
    "OrSeparatorPolicy",
    "QuestionGenerator",
    "ResponseNormalizer",
    "Tier",
]
