"""Typed models shared across the application."""

from .question import (
    KNOWN_CATEGORIES,
    CategoriesResponse,
    ErrorResponse,
    GenerationMode,
    PromptRequest,
    QuestionPair,
    QuestionRequest,
)

__all__ = [
    "KNOWN_CATEGORIES",
    "CategoriesResponse",
    "ErrorResponse",
    "GenerationMode",
    "PromptRequest",
    "QuestionPair",
    "QuestionRequest",
]
