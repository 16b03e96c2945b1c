"""Question request/response models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

KNOWN_CATEGORIES: List[str] = [
    "General",
    "Silly Superpowers",
    "Food",
    "Travel",
    "Fantasy",
    "Tech",
    "Life Dilemmas",
    "Humorous",
    "Sports",
    "Dollar Dilemma",
    "Pop Culture",
    "Ethical Dilemmas",
    "Nature & Animals",
    "Serious Superpower",
]


class GenerationMode(str, Enum):
    """How the model is asked to format its answer."""

    FREE_TEXT = "free_text"
    STRUCTURED = "structured"


class PromptRequest(BaseModel):
    """Everything the generation service needs for one question."""

    model_config = ConfigDict(frozen=True)

    category: str
    mode: GenerationMode
    system_prompt: str
    user_prompt: str
    response_schema: Optional[Dict[str, Any]] = None


class QuestionPair(BaseModel):
    """The two options returned to the caller."""

    optionA: str = Field(..., min_length=1)
    optionB: str = Field(..., min_length=1)


class QuestionRequest(BaseModel):
    """Incoming payload; every field is optional."""

    category: Optional[str] = None
    mode: Optional[GenerationMode] = None

    @field_validator("category", mode="before")
    @classmethod
    def _ignore_non_string_category(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("mode", mode="before")
    @classmethod
    def _ignore_unknown_mode(cls, value: Any) -> Optional[GenerationMode]:
        if value is None:
            return None
        try:
            return GenerationMode(value)
        except (TypeError, ValueError):
            return None


class CategoriesResponse(BaseModel):
    """Categories offered to clients."""

    categories: List[str]
    default: str


class ErrorResponse(BaseModel):
    """Failure envelope returned instead of a question pair."""

    message: str
    details: Optional[str] = None
