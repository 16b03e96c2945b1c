"""Prompt templates for the question generation stage."""

from __future__ import annotations

from typing import Any, Dict

from wyr.models.question import GenerationMode, PromptRequest

SYSTEM_PROMPT = """You write "Would You Rather" questions for a party game.
Each question offers exactly two options that are roughly equally tempting.
Keep every option short, playful, and suitable for a general audience."""

QUESTION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "optionA": {"type": "string"},
        "optionB": {"type": "string"},
    },
    "required": ["optionA", "optionB"],
    "additionalProperties": False,
}


def build_free_text_prompt(category: str) -> str:
    return f"""Generate a unique "Would You Rather" question with two distinct options.
The response should be in the format: "A: [Option A Text] OR B: [Option B Text]".
The text for Option A and Option B can include Markdown formatting like **bold** or *italics*.
The category is: {category}."""


def build_structured_prompt(category: str) -> str:
    return f"""Generate a unique "Would You Rather" question with two distinct options.
The two options must be balanced so that neither is an obvious choice.
Keep both options positive or playful; avoid sad, cruel, or negative scenarios.
Return only the two option texts, without the "Would you rather" lead-in.
The category is: {category}."""


def build(category: str, mode: GenerationMode) -> PromptRequest:
    """Assemble the generation request for a category in the given mode."""
    if mode is GenerationMode.STRUCTURED:
        return PromptRequest(
            category=category,
            mode=mode,
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_structured_prompt(category),
            response_schema=QUESTION_SCHEMA,
        )
    return PromptRequest(
        category=category,
        mode=mode,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=build_free_text_prompt(category),
    )
