"""Turn raw model output into a validated question pair.

The normalizer walks an ordered chain of extraction strategies, from the most
structured reading of the output to the loosest one. The first strategy that
yields two non-empty options wins; later strategies never refine an earlier
success. When nothing matches, a fixed default pair is returned, so
``normalize`` always produces a usable ``QuestionPair``.

Chain (structured mode prepends the JSON strategy):

    structured -> strict_pattern -> embedded_marker -> or_separator
    -> single_option -> default_pair
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from re import Pattern
from typing import Any, Callable, Dict, List, Optional, Tuple

from wyr.config import settings
from wyr.models.question import GenerationMode, QuestionPair

logger = logging.getLogger(__name__)

Options = Tuple[str, str]
Strategy = Callable[[Any], Optional[Options]]

DEFAULT_OPTION_A = "Would you rather always be 10 minutes late,"
DEFAULT_OPTION_B = "or always be 20 minutes early?"
FALLBACK_OPTION_B = "or a different challenge?"

MARKER_FLAGS = re.IGNORECASE | re.DOTALL


class Tier(str, Enum):
    """Extraction strategy that produced a pair."""

    STRUCTURED = "structured"
    STRICT_PATTERN = "strict_pattern"
    EMBEDDED_MARKER = "embedded_marker"
    OR_SEPARATOR = "or_separator"
    SINGLE_OPTION = "single_option"
    DEFAULT_PAIR = "default_pair"


@dataclass(frozen=True)
class OrSeparatorPolicy:
    """How the degraded path looks for an inline "or" between two options.

    The default is the literal, case-sensitive ``" or "``. ``word_boundary``
    matches the word ``or`` between any word boundaries instead, and
    ``ignore_case`` also accepts ``OR``/``Or``.
    """

    ignore_case: bool = False
    word_boundary: bool = False

    @classmethod
    def from_settings(cls) -> "OrSeparatorPolicy":
        return cls(
            ignore_case=settings.or_separator_ignore_case,
            word_boundary=settings.or_separator_word_boundary,
        )

    def compile(self) -> Pattern[str]:
        pattern = r"\bor\b" if self.word_boundary else re.escape(" or ")
        return re.compile(pattern, re.IGNORECASE if self.ignore_case else 0)


@dataclass(frozen=True)
class MarkerPolicy:
    """How the "A:", "OR" and "B:" markers are located in free text.

    By default the markers are matched literally, wherever they appear, so
    ``"QA: ..."`` carries an "A:" marker and ``"foreverB: ..."`` a "B:"
    marker. ``word_boundary`` only accepts "A:", "OR" and "B:" that start a
    word. "A:" and "OR" are case-insensitive; the embedded "B:" is not.
    """

    word_boundary: bool = False

    @classmethod
    def from_settings(cls) -> "MarkerPolicy":
        return cls(word_boundary=settings.marker_word_boundary)

    @property
    def _edge(self) -> str:
        return r"\b" if self.word_boundary else ""

    def strict_pattern(self) -> Pattern[str]:
        edge = self._edge
        return re.compile(rf"{edge}A:\s*(.*?)\s*{edge}OR\s*B:\s*(.*)", MARKER_FLAGS)

    def a_marker(self) -> Pattern[str]:
        return re.compile(rf"{self._edge}A:\s*(.*)", MARKER_FLAGS)

    def b_marker(self) -> Pattern[str]:
        return re.compile(rf"{self._edge}B:")


def _both(first: str, second: str) -> Optional[Options]:
    first, second = first.strip(), second.strip()
    if first and second:
        return first, second
    return None


def _split(rest: str, pattern: Pattern[str]) -> Optional[Options]:
    match = pattern.search(rest)
    if not match:
        return None
    return _both(rest[: match.start()], rest[match.end() :])


def decode_structured(raw: Any) -> Dict[str, Any]:
    """Best-effort decoding of a JSON object; returns {} when there is none."""
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, str):
        return {}

    text = raw.strip()
    try:
        decoded = json.loads(text)
    except ValueError:
        decoded = None

    # Fenced or chatty replies: retry on the outermost braces.
    if not isinstance(decoded, dict):
        start = text.find("{")
        end = text.rfind("}")
        if start != -1 and end > start:
            try:
                decoded = json.loads(text[start : end + 1])
            except ValueError:
                decoded = None

    return decoded if isinstance(decoded, dict) else {}


def from_structured(raw: Any) -> Optional[Options]:
    payload = decode_structured(raw)
    option_a = payload.get("optionA")
    option_b = payload.get("optionB")
    if isinstance(option_a, str) and isinstance(option_b, str):
        if option_a.strip() and option_b.strip():
            return option_a, option_b
    return None


def as_text(raw: Any) -> str:
    return raw if isinstance(raw, str) else ""


class ResponseNormalizer:
    """Applies the extraction chain for a given generation mode."""

    def __init__(
        self,
        or_policy: Optional[OrSeparatorPolicy] = None,
        marker_policy: Optional[MarkerPolicy] = None,
    ) -> None:
        self.or_policy = or_policy or OrSeparatorPolicy.from_settings()
        self.marker_policy = marker_policy or MarkerPolicy.from_settings()
        self._or_separator = self.or_policy.compile()
        self._strict = self.marker_policy.strict_pattern()
        self._a_marker = self.marker_policy.a_marker()
        self._b_marker = self.marker_policy.b_marker()

    def after_a_marker(self, text: str) -> Optional[str]:
        """Everything following the first "A:" marker, or None without one."""
        match = self._a_marker.search(text)
        return match.group(1) if match else None

    def from_strict_pattern(self, text: str) -> Optional[Options]:
        match = self._strict.search(text)
        if not match:
            return None
        return _both(match.group(1), match.group(2))

    def from_embedded_marker(self, text: str) -> Optional[Options]:
        rest = self.after_a_marker(text)
        return None if rest is None else _split(rest, self._b_marker)

    def from_or_separator(self, text: str) -> Optional[Options]:
        rest = self.after_a_marker(text)
        return None if rest is None else _split(rest, self._or_separator)

    def from_single_option(self, text: str) -> Optional[Options]:
        rest = self.after_a_marker(text)
        if rest is None or not rest.strip():
            return None
        return rest.strip(), FALLBACK_OPTION_B

    def strategies(self, mode: GenerationMode) -> List[Tuple[Tier, Strategy]]:
        chain: List[Tuple[Tier, Strategy]] = [
            (Tier.STRICT_PATTERN, lambda raw: self.from_strict_pattern(as_text(raw))),
            (Tier.EMBEDDED_MARKER, lambda raw: self.from_embedded_marker(as_text(raw))),
            (Tier.OR_SEPARATOR, lambda raw: self.from_or_separator(as_text(raw))),
            (Tier.SINGLE_OPTION, lambda raw: self.from_single_option(as_text(raw))),
        ]
        if mode is GenerationMode.STRUCTURED:
            chain.insert(0, (Tier.STRUCTURED, from_structured))
        return chain

    def extract(self, raw: Any, mode: GenerationMode) -> Tuple[QuestionPair, Tier]:
        """Return the pair together with the tier that produced it."""
        chain = self.strategies(mode)
        primary = chain[0][0]
        # A decoded object with unusable fields is never re-read as free text.
        if mode is GenerationMode.STRUCTURED and decode_structured(raw):
            chain = chain[:1]

        for tier, strategy in chain:
            options = strategy(raw)
            if options is None:
                continue
            self._report(tier, primary, raw)
            return QuestionPair(optionA=options[0], optionB=options[1]), tier

        self._report(Tier.DEFAULT_PAIR, primary, raw)
        return QuestionPair(optionA=DEFAULT_OPTION_A, optionB=DEFAULT_OPTION_B), Tier.DEFAULT_PAIR

    def normalize(self, raw: Any, mode: GenerationMode) -> QuestionPair:
        pair, _ = self.extract(raw, mode)
        return pair

    @staticmethod
    def _report(tier: Tier, primary: Tier, raw: Any) -> None:
        if tier is primary:
            logger.info("Parsed model output with tier=%s", tier.value)
            return
        logger.warning(
            "Model output degraded to tier=%s (expected %s). Raw output: %r",
            tier.value,
            primary.value,
            raw,
        )
