"""
Line classifier flagging trivial ("basic") and likely-sensitive ("special") lines.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import PatternError
from .logging_config import get_logger
from .models import Classification, ClassifierConfig, PatternKind

logger = get_logger(__name__)


@dataclass(frozen=True)
class Pattern:
    """A special-line pattern: either a regular expression or a literal substring."""

    kind: PatternKind
    value: str
    ignore_case: bool = False
    _compiled: Optional[re.Pattern] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if self.kind is PatternKind.REGEX:
            flags = re.IGNORECASE if self.ignore_case else 0
            try:
                compiled = re.compile(self.value, flags)
            except re.error as e:
                raise PatternError(f"Invalid regex pattern '{self.value}': {e}")
            object.__setattr__(self, "_compiled", compiled)

    @classmethod
    def regex(cls, value: str, ignore_case: bool = True) -> "Pattern":
        return cls(PatternKind.REGEX, value, ignore_case)

    @classmethod
    def literal(cls, value: str, ignore_case: bool = False) -> "Pattern":
        return cls(PatternKind.LITERAL, value, ignore_case)

    @classmethod
    def from_dict(cls, spec: Dict[str, Any]) -> "Pattern":
        """
        Build a pattern from a config mapping.

        Accepted forms are ``{"regex": "..."}`` and ``{"literal": "..."}``,
        each with an optional ``ignore_case`` flag.
        """
        if not isinstance(spec, dict):
            raise PatternError(f"Pattern must be a mapping, got {type(spec).__name__}")

        kinds = [kind for kind in PatternKind if kind.value in spec]
        if len(kinds) != 1:
            raise PatternError(
                f"Pattern must have exactly one of 'regex' or 'literal': {spec}"
            )

        kind = kinds[0]
        value = spec[kind.value]
        if not isinstance(value, str) or not value:
            raise PatternError(f"Pattern {kind.value} must be a non-empty string")

        ignore_case = spec.get("ignore_case", kind is PatternKind.REGEX)
        if not isinstance(ignore_case, bool):
            raise PatternError(
                f"Pattern ignore_case must be a boolean, got {ignore_case!r}"
            )

        if kind is PatternKind.REGEX:
            return cls.regex(value, ignore_case=ignore_case)
        return cls.literal(value, ignore_case=ignore_case)

    def matches(self, text: str) -> bool:
        if self.kind is PatternKind.REGEX:
            return self._compiled.search(text) is not None
        if self.ignore_case:
            return self.value.casefold() in text.casefold()
        return self.value in text

    def to_dict(self) -> Dict[str, Any]:
        return {self.kind.value: self.value, "ignore_case": self.ignore_case}


class Classifier:
    """Classifies lines as basic and/or special using configurable rules."""

    def __init__(
        self,
        config: Optional[ClassifierConfig] = None,
        patterns: Optional[Iterable[Pattern]] = None,
    ):
        """
        Initialize classifier from configuration.

        Args:
            config: Classifier configuration (prefixes, token limit, patterns)
            patterns: Pre-built special patterns; overrides config.special_patterns
        """
        self.config = config or ClassifierConfig()
        self.basic_prefixes = tuple(self.config.basic_prefixes)
        self.max_basic_tokens = self.config.max_basic_tokens

        if patterns is not None:
            self.patterns: List[Pattern] = list(patterns)
        else:
            self.patterns = [Pattern.from_dict(p) for p in self.config.special_patterns]

        logger.debug(
            f"Classifier ready with {len(self.basic_prefixes)} prefixes "
            f"and {len(self.patterns)} special patterns"
        )

    def is_basic(self, text: str) -> bool:
        """True for lines starting with a basic prefix or with very few tokens."""
        if self.basic_prefixes and text.startswith(self.basic_prefixes):
            return True
        return len(text.split()) <= self.max_basic_tokens

    def is_special(self, text: str) -> bool:
        """True if any special pattern matches the line."""
        return any(pattern.matches(text) for pattern in self.patterns)

    def classify(self, text: str) -> Classification:
        return Classification(basic=self.is_basic(text), special=self.is_special(text))

    def get_stats(self) -> dict:
        """Get classifier statistics."""
        return {
            "basic_prefixes": list(self.basic_prefixes),
            "max_basic_tokens": self.max_basic_tokens,
            "special_patterns": [p.to_dict() for p in self.patterns],
        }


_default_classifier: Optional[Classifier] = None


def get_default_classifier() -> Classifier:
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = Classifier()
    return _default_classifier


def classify(text: str) -> Classification:
    """Classify text with the default rules."""
    return get_default_classifier().classify(text)
