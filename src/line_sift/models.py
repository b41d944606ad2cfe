"""
Data models for line classification, search and viewing.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .constants import (
    DEFAULT_BASIC_PREFIXES,
    DEFAULT_MAX_BASIC_TOKENS,
    DEFAULT_SEARCH_THRESHOLD,
    DEFAULT_SPECIAL_PATTERNS,
    MASK_CHAR,
)


class PatternKind(Enum):
    """Enumeration of special-line pattern kinds."""

    REGEX = "regex"
    LITERAL = "literal"


@dataclass(frozen=True)
class Classification:
    """Flags computed for a single line of text."""

    basic: bool
    special: bool


@dataclass(frozen=True)
class Line:
    """One deduplicated, classified line of an ingested file."""

    text: str
    basic: bool = False
    special: bool = False

    @property
    def masked(self) -> str:
        """The text with every character replaced by the mask character."""
        return MASK_CHAR * len(self.text)

    def display(self, reveal: bool = False) -> str:
        """Return the form of the line that is safe to render."""
        if self.special and not reveal:
            return self.masked
        return self.text

    def __str__(self) -> str:
        return self.display()


class LineSet:
    """
    Ordered, immutable collection of unique lines.

    Lines keep the order they were given in. A LineSet is never mutated;
    loading a new file produces a new one.
    """

    def __init__(self, lines: Iterable[Line] = ()):
        self._lines = tuple(lines)
        self._by_text: Dict[str, Line] = {line.text: line for line in self._lines}
        if len(self._by_text) != len(self._lines):
            raise ValueError("LineSet entries must have unique text")

    def get(self, text: str) -> Optional[Line]:
        """Look up a line by its text, returning None when absent."""
        return self._by_text.get(text)

    def texts(self) -> List[str]:
        return [line.text for line in self._lines]

    def __contains__(self, text: object) -> bool:
        return text in self._by_text

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: Union[int, slice]) -> Union[Line, "LineSet"]:
        """A single Line for an integer index, a new LineSet for a slice."""
        if isinstance(index, slice):
            return LineSet(self._lines[index])
        return self._lines[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineSet):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        basic = sum(1 for line in self._lines if line.basic)
        special = sum(1 for line in self._lines if line.special)
        return f"LineSet(lines={len(self._lines)}, basic={basic}, special={special})"


@dataclass(frozen=True)
class QueryState:
    """Search text and visibility toggles driving a single view evaluation."""

    query: str = ""
    hide_basic: bool = False
    hide_special: bool = True
    alphabetical_sort: bool = False

    def replace(self, **changes) -> "QueryState":
        return dataclasses.replace(self, **changes)


@dataclass
class ClassifierConfig:
    """Configuration for line classification."""

    basic_prefixes: List[str] = None
    max_basic_tokens: int = DEFAULT_MAX_BASIC_TOKENS
    special_patterns: List[dict] = None

    def __post_init__(self):
        if self.basic_prefixes is None:
            self.basic_prefixes = list(DEFAULT_BASIC_PREFIXES)
        if self.special_patterns is None:
            self.special_patterns = [dict(p) for p in DEFAULT_SPECIAL_PATTERNS]


@dataclass
class SearchConfig:
    """Configuration for fuzzy search."""

    threshold: float = DEFAULT_SEARCH_THRESHOLD
    case_sensitive: bool = False


@dataclass
class ViewConfig:
    """Initial toggle values of the viewer."""

    hide_basic: bool = False
    hide_special: bool = True
    alphabetical_sort: bool = False

    def to_state(self, query: str = "") -> QueryState:
        return QueryState(
            query=query,
            hide_basic=self.hide_basic,
            hide_special=self.hide_special,
            alphabetical_sort=self.alphabetical_sort,
        )


@dataclass
class SearchHit:
    """A line matched by the search index with its similarity (0-100)."""

    line: Line
    score: float = 100.0
