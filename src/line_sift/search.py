"""
Fuzzy search over line text.

Similarity is an edit-distance based score from rapidfuzz in the range
0-100. The configured threshold follows the usual fuzzy-finder convention:
0.0 only accepts perfect matches, 1.0 accepts everything.
"""

from bisect import bisect_left
from typing import Iterable, List, Optional

from rapidfuzz import fuzz, process

from .exceptions import ConfigurationError
from .logging_config import get_logger
from .models import Line, SearchConfig, SearchHit

logger = get_logger(__name__)


class SearchIndex:
    """Immutable fuzzy-search index over a sequence of lines."""

    def __init__(self, lines: Iterable[Line], config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        threshold = self.config.threshold
        if not isinstance(threshold, (int, float)) or not 0.0 <= threshold <= 1.0:
            raise ConfigurationError(
                f"Search threshold must be between 0 and 1, got {threshold!r}"
            )

        self.min_score = round((1.0 - threshold) * 100.0, 6)
        self._lines = tuple(lines)

        # Keys ordered by length so one bisect splits lines shorter than
        # the query from the rest
        keys = [self._normalize(line.text) for line in self._lines]
        self._order = sorted(range(len(keys)), key=lambda i: len(keys[i]))
        self._sorted_keys = [keys[i] for i in self._order]
        self._lengths = [len(key) for key in self._sorted_keys]

    def _normalize(self, text: str) -> str:
        return text if self.config.case_sensitive else text.casefold()

    def _score(self, needle: str, keys: List[str], scorer, offset: int) -> List[tuple]:
        matches = process.extract(
            needle,
            keys,
            scorer=scorer,
            processor=None,
            score_cutoff=self.min_score,
            limit=None,
        )
        return [(self._order[offset + pos], score) for _, score, pos in matches]

    def rank(self, query: str) -> List[SearchHit]:
        """
        Score every indexed line against the query.

        Lines at least as long as the query are scored by their best-aligned
        substring (``partial_ratio``). Shorter lines are compared whole
        (``ratio``), so a long query does not "contain" every short line.

        Args:
            query: Search text; empty returns every line unranked

        Returns:
            Hits at or above the similarity cutoff, most similar first.
            Equal scores keep index order.
        """
        if not query:
            return [SearchHit(line) for line in self._lines]

        needle = self._normalize(query)
        split = bisect_left(self._lengths, len(needle))

        scored = self._score(needle, self._sorted_keys[split:], fuzz.partial_ratio, split)
        if split:
            scored += self._score(needle, self._sorted_keys[:split], fuzz.ratio, 0)

        scored.sort(key=lambda item: (-item[1], item[0]))
        hits = [SearchHit(self._lines[index], score) for index, score in scored]
        logger.debug(f"Query {query!r} matched {len(hits)}/{len(self._lines)} lines")
        return hits

    def search(self, query: str) -> List[Line]:
        return [hit.line for hit in self.rank(query)]

    def __len__(self) -> int:
        return len(self._lines)


def build_index(lines: Iterable[Line], config: Optional[SearchConfig] = None) -> SearchIndex:
    """Build a fresh search index over the given lines."""
    return SearchIndex(lines, config)
