"""
Filter-sort pipeline producing the list of lines to display.
"""

import locale
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .classifier import Classifier
from .dedupe import ingest
from .logging_config import get_logger
from .models import ClassifierConfig, Line, LineSet, QueryState, SearchConfig
from .search import SearchIndex, build_index
from .validation import safe_read_file, validate_file_path

logger = get_logger(__name__)


def collation_key(text: str) -> Tuple[str, str]:
    """
    Locale-aware sort key.

    Compares case-insensitively under the current LC_COLLATE first; on a
    tie, lowercase sorts before uppercase.
    """
    # strxfrm rejects embedded NULs
    folded = text.casefold().replace("\x00", "")
    return locale.strxfrm(folded), text.swapcase()


def sort_alphabetically(lines: Iterable[Line]) -> List[Line]:
    return sorted(lines, key=lambda line: collation_key(line.text))


def view(index: SearchIndex, lineset: LineSet, state: QueryState) -> List[Line]:
    """
    Compute the lines to display for the given query state.

    Args:
        index: Search index built over ``lineset``
        lineset: Authoritative set of lines
        state: Query text and visibility toggles

    Returns:
        Matching lines, in relevance order (or input order for an empty
        query), or alphabetical order when ``state.alphabetical_sort`` is set
    """
    visible = []
    for candidate in index.search(state.query):
        line = lineset.get(candidate.text)
        if line is None:
            # index built from a different LineSet
            continue
        if state.hide_basic and line.basic:
            continue
        if state.hide_special and line.special:
            continue
        visible.append(line)

    if state.alphabetical_sort:
        visible = sort_alphabetically(visible)
    return visible


class LineBrowser:
    """
    Holds the lines of the currently loaded file and answers view queries.

    Loading a file replaces the LineSet and its search index together.
    """

    def __init__(
        self,
        classifier_config: Optional[ClassifierConfig] = None,
        search_config: Optional[SearchConfig] = None,
    ):
        self.classifier = Classifier(classifier_config)
        self.search_config = search_config or SearchConfig()
        empty = LineSet()
        self._snapshot = (empty, build_index(empty, self.search_config))

    @property
    def lineset(self) -> LineSet:
        return self._snapshot[0]

    @property
    def index(self) -> SearchIndex:
        return self._snapshot[1]

    def snapshot(self) -> Tuple[LineSet, SearchIndex]:
        """The current (LineSet, SearchIndex) pair."""
        return self._snapshot

    def load_text(self, content: str) -> LineSet:
        """Replace the loaded lines with those of ``content``."""
        lineset = ingest(content, self.classifier)
        self._snapshot = (lineset, build_index(lineset, self.search_config))
        logger.info(f"Loaded {len(lineset)} unique lines")
        return lineset

    def load_file(self, file_path: Union[str, Path], encoding: str = "utf-8") -> LineSet:
        """Read a text file and load its lines."""
        path = validate_file_path(file_path)
        content = safe_read_file(path, encoding=encoding)
        logger.info(f"Read {len(content)} characters from {path}")
        return self.load_text(content)

    def view(self, state: Optional[QueryState] = None) -> List[Line]:
        lineset, index = self._snapshot
        return view(index, lineset, state or QueryState())

    def get_stats(self) -> dict:
        lineset = self.lineset
        return {
            "total_lines": len(lineset),
            "basic_lines": sum(1 for line in lineset if line.basic),
            "special_lines": sum(1 for line in lineset if line.special),
            "search_threshold": self.search_config.threshold,
        }
