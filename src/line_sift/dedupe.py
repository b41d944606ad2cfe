"""
Turn raw file content into a deduplicated, classified LineSet.
"""

from typing import Dict, Iterable, List, Optional

from .classifier import Classifier, get_default_classifier
from .logging_config import get_logger
from .models import Line, LineSet

logger = get_logger(__name__)


def split_lines(content: str) -> List[str]:
    """Split text on newlines, trim each line and drop blank ones."""
    stripped = (raw.strip() for raw in content.split("\n"))
    return [line for line in stripped if line]


def dedupe(lines: Iterable[str], classifier: Optional[Classifier] = None) -> LineSet:
    """
    Reduce raw lines to unique, classified lines.

    Lines are visited bottom-up so that, for repeated text, the occurrence
    nearest the top of the file is the one kept. The result is in first-seen
    (top-of-file) order.

    Args:
        lines: Raw lines in source order
        classifier: Classifier to flag lines with (default rules if omitted)

    Returns:
        LineSet without duplicate text
    """
    classifier = classifier or get_default_classifier()
    cleaned = [raw.strip() for raw in lines]

    recorded: Dict[str, int] = {}
    for position in range(len(cleaned) - 1, -1, -1):
        text = cleaned[position]
        if text:
            recorded[text] = position

    unique = []
    for text, _ in sorted(recorded.items(), key=lambda item: item[1]):
        flags = classifier.classify(text)
        unique.append(Line(text=text, basic=flags.basic, special=flags.special))

    return LineSet(unique)


def ingest(content: str, classifier: Optional[Classifier] = None) -> LineSet:
    """Build a LineSet from the full text of a file."""
    raw = split_lines(content)
    lineset = dedupe(raw, classifier)
    logger.debug(f"Ingested {len(raw)} non-blank lines, {len(lineset)} unique")
    return lineset
