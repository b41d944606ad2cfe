"""
Line Sift - Deduplicate, classify, search and mask the lines of a text file.
"""

__version__ = "1.0.0"

from .classifier import Classifier, Pattern, classify
from .dedupe import dedupe, ingest, split_lines
from .exceptions import (
    ConfigurationError,
    IngestionError,
    LineSiftError,
    PatternError,
    ValidationError,
)
from .logging_config import get_logger, setup_logging
from .models import (
    Classification,
    ClassifierConfig,
    Line,
    LineSet,
    PatternKind,
    QueryState,
    SearchConfig,
    SearchHit,
    ViewConfig,
)
from .pipeline import LineBrowser, sort_alphabetically, view
from .search import SearchIndex, build_index
from .utils import export_lines, load_config_from_file, save_config_to_file
from .validation import safe_read_file, validate_file_path

__all__ = [
    "Classifier",
    "Pattern",
    "PatternKind",
    "classify",
    "split_lines",
    "dedupe",
    "ingest",
    "SearchIndex",
    "build_index",
    "view",
    "sort_alphabetically",
    "LineBrowser",
    "Line",
    "LineSet",
    "Classification",
    "QueryState",
    "SearchHit",
    "ClassifierConfig",
    "SearchConfig",
    "ViewConfig",
    "export_lines",
    "load_config_from_file",
    "save_config_to_file",
    "LineSiftError",
    "ConfigurationError",
    "PatternError",
    "IngestionError",
    "ValidationError",
    "setup_logging",
    "get_logger",
    "validate_file_path",
    "safe_read_file",
]
