"""
Constants and default configurations for line-sift.
"""

# Version information
__version__ = "1.0.0"

# Extensions accepted by the file picker
ACCEPTED_EXTENSIONS = {
    ".txt",
    ".csv",
    ".log",
    ".json",
    ".xml",
    ".md",
    ".tsv",
    ".yaml",
    ".yml",
    ".ini",
    ".cfg",
    ".html",
    ".htm",
    ".css",
    ".scss",
    ".less",
    ".js",
    ".ts",
    ".jsx",
    ".tsx",
    ".py",
    ".java",
    ".c",
    ".cpp",
    ".h",
    ".hpp",
    ".rb",
    ".php",
    ".go",
    ".rs",
    ".sh",
    ".bat",
    ".ps1",
    ".pl",
    ".sql",
}

# Lines starting with one of these are considered "basic"
DEFAULT_BASIC_PREFIXES = ["example", "test", "sample"]

# Lines with at most this many whitespace-separated tokens are "basic"
DEFAULT_MAX_BASIC_TOKENS = 2

# Patterns marking a line as "special" (likely sensitive)
DEFAULT_SPECIAL_PATTERNS = [
    {"regex": r"(password|secret|token|key|api)", "ignore_case": True},
    {"regex": r"\b[A-Za-z_]+=\S+"},  # env-like assignment
    {"regex": r"\b[A-Za-z][A-Za-z0-9+.-]*://[^\s/:@]+:[^\s/@]*@"},  # URL credentials
]

# Default classification configuration
DEFAULT_CLASSIFICATION_CONFIG = {
    "basic_prefixes": DEFAULT_BASIC_PREFIXES,
    "max_basic_tokens": DEFAULT_MAX_BASIC_TOKENS,
    "special_patterns": DEFAULT_SPECIAL_PATTERNS,
}

# Fuzzy search: 0.0 requires a perfect match, 1.0 matches anything
DEFAULT_SEARCH_THRESHOLD = 0.4

DEFAULT_SEARCH_CONFIG = {
    "threshold": DEFAULT_SEARCH_THRESHOLD,
    "case_sensitive": False,
}

# Initial toggle values of the viewer
DEFAULT_VIEW_CONFIG = {
    "hide_basic": False,
    "hide_special": True,
    "alphabetical_sort": False,
}

# Character used to mask special lines
MASK_CHAR = "•"

# File size limits (in bytes)
MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB

# Config file names searched from the working directory upwards
CONFIG_FILE_NAMES = [
    "line-sift.yml",
    "line-sift.yaml",
    "config.yml",
    "config.yaml",
]

# Logging settings
LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
