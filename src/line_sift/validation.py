"""
Input validation for files handed to line-sift.
"""

from pathlib import Path
from typing import Optional, Set, Union

from .constants import ACCEPTED_EXTENSIONS, MAX_FILE_SIZE
from .exceptions import IngestionError, ValidationError
from .logging_config import get_logger

logger = get_logger(__name__)


def validate_file_path(file_path: Union[str, Path]) -> Path:
    """
    Validate that a path points to an existing regular file.

    Args:
        file_path: Input file path

    Returns:
        Resolved Path object

    Raises:
        ValidationError: If the path is missing or not a file
    """
    path = Path(file_path).expanduser().resolve()

    if not path.exists():
        raise ValidationError(f"Path does not exist: {file_path}")
    if not path.is_file():
        raise ValidationError(f"Path is not a file: {file_path}")

    return path


def validate_file_size(file_path: Path, max_size: int = MAX_FILE_SIZE) -> None:
    """
    Validate file size is within limits.

    Raises:
        ValidationError: If file is too large
        IngestionError: If the size cannot be read
    """
    try:
        size = file_path.stat().st_size
    except OSError as e:
        raise IngestionError(f"Cannot check file size: {e}")

    if size > max_size:
        size_mb = size / (1024 * 1024)
        max_mb = max_size / (1024 * 1024)
        raise ValidationError(f"File too large: {size_mb:.1f}MB > {max_mb:.1f}MB limit")


def validate_file_extension(
    file_path: Path, allowed_extensions: Optional[Set[str]] = None
) -> None:
    """
    Validate file has an accepted extension.

    Raises:
        ValidationError: If extension not allowed
    """
    if allowed_extensions is None:
        allowed_extensions = ACCEPTED_EXTENSIONS

    extension = file_path.suffix.lower()
    if extension not in allowed_extensions:
        raise ValidationError(
            f"Unsupported file extension '{extension}'. "
            f"Allowed: {', '.join(sorted(allowed_extensions))}"
        )


def validate_text_content(content: str) -> None:
    """Reject content that looks like binary data."""
    if not isinstance(content, str):
        raise IngestionError("Content must be a string")

    # High ratio of non-printable characters
    printable_chars = sum(1 for c in content if c.isprintable() or c.isspace())
    if len(content) > 100 and printable_chars / len(content) < 0.8:
        raise IngestionError("Content appears to be binary data")


def safe_read_file(
    file_path: Path,
    encoding: str = "utf-8",
    max_size: int = MAX_FILE_SIZE,
    allowed_extensions: Optional[Set[str]] = None,
) -> str:
    """
    Read a text file after validating it.

    Args:
        file_path: Path to file
        encoding: Text encoding to use
        max_size: Maximum file size allowed
        allowed_extensions: Accepted extensions (default: ACCEPTED_EXTENSIONS)

    Returns:
        File content as string

    Raises:
        ValidationError: If file is invalid
        IngestionError: If reading or decoding fails
    """
    validate_file_size(file_path, max_size)
    validate_file_extension(file_path, allowed_extensions)

    try:
        # Newline translation off: lines are split on "\n" only
        with open(file_path, "r", encoding=encoding, newline="") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise IngestionError(f"Cannot decode file {file_path}: {e}")
    except OSError as e:
        raise IngestionError(f"Cannot read file {file_path}: {e}")

    validate_text_content(content)
    logger.debug(f"Read {file_path} ({len(content)} chars)")
    return content
