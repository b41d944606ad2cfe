"""
Configuration helpers and line export for line-sift.
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from .constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_CLASSIFICATION_CONFIG,
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_VIEW_CONFIG,
)
from .exceptions import ConfigurationError
from .logging_config import get_logger
from .models import ClassifierConfig, Line, SearchConfig, ViewConfig

logger = get_logger(__name__)


def export_lines(lines: Iterable[Line], filepath: str, reveal: bool = False) -> int:
    """
    Write lines to a file, one per line.

    Special lines are written masked unless ``reveal`` is set.

    Returns:
        Number of lines written
    """
    dir_path = os.path.dirname(filepath)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    count = 0
    with open(filepath, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(f"{line.display(reveal=reveal)}\n")
            count += 1

    logger.info(f"Saved {count} lines to {filepath}")
    return count


def load_config_from_file(filepath: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"Config file not found: {filepath}")
        return {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading config file: {e}")
        return {}

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.error(
            f"Config file {filepath} must contain a mapping, got {type(config).__name__}"
        )
        return {}
    return config


def save_config_to_file(config: Dict[str, Any], filepath: str) -> None:
    """Save configuration to YAML file."""
    dir_path = os.path.dirname(filepath)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, indent=2, sort_keys=False)

    logger.info(f"Saved configuration to {filepath}")


def create_default_config() -> Dict[str, Any]:
    """Create default configuration dictionary."""
    return {
        "classification": {
            "basic_prefixes": list(DEFAULT_CLASSIFICATION_CONFIG["basic_prefixes"]),
            "max_basic_tokens": DEFAULT_CLASSIFICATION_CONFIG["max_basic_tokens"],
            "special_patterns": [
                dict(p) for p in DEFAULT_CLASSIFICATION_CONFIG["special_patterns"]
            ],
        },
        "search": dict(DEFAULT_SEARCH_CONFIG),
        "view": dict(DEFAULT_VIEW_CONFIG),
    }


def config_dict_to_objects(config_dict: Dict[str, Any]) -> tuple:
    """
    Convert configuration dictionary to config objects.

    Raises:
        ConfigurationError: If the dictionary fails validation
    """
    errors = validate_config(config_dict)
    if errors:
        raise ConfigurationError("; ".join(errors))

    classification = config_dict.get("classification") or {}
    search = config_dict.get("search") or {}
    view = config_dict.get("view") or {}

    classifier_config = ClassifierConfig(
        basic_prefixes=classification.get("basic_prefixes"),
        max_basic_tokens=classification.get(
            "max_basic_tokens", DEFAULT_CLASSIFICATION_CONFIG["max_basic_tokens"]
        ),
        special_patterns=classification.get("special_patterns"),
    )

    search_config = SearchConfig(
        threshold=search.get("threshold", DEFAULT_SEARCH_CONFIG["threshold"]),
        case_sensitive=search.get(
            "case_sensitive", DEFAULT_SEARCH_CONFIG["case_sensitive"]
        ),
    )

    view_config = ViewConfig(
        hide_basic=view.get("hide_basic", DEFAULT_VIEW_CONFIG["hide_basic"]),
        hide_special=view.get("hide_special", DEFAULT_VIEW_CONFIG["hide_special"]),
        alphabetical_sort=view.get(
            "alphabetical_sort", DEFAULT_VIEW_CONFIG["alphabetical_sort"]
        ),
    )

    return classifier_config, search_config, view_config


def _validate_pattern_entry(position: int, entry: Any) -> List[str]:
    prefix = f"classification.special_patterns[{position}]"
    if not isinstance(entry, dict):
        return [f"{prefix} must be a mapping"]

    kinds = [kind for kind in ("regex", "literal") if kind in entry]
    if len(kinds) != 1:
        return [f"{prefix} must have exactly one of: regex, literal"]

    errors = []
    if not isinstance(entry[kinds[0]], str) or not entry[kinds[0]]:
        errors.append(f"{prefix}.{kinds[0]} must be a non-empty string")
    if "ignore_case" in entry and not isinstance(entry["ignore_case"], bool):
        errors.append(f"{prefix}.ignore_case must be a boolean")
    return errors


def _section(config_dict: Dict[str, Any], name: str, errors: List[str]) -> Dict[str, Any]:
    # A key with nothing under it loads as None
    section = config_dict.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        errors.append(f"{name} must be a mapping")
        return {}
    return section


def validate_config(config_dict: Dict[str, Any]) -> List[str]:
    """Validate configuration and return list of errors."""
    if not isinstance(config_dict, dict):
        return ["configuration must be a mapping"]

    errors = []

    # Validate classification config
    classification = _section(config_dict, "classification", errors)
    if "basic_prefixes" in classification:
        prefixes = classification["basic_prefixes"]
        if not isinstance(prefixes, list) or not all(
            isinstance(p, str) for p in prefixes
        ):
            errors.append("classification.basic_prefixes must be a list of strings")
    if "max_basic_tokens" in classification:
        tokens = classification["max_basic_tokens"]
        if not isinstance(tokens, int) or isinstance(tokens, bool) or tokens < 0:
            errors.append("classification.max_basic_tokens must be a non-negative integer")
    if "special_patterns" in classification:
        patterns = classification["special_patterns"]
        if not isinstance(patterns, list):
            errors.append("classification.special_patterns must be a list")
        else:
            for position, entry in enumerate(patterns):
                errors.extend(_validate_pattern_entry(position, entry))

    # Validate search config
    search = _section(config_dict, "search", errors)
    if "threshold" in search:
        threshold = search["threshold"]
        if (
            not isinstance(threshold, (int, float))
            or isinstance(threshold, bool)
            or not 0 <= threshold <= 1
        ):
            errors.append("search.threshold must be a number between 0 and 1")
    if "case_sensitive" in search and not isinstance(search["case_sensitive"], bool):
        errors.append("search.case_sensitive must be a boolean")

    # Validate view config
    view = _section(config_dict, "view", errors)
    for key in ("hide_basic", "hide_special", "alphabetical_sort"):
        if key in view and not isinstance(view[key], bool):
            errors.append(f"view.{key} must be a boolean")

    return errors


def find_config_file(start_path: str = ".") -> Optional[str]:
    """Find configuration file in current directory or parent directories."""
    path = Path(start_path).resolve()
    while path != path.parent:
        for config_name in CONFIG_FILE_NAMES:
            config_path = path / config_name
            if config_path.exists():
                return str(config_path)
        path = path.parent

    return None


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """Merge multiple configuration dictionaries (later configs override earlier ones)."""
    result = {}

    for config in configs:
        for key, value in config.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_configs(result[key], value)
            else:
                result[key] = value

    return result
