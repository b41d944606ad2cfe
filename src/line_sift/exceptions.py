"""
Custom exceptions for line-sift.
"""


class LineSiftError(Exception):
    """Base exception for all line-sift errors."""

    pass


class ConfigurationError(LineSiftError):
    """Exception raised for configuration-related errors."""

    pass


class PatternError(ConfigurationError):
    """Exception raised when a classification pattern cannot be compiled."""

    pass


class IngestionError(LineSiftError):
    """Exception raised when a file cannot be read as text."""

    pass


class ValidationError(LineSiftError):
    """Exception raised for validation errors."""

    pass
