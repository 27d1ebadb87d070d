"""
Input validation utilities for the booking enrichment pipeline.

Provides reusable validation functions for configuration values such as
file paths and CSV delimiters.
"""


class ValidationError(ValueError):
    """Raised when input validation fails."""
    pass


def validate_file_path(file_path: str, field_name: str = "file_path") -> str:
    """
    Validate a file path.

    Args:
        file_path: The file path to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated file path (stripped of whitespace)

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_file_path("input.csv")
        'input.csv'
        >>> validate_file_path("  data/hotels.json ")
        'data/hotels.json'
        >>> validate_file_path("")  # doctest: +SKIP
        ValidationError: file_path must be a non-empty string
    """
    if not file_path or not isinstance(file_path, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    file_path = file_path.strip()

    if not file_path:
        raise ValidationError(f"{field_name} cannot be empty or whitespace-only")

    # Check for null bytes (rejected by the OS anyway)
    if "\x00" in file_path:
        raise ValidationError(f"{field_name} contains null bytes")

    # Prevent excessively long paths
    if len(file_path) > 4096:  # Linux PATH_MAX
        raise ValidationError(f"{field_name} exceeds maximum length of 4096 characters")

    return file_path


def validate_delimiter(delimiter: str, field_name: str = "delimiter") -> str:
    """
    Validate a CSV field delimiter.

    The csv module only accepts a single character that is neither a quote,
    a line break nor whitespace used for padding.

    Args:
        delimiter: The delimiter to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated delimiter

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_delimiter("|")
        '|'
        >>> validate_delimiter(";;")  # doctest: +SKIP
        ValidationError: delimiter must be a single character
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValidationError(f"{field_name} must be a single character")

    if delimiter in ('"', "\r", "\n", " "):
        raise ValidationError(f"{field_name} cannot be a quote, space or line break")

    return delimiter
