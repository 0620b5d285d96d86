"""Icon configuration model: parsing, lookup and validation."""

from .config import ConfigurationHolder, load_configuration, parse_configuration, resolve_configuration_path
from .contracts import (
    BASELINE_ACTIVITY,
    DEFAULT_ICON_SENTINEL,
    DENSITY_TAGS,
    IconConfigError,
    IconConfiguration,
    IconDefinition,
    InvalidShapeError,
    LongFormEntry,
    MissingFieldError,
    ShortFormEntry,
    SourceNotFoundError,
)
from .validation import (
    ISSUE_EMPTY_IDENTIFIER,
    ISSUE_EMPTY_PATH,
    ISSUE_FILE_NOT_FOUND,
    ISSUE_INVALID_IDENTIFIER,
    ISSUE_RESERVED_IDENTIFIER,
    ISSUE_UNKNOWN_DEFAULT_ICON,
    ISSUE_UNKNOWN_DENSITY,
    IconValidationError,
    ValidationIssue,
    is_valid_identifier,
    raise_for_issues,
    validate_configuration,
)

__all__ = [
    "BASELINE_ACTIVITY",
    "DEFAULT_ICON_SENTINEL",
    "DENSITY_TAGS",
    "ISSUE_EMPTY_IDENTIFIER",
    "ISSUE_EMPTY_PATH",
    "ISSUE_FILE_NOT_FOUND",
    "ISSUE_INVALID_IDENTIFIER",
    "ISSUE_RESERVED_IDENTIFIER",
    "ISSUE_UNKNOWN_DEFAULT_ICON",
    "ISSUE_UNKNOWN_DENSITY",
    "ConfigurationHolder",
    "IconConfigError",
    "IconConfiguration",
    "IconDefinition",
    "IconValidationError",
    "InvalidShapeError",
    "LongFormEntry",
    "MissingFieldError",
    "ShortFormEntry",
    "SourceNotFoundError",
    "ValidationIssue",
    "is_valid_identifier",
    "load_configuration",
    "parse_configuration",
    "raise_for_issues",
    "resolve_configuration_path",
    "validate_configuration",
]
