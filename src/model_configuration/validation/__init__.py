"""Validation helpers for a model configuration."""
from .exceptions import (
    ConfigurationError,
    FormulaParseError,
    TypeMismatchError,
    UnresolvedMoleculeReference,
)
from .validation_result import (
    NotificationType,
    ValidationMessage,
    ValidationResult,
    ValidationState,
)
from .configuration_validator import ConfigurationValidator, validate_configuration

__all__ = [
    "ConfigurationError",
    "ConfigurationValidator",
    "FormulaParseError",
    "NotificationType",
    "TypeMismatchError",
    "UnresolvedMoleculeReference",
    "ValidationMessage",
    "ValidationResult",
    "ValidationState",
    "validate_configuration",
]
