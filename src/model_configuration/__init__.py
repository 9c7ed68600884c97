"""Validation of simulation model configurations and value origin tracking."""
from model_configuration.core import (
    ApplicationBuilder,
    BuildingBlock,
    ConstantFormula,
    EventGroupBuilder,
    EventGroupBuildingBlock,
    ExplicitFormula,
    ModelConfiguration,
    MoleculeBuilder,
    MoleculeBuildingBlock,
    Parameter,
)
from model_configuration.validation import (
    ConfigurationError,
    ConfigurationValidator,
    FormulaParseError,
    NotificationType,
    TypeMismatchError,
    UnresolvedMoleculeReference,
    ValidationMessage,
    ValidationResult,
    ValidationState,
    validate_configuration,
)
from model_configuration.value_origin import (
    ValueOrigin,
    ValueOriginDeterminationMethods,
    ValueOriginSources,
)

__all__ = [
    "ApplicationBuilder",
    "BuildingBlock",
    "ConfigurationError",
    "ConfigurationValidator",
    "ConstantFormula",
    "EventGroupBuilder",
    "EventGroupBuildingBlock",
    "ExplicitFormula",
    "FormulaParseError",
    "ModelConfiguration",
    "MoleculeBuilder",
    "MoleculeBuildingBlock",
    "NotificationType",
    "Parameter",
    "TypeMismatchError",
    "UnresolvedMoleculeReference",
    "ValidationMessage",
    "ValidationResult",
    "ValidationState",
    "ValueOrigin",
    "ValueOriginDeterminationMethods",
    "ValueOriginSources",
    "validate_configuration",
]
