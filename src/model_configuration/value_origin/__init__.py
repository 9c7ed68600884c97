"""Value origin: provenance of parameter and quantity values."""
from .catalog import (
    ValueOriginDeterminationMethod,
    ValueOriginDeterminationMethods,
    ValueOriginSource,
    ValueOriginSources,
)
from .value_origin import UNDEFINED_CAPTION, ValueOrigin, default_display

__all__ = [
    "UNDEFINED_CAPTION",
    "ValueOrigin",
    "ValueOriginDeterminationMethod",
    "ValueOriginDeterminationMethods",
    "ValueOriginSource",
    "ValueOriginSources",
    "default_display",
]
