from typing import Annotated, TypeAlias

from astropy.units import Unit, UnitBase
from pydantic import BeforeValidator, PlainSerializer

FormulaValue: TypeAlias = float


def as_unit(unit: UnitBase | str) -> UnitBase:
    if isinstance(unit, UnitBase):
        return unit
    return Unit(unit)


def unit_text(unit: UnitBase) -> str:
    """Unit as written in messages and reprs."""
    return unit.to_string() or "dimensionless"


FormulaUnit = Annotated[
    UnitBase | str,
    BeforeValidator(as_unit),
    PlainSerializer(lambda unit: unit.to_string()),
]
"""
Unit of a formula's value. Strings such as ``"mg/l"`` are parsed by astropy;
dumping a model writes the unit back as its string, dimensionless as ``""``.
"""
