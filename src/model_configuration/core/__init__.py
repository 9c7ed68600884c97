"""Domain objects a model configuration is assembled from."""
from .formulas import ConstantFormula, ExplicitFormula, Formula, TableFormula, TIME_ALIAS
from .formula_cache import FormulaCache
from .entities import (
    ApplicationBuilder,
    Container,
    Entity,
    EventGroupBuilder,
    MoleculeBuilder,
    Parameter,
    StartValue,
)
from .building_blocks import BuildingBlock, EventGroupBuildingBlock, MoleculeBuildingBlock
from .configuration import ModelConfiguration

__all__ = [
    "ApplicationBuilder",
    "BuildingBlock",
    "ConstantFormula",
    "Container",
    "Entity",
    "EventGroupBuilder",
    "EventGroupBuildingBlock",
    "ExplicitFormula",
    "Formula",
    "FormulaCache",
    "ModelConfiguration",
    "MoleculeBuilder",
    "MoleculeBuildingBlock",
    "Parameter",
    "StartValue",
    "TableFormula",
    "TIME_ALIAS",
]
