"""
Building blocks: named collections of entities plus the formulas they reference.
A model configuration is assembled from one building block per role.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from model_configuration.core.entities import Entity, EventGroupBuilder, MoleculeBuilder
from model_configuration.core.formula_cache import FormulaCache
from model_configuration.core.formulas import Formula


class BuildingBlock:
    """
    :var name: Name of the building block, used in validation messages.
    :vartype name: str
    :var formula_cache: Every formula referenced by an entity of the block.
    :vartype formula_cache: FormulaCache
    """

    def __init__(self, name: str, formula_cache: FormulaCache | None = None) -> None:
        self.name = name
        self.formula_cache = FormulaCache() if formula_cache is None else formula_cache
        self._entities: list[Entity] = []

    @classmethod
    def of(cls, name: str, entities: Iterable[Entity] = ()):
        block = cls(name=name)
        for entity in entities:
            block.add(entity)
        return block

    def add(self, entity: Entity) -> Entity:
        """Add a top level entity and register the formulas it references."""
        if any(existing.name == entity.name for existing in self._entities):
            raise ValueError(f"Building block '{self.name}' already contains '{entity.name}'.")
        for formula in entity.all_formulas():
            self.formula_cache.add(formula)
        self._entities.append(entity)
        return entity

    def add_formula(self, formula: Formula) -> Formula:
        self.formula_cache.add(formula)
        return formula

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, entities={len(self._entities)}, formulas={len(self.formula_cache)})"


class MoleculeBuildingBlock(BuildingBlock):
    def __iter__(self) -> Iterator[MoleculeBuilder]:
        return iter(self._entities)  # pyright: ignore[reportReturnType]

    def molecule_names(self) -> list[str]:
        return [molecule.name for molecule in self]


class EventGroupBuildingBlock(BuildingBlock):
    def __iter__(self) -> Iterator[EventGroupBuilder]:
        return iter(self._entities)  # pyright: ignore[reportReturnType]

    def add(self, entity: Entity) -> Entity:
        if not isinstance(entity, EventGroupBuilder):
            raise TypeError(
                f"Event group building block '{self.name}' only accepts EventGroupBuilder, got {type(entity).__name__}."
            )
        return super().add(entity)

