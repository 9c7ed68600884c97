"""Entities and containers making up the content of a building block."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeVar

from model_configuration.core.formulas import Formula

T = TypeVar("T", bound="Container")


@dataclass(eq=False)
class Entity:
    """
    Any named object of a building block.

    :var name: Name of the entity, unique among its siblings.
    :vartype name: str
    :var description: Optional free text.
    :vartype description: str
    """

    name: str
    description: str = ""

    def all_formulas(self) -> Iterator[Formula]:
        """Formulas referenced by this entity and its descendants."""
        return iter(())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"


@dataclass(eq=False, repr=False)
class Parameter(Entity):
    """A quantity whose value is defined by a formula."""

    formula: Formula | None = None

    def all_formulas(self) -> Iterator[Formula]:
        if self.formula is not None:
            yield self.formula


@dataclass(eq=False, repr=False)
class Container(Entity):
    """An entity holding other entities, possibly containers themselves."""

    children: list[Entity] = field(default_factory=list)

    def add(self, child: Entity) -> Entity:
        if any(existing.name == child.name for existing in self.children):
            raise ValueError(f"'{self.name}' already contains an entity named '{child.name}'.")
        self.children.append(child)
        return child

    def all_formulas(self) -> Iterator[Formula]:
        for child in self.children:
            yield from child.all_formulas()

    def get_all_containers_and_self(self, kind: type[T]) -> list[T]:
        """
        Return this container (if it is a ``kind``) followed by every descendant
        container of that kind, depth first.
        """
        found: list[T] = []
        stack: list[Entity] = [self]
        while stack:
            entity = stack.pop()
            if not isinstance(entity, Container):
                continue
            if isinstance(entity, kind):
                found.append(entity)
            stack.extend(reversed(entity.children))
        return found


@dataclass(eq=False, repr=False)
class EventGroupBuilder(Container):
    """A group of events, the root element of an event group building block."""


@dataclass(eq=False, repr=False)
class ApplicationBuilder(Container):
    """Describes the application of a molecule somewhere in an event group."""

    molecule_name: str = ""

    def __repr__(self) -> str:
        return f"ApplicationBuilder(name={self.name}, molecule_name={self.molecule_name})"


@dataclass(eq=False, repr=False)
class MoleculeBuilder(Container):
    """Defines a molecule. Its parameters carry the molecule dependent formulas."""


@dataclass(eq=False, repr=False)
class StartValue(Entity):
    """Start value of a molecule amount or a parameter at a given container path."""

    path: str = ""
    start_value: float | None = None
    formula: Formula | None = None

    def all_formulas(self) -> Iterator[Formula]:
        if self.formula is not None:
            yield self.formula
