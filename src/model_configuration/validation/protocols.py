"""Capabilities the configuration validator relies on."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

T = TypeVar("T")


class ValidatableFormula(Protocol):
    name: str

    def is_explicit(self) -> bool: ...

    def validate_expression(self) -> object:
        """Raise FormulaParseError if the formula cannot be parsed."""
        ...

    def details(self) -> tuple[str, ...]: ...


class FormulaCacheOwner(Protocol):
    name: str

    @property
    def formula_cache(self) -> Iterable[ValidatableFormula]: ...


class ContainerSearchable(Protocol):
    name: str

    def get_all_containers_and_self(self, kind: type[T]) -> list[T]: ...
