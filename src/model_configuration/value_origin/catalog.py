"""Predefined value origin sources and determination methods."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class ValueOriginSource:
    """
    Where a value comes from.

    :var id: Catalog identifier, part of the value origin identity key.
    :vartype id: int
    :var display: Text shown to the user.
    :vartype display: str
    """

    id: int
    display: str

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True, slots=True)
class ValueOriginDeterminationMethod:
    """
    How a value was determined.

    :var id: Catalog identifier, part of the value origin identity key.
    :vartype id: int
    :var display: Text shown to the user.
    :vartype display: str
    """

    id: int
    display: str

    def __str__(self) -> str:
        return self.display


class ValueOriginSources:
    UNDEFINED: ClassVar[ValueOriginSource] = ValueOriginSource(0, "")
    DATABASE: ClassVar[ValueOriginSource] = ValueOriginSource(1, "Database")
    INTERNET: ClassVar[ValueOriginSource] = ValueOriginSource(2, "Internet")
    PARAMETER_IDENTIFICATION: ClassVar[ValueOriginSource] = ValueOriginSource(3, "Parameter Identification")
    PUBLICATION: ClassVar[ValueOriginSource] = ValueOriginSource(4, "Publication")
    OTHER: ClassVar[ValueOriginSource] = ValueOriginSource(5, "Other")
    UNKNOWN: ClassVar[ValueOriginSource] = ValueOriginSource(6, "Unknown")

    @classmethod
    def all(cls) -> list[ValueOriginSource]:
        return [
            cls.UNDEFINED,
            cls.DATABASE,
            cls.INTERNET,
            cls.PARAMETER_IDENTIFICATION,
            cls.PUBLICATION,
            cls.OTHER,
            cls.UNKNOWN,
        ]

    @classmethod
    def by_id(cls, source_id: int) -> ValueOriginSource:
        for source in cls.all():
            if source.id == source_id:
                return source
        raise KeyError(f"No value origin source with id {source_id}.")


class ValueOriginDeterminationMethods:
    UNDEFINED: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(0, "")
    ASSUMPTION: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(1, "Assumption")
    MANUAL_FIT: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(2, "Manual Fit")
    PARAMETER_IDENTIFICATION: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(
        3, "Parameter Identification"
    )
    IN_VITRO: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(4, "In Vitro")
    IN_VIVO: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(5, "In Vivo")
    OTHER: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(6, "Other")
    UNKNOWN: ClassVar[ValueOriginDeterminationMethod] = ValueOriginDeterminationMethod(7, "Unknown")

    @classmethod
    def all(cls) -> list[ValueOriginDeterminationMethod]:
        return [
            cls.UNDEFINED,
            cls.ASSUMPTION,
            cls.MANUAL_FIT,
            cls.PARAMETER_IDENTIFICATION,
            cls.IN_VITRO,
            cls.IN_VIVO,
            cls.OTHER,
            cls.UNKNOWN,
        ]

    @classmethod
    def by_id(cls, method_id: int) -> ValueOriginDeterminationMethod:
        for method in cls.all():
            if method.id == method_id:
                return method
        raise KeyError(f"No value origin determination method with id {method_id}.")
