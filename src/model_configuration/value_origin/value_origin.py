"""Provenance of a quantity value."""
from __future__ import annotations

from collections.abc import Callable, Iterable

from model_configuration.validation.exceptions import TypeMismatchError
from model_configuration.value_origin.catalog import (
    ValueOriginDeterminationMethod,
    ValueOriginDeterminationMethods,
    ValueOriginSource,
    ValueOriginSources,
)

UNDEFINED_CAPTION = "Undefined"
SEPARATOR = "-"


def _join_non_blank(segments: Iterable[str | None]) -> str:
    return SEPARATOR.join(s for s in segments if s is not None and s.strip())


class ValueOrigin:
    """
    Where a value comes from (source), how it was determined (method) and an
    optional description.

    Equality, hashing and ordering only consider ``source``, ``method`` and
    ``description``; ``id`` and ``default`` are ignored. They are based on an
    identity key that is computed lazily and cleared whenever one of those
    three fields is assigned.

    Not safe for concurrent mutation. Concurrent reads of an instance that is
    not being modified are safe.

    :var id: Database id of predefined value origins, None otherwise.
    :vartype id: int | None
    :var default: True if the value is an unmodified default rather than entered by the user.
    :vartype default: bool
    """

    __slots__ = ("_source", "_method", "_description", "_key", "id", "default")

    def __init__(
        self,
        source: ValueOriginSource = ValueOriginSources.UNDEFINED,
        method: ValueOriginDeterminationMethod = ValueOriginDeterminationMethods.UNDEFINED,
        description: str | None = None,
        *,
        default: bool = False,
        id: int | None = None,
    ) -> None:
        self._source = source
        self._method = method
        self._description = description
        self._key: str | None = None
        self.default = default
        self.id = id

    @property
    def source(self) -> ValueOriginSource:
        return self._source

    @source.setter
    def source(self, value: ValueOriginSource) -> None:
        self._source = value
        self._reset_key()

    @property
    def method(self) -> ValueOriginDeterminationMethod:
        return self._method

    @method.setter
    def method(self, value: ValueOriginDeterminationMethod) -> None:
        self._method = value
        self._reset_key()

    @property
    def description(self) -> str | None:
        return self._description

    @description.setter
    def description(self, value: str | None) -> None:
        self._description = value
        self._reset_key()

    def _reset_key(self) -> None:
        self._key = None

    @property
    def is_undefined(self) -> bool:
        if self._source is None or self._method is None:
            return True
        return (
            self._source == ValueOriginSources.UNDEFINED
            and self._method == ValueOriginDeterminationMethods.UNDEFINED
            and not self._description
        )

    @property
    def key(self) -> str:
        """Identity key, e.g. ``"4-1-Smith et al."``; empty for undefined value origins."""
        if self._key is not None:
            return self._key
        if self.is_undefined:
            self._key = ""
        else:
            self._key = _join_non_blank(
                (str(self._source.id), str(self._method.id), self._description)
            )
        return self._key

    @property
    def display(self) -> str:
        return default_display(self)

    def display_with(self, display_strategy: Callable[[ValueOrigin], str]) -> str:
        return display_strategy(self)

    def clone(self) -> ValueOrigin:
        clone = ValueOrigin()
        clone.update_from(self, update_id=True)
        return clone

    def update_from(self, other: ValueOrigin | None, update_id: bool = False) -> None:
        if other is None:
            return

        # id only changes when the value origin is populated from the database
        if update_id:
            self.id = other.id

        self.source = other.source
        self.method = other.method
        self.description = other.description
        self.default = other.default

    def compare_to(self, other: object) -> int:
        if not isinstance(other, ValueOrigin):
            raise TypeMismatchError(
                f"Cannot compare ValueOrigin with {type(other).__name__}."
            )
        own_key, other_key = self.key, other.key
        if own_key == other_key:
            return 0
        return -1 if own_key < other_key else 1

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ValueOrigin):
            return False
        return self.key == other.key

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: object) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self.display

    def __repr__(self) -> str:
        return (
            f"ValueOrigin(source={self._source!r}, method={self._method!r}, "
            f"description={self._description!r}, default={self.default}, id={self.id})"
        )


def default_display(value_origin: ValueOrigin) -> str:
    """Source, method and description separated by '-', or 'Undefined'."""
    if value_origin.is_undefined:
        return UNDEFINED_CAPTION
    return _join_non_blank(
        (value_origin.source.display, value_origin.method.display, value_origin.description)
    )
