from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from model_configuration.core.building_blocks import BuildingBlock


class NotificationType(IntEnum):
    """Severity of a validation message"""

    INFO = 1
    WARNING = 2
    ERROR = 3


class ValidationState(IntEnum):
    """Overall outcome of a validation run"""

    VALID = 0
    VALID_WITH_WARNINGS = 1
    INVALID = 2


@dataclass(frozen=True)
class ValidationMessage:
    """
    A single finding of a validation run.

    :var notification_type: Severity of the finding.
    :vartype notification_type: NotificationType
    :var subject: The object that failed validation (a formula, an application builder, ...).
    :vartype subject: Any
    :var text: Human readable description of the problem.
    :vartype text: str
    :var building_block: Building block the subject belongs to.
    :vartype building_block: BuildingBlock | None
    :var error_kind: Name of the error category, e.g. ``"FormulaParseError"``.
    :vartype error_kind: str
    :var details: Additional lines of information.
    :vartype details: tuple[str, ...]
    """

    notification_type: NotificationType
    subject: Any
    text: str
    building_block: BuildingBlock | None = None
    error_kind: str = ""
    details: tuple[str, ...] = field(default=())

    def __str__(self) -> str:
        return f"[{self.notification_type.name}] {self.text}"


class ValidationResult:
    """
    Ordered, append-only sequence of validation messages.
    Messages are kept in the order they were added, duplicates included.
    """

    __slots__ = ("_messages",)

    def __init__(self) -> None:
        self._messages: list[ValidationMessage] = []

    def add_message(
        self,
        notification_type: NotificationType,
        subject: Any,
        text: str,
        building_block: BuildingBlock | None = None,
        *,
        error_kind: str = "",
        details: tuple[str, ...] = (),
    ) -> ValidationMessage:
        message = ValidationMessage(
            notification_type=notification_type,
            subject=subject,
            text=text,
            building_block=building_block,
            error_kind=error_kind,
            details=tuple(details),
        )
        self._messages.append(message)
        return message

    def add_messages_from(self, other: ValidationResult) -> None:
        self._messages.extend(other.messages)

    @property
    def messages(self) -> tuple[ValidationMessage, ...]:
        return tuple(self._messages)

    @property
    def state(self) -> ValidationState:
        if not self._messages:
            return ValidationState.VALID
        if any(m.notification_type == NotificationType.ERROR for m in self._messages):
            return ValidationState.INVALID
        return ValidationState.VALID_WITH_WARNINGS

    def messages_of_kind(self, error_kind: str) -> list[ValidationMessage]:
        return [m for m in self._messages if m.error_kind == error_kind]

    def __iter__(self) -> Iterator[ValidationMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"ValidationResult(state={self.state.name}, messages={len(self._messages)})"
