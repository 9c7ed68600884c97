from model_configuration.validation import (
    NotificationType,
    ValidationResult,
    ValidationState,
)


def test_state_follows_worst_message():
    result = ValidationResult()
    assert result.state == ValidationState.VALID

    result.add_message(NotificationType.WARNING, object(), "warning")
    assert result.state == ValidationState.VALID_WITH_WARNINGS

    result.add_message(NotificationType.ERROR, object(), "error", error_kind="FormulaParseError")
    assert result.state == ValidationState.INVALID
    assert [m.text for m in result.messages_of_kind("FormulaParseError")] == ["error"]


def test_messages_are_kept_in_order_without_deduplication():
    subject = object()
    result = ValidationResult()
    result.add_message(NotificationType.ERROR, subject, "same")
    result.add_message(NotificationType.ERROR, subject, "same")

    other = ValidationResult()
    other.add_message(NotificationType.INFO, subject, "info", details=("line",))
    result.add_messages_from(other)

    assert [m.text for m in result] == ["same", "same", "info"]
    assert result.messages[-1].details == ("line",)
    assert str(result.messages[0]) == "[ERROR] same"
