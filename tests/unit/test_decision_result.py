import pytest

from adc.domain.value_objects.decision import (
    DecisionErrorKind,
    DecisionResult,
    NoApplicableRuleError,
    NoMatchingHistoryError,
)
from adc.domain.value_objects.state import Unrecognized


def test_success_result_exposes_action() -> None:
    result = DecisionResult.success("open")

    assert result.is_ok
    assert result.action == "open"
    assert result.error is None
    assert result.error_kind is None
    assert result.unwrap() == "open"


def test_failure_result_exposes_kind_and_raises_on_unwrap() -> None:
    error = NoMatchingHistoryError(("sunny", "rainy"))
    result: DecisionResult[str] = DecisionResult.failure(error)

    assert not result.is_ok
    assert result.action is None
    assert result.error_kind is DecisionErrorKind.NO_MATCHING_HISTORY
    assert error.percepts == ("sunny", "rainy")

    with pytest.raises(NoMatchingHistoryError, match="length=2"):
        result.unwrap()


def test_result_rejects_both_action_and_error() -> None:
    with pytest.raises(ValueError, match="同時"):
        DecisionResult(action="open", error=NoApplicableRuleError("bad"))


def test_errors_compare_by_type_and_detail() -> None:
    assert NoApplicableRuleError(Unrecognized("cloudy")) == NoApplicableRuleError(
        Unrecognized("cloudy")
    )
    assert NoApplicableRuleError(Unrecognized("cloudy")) != NoApplicableRuleError(
        Unrecognized("foggy")
    )
    assert NoApplicableRuleError(("sunny",)) != NoMatchingHistoryError(("sunny",))
    assert DecisionResult.failure(NoApplicableRuleError("bad")) == DecisionResult.failure(
        NoApplicableRuleError("bad")
    )


def test_unrecognized_states_are_equal_by_carried_percept() -> None:
    assert Unrecognized("cloudy") == Unrecognized("cloudy")
    assert Unrecognized("cloudy") != Unrecognized("foggy")
    assert hash(Unrecognized("cloudy")) == hash(Unrecognized("cloudy"))


def test_error_kinds_serialize_as_strings() -> None:
    assert str(DecisionErrorKind.NO_MATCHING_HISTORY) == "no_matching_history"
    assert str(DecisionErrorKind.NO_APPLICABLE_RULE) == "no_applicable_rule"
