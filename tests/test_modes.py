"""Unit tests for the validation mode policy and traversal state."""

import pytest

from graphvalidator import Condition, ValidationError, ValidationMode
from graphvalidator.modes import ASSERTION_OUTCOMES, TraversalState, evaluates_conditions, resolve_outcome
from graphvalidator.types import AssertionOutcome


class ExplodingCondition(Condition):
    """Condition that fails the test if it is ever evaluated."""

    def __init__(self):
        super().__init__("EXPLODES", lambda: False)

    def is_valid(self):
        raise AssertionError("condition should not have been evaluated")


class TestAssertionOutcomes:
    """Test the outcome table per mode."""

    def test_all_modes_defined(self):
        """Should define outcomes for every validation mode."""
        for mode in ValidationMode:
            assert set(ASSERTION_OUTCOMES[mode]) == {True, False}

    @pytest.mark.parametrize(
        "mode,holds,expected",
        [
            (ValidationMode.COLLECT_ALL, True, AssertionOutcome.IGNORE),
            (ValidationMode.COLLECT_ALL, False, AssertionOutcome.RECORD),
            (ValidationMode.FAIL_FAST, True, AssertionOutcome.IGNORE),
            (ValidationMode.FAIL_FAST, False, AssertionOutcome.STOP),
            (ValidationMode.FORCE_FAIL, True, AssertionOutcome.RECORD),
            (ValidationMode.FORCE_FAIL, False, AssertionOutcome.RECORD),
        ],
    )
    def test_resolve_outcome(self, mode, holds, expected):
        """Should resolve the outcome from the mode and whether the condition holds."""
        assert resolve_outcome(mode, Condition("C", lambda: holds)) == expected

    def test_force_fail_does_not_evaluate(self):
        """Should never evaluate conditions in FORCE_FAIL mode."""
        assert not evaluates_conditions(ValidationMode.FORCE_FAIL)
        assert resolve_outcome(ValidationMode.FORCE_FAIL, ExplodingCondition()) == AssertionOutcome.RECORD

    def test_other_modes_evaluate(self):
        """Should evaluate conditions in COLLECT_ALL and FAIL_FAST modes."""
        assert evaluates_conditions(ValidationMode.COLLECT_ALL)
        assert evaluates_conditions(ValidationMode.FAIL_FAST)

    def test_mode_from_string(self):
        """Should accept the serialized mode values."""
        assert ValidationMode("fail_fast") == ValidationMode.FAIL_FAST


class TestTraversalState:
    """Test the cooperative stop token."""

    def test_initial_state(self):
        """Should start out not stopped."""
        state = TraversalState(mode=ValidationMode.FAIL_FAST)
        assert not state.stopped
        state.raise_if_stopped()

    def test_stop_keeps_first_failure(self):
        """Should keep the first stop and ignore later ones."""
        state = TraversalState(mode=ValidationMode.FAIL_FAST)
        state.stop("first.", condition_id="A", path="R.a")
        state.stop("second.", condition_id="B", path="R.b")

        assert state.stopped
        assert state.stop_message == "first."
        assert state.condition_id == "A"
        assert state.path == "R.a"

    def test_raise_if_stopped(self):
        """Should raise a ValidationError carrying the stop details."""
        state = TraversalState(mode=ValidationMode.FAIL_FAST)
        state.stop("Property 'R.a' of type 'str' must not be null.", condition_id="MUST_NOT_BE_NULL", path="R.a")

        with pytest.raises(ValidationError) as exc_info:
            state.raise_if_stopped()

        assert str(exc_info.value) == "Property 'R.a' of type 'str' must not be null."
        assert exc_info.value.condition_id == "MUST_NOT_BE_NULL"
        assert exc_info.value.path == "R.a"
