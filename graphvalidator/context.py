"""Assertion context over a member of the object graph.

An AssertionContext binds one result node to one subject value for the
duration of a single assertion block. Assertion functions (see the
graphvalidator.assertions package) build a condition over context.subject and
hand it to validate(); nested objects are validated through validate_with().
"""

from typing import TYPE_CHECKING, Generic, TypeVar

from graphvalidator.conditions import ValidationCondition
from graphvalidator.errors import ConditionEvaluationError
from graphvalidator.modes import TraversalState, resolve_outcome
from graphvalidator.results import Assertion, MemberResult
from graphvalidator.types import AssertionOutcome, AssertionType, ValidationMode

if TYPE_CHECKING:
    from graphvalidator.validator import Validator

T = TypeVar("T")


class AssertionContext(Generic[T]):
    """Assertion context bound to a member result and its subject value.

    Attributes:
        subject: The value being validated; None for a missing value or a FORCE_FAIL run
    """

    def __init__(self, result: MemberResult, state: TraversalState, subject: T):
        self._result = result
        self._state = state
        self.subject = subject

    @property
    def mode(self) -> ValidationMode:
        return self._state.mode

    @property
    def result(self) -> MemberResult:
        return self._result

    def validate(
        self,
        condition: ValidationCondition,
        message: str,
        type: AssertionType = AssertionType.RELATIVE,
    ) -> None:
        """Assert a condition against the subject under the current validation mode.

        A failed assertion is recorded on the bound member (COLLECT_ALL), stops
        the traversal (FAIL_FAST), or is recorded without evaluating the
        condition at all (FORCE_FAIL). Nothing happens once the traversal has
        been stopped.

        Args:
            condition: The condition to assert
            message: Message describing the failure
            type: Whether the message is absolute or relative to the member

        Raises:
            ConditionEvaluationError: If the condition's predicate raises
        """
        if self._state.stopped:
            return

        try:
            outcome = resolve_outcome(self._state.mode, condition)
        except Exception as exc:
            raise ConditionEvaluationError(condition.id, self._result.calculate_graph_path()) from exc

        if outcome == AssertionOutcome.IGNORE:
            return

        assertion = Assertion(condition=condition, message=message, type=type)
        if outcome == AssertionOutcome.STOP:
            self._state.stop(
                assertion.render(self._result.create_relative_assertion_prefix()),
                condition_id=condition.id,
                path=self._result.calculate_graph_path(),
            )
        else:
            self._result.add_assertion(assertion)

    def validate_with(self, validator: "Validator[T]") -> None:
        """Validate the subject with a child validator as part of this object graph.

        The child's results are grafted under the bound member only if any
        assertion failed within them.

        Raises:
            InvalidValidationModeError: If the subject is None outside FORCE_FAIL mode
        """
        if self._state.stopped:
            return

        nested = validator.validate_as_child(self.subject, self._state, self._result)
        if nested.has_failures():
            self._result.add_member(nested)


__all__ = [
    "AssertionContext",
]
