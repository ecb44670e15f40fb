"""Validation mode policy for the graph validation engine.

This module implements the policy that decides what a single assertion does
under each validation mode, and the traversal state that carries the mode
through a validation run.

The policy:
- COLLECT_ALL records failed assertions and ignores passing ones
- FAIL_FAST stops the whole traversal on the first failed assertion
- FORCE_FAIL records every assertion without evaluating its condition

The mode never changes during a run. A FAIL_FAST stop is cooperative: the
TraversalState is marked as stopped, every later assertion and builder
operation returns early, and the validator entry point raises the resulting
ValidationError once the traversal has unwound.

Usage:
    >>> from graphvalidator.conditions import Condition
    >>> state = TraversalState(mode=ValidationMode.FAIL_FAST)
    >>> resolve_outcome(state.mode, Condition("MUST_BE_TRUE", lambda: False))
    <AssertionOutcome.STOP: 'stop'>
    >>> state.stop("Property 'Flag.value' of type 'bool' must be true.")
    >>> state.stopped
    True
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from graphvalidator.conditions import ValidationCondition
from graphvalidator.errors import ValidationError
from graphvalidator.types import AssertionOutcome, ValidationMode

logger = logging.getLogger(__name__)


# Outcome of an assertion per mode, keyed by whether its condition holds.
# FORCE_FAIL yields RECORD either way, so its condition is never evaluated.
ASSERTION_OUTCOMES: Dict[ValidationMode, Dict[bool, AssertionOutcome]] = {
    ValidationMode.COLLECT_ALL: {
        True: AssertionOutcome.IGNORE,
        False: AssertionOutcome.RECORD,
    },
    ValidationMode.FAIL_FAST: {
        True: AssertionOutcome.IGNORE,
        False: AssertionOutcome.STOP,
    },
    ValidationMode.FORCE_FAIL: {
        True: AssertionOutcome.RECORD,
        False: AssertionOutcome.RECORD,
    },
}


def evaluates_conditions(mode: ValidationMode) -> bool:
    """Check whether assertions under this mode depend on their condition."""
    outcomes = ASSERTION_OUTCOMES[mode]
    return outcomes[True] != outcomes[False]


def resolve_outcome(mode: ValidationMode, condition: ValidationCondition) -> AssertionOutcome:
    """Resolve what an assertion over the given condition does under a mode.

    The condition is evaluated only when the mode needs its result.

    Args:
        mode: The validation mode of the current run
        condition: The condition being asserted

    Returns:
        The outcome for this assertion
    """
    outcomes = ASSERTION_OUTCOMES[mode]
    if not evaluates_conditions(mode):
        return outcomes[False]
    return outcomes[condition.is_valid()]


@dataclass
class TraversalState:
    """State shared by every builder and context of one validation run.

    Attributes:
        mode: The validation mode, fixed for the whole run
        stop_message: Rendered message of the failure that stopped the run, if any
        condition_id: Identity of the condition that stopped the run, if any
        path: Graph path of the member that stopped the run, if any

    Examples:
        >>> state = TraversalState(mode=ValidationMode.COLLECT_ALL)
        >>> state.stopped
        False
    """

    mode: ValidationMode = ValidationMode.COLLECT_ALL
    stop_message: Optional[str] = None
    condition_id: Optional[str] = None
    path: Optional[str] = None

    @property
    def stopped(self) -> bool:
        return self.stop_message is not None

    def stop(self, message: str, condition_id: Optional[str] = None, path: Optional[str] = None) -> None:
        """Mark the traversal as stopped by the given failure.

        Only the first stop is kept; later calls are ignored.
        """
        if self.stopped:
            return
        logger.debug("Fail-fast stop at '%s' (%s)", path, condition_id)
        self.stop_message = message
        self.condition_id = condition_id
        self.path = path

    def raise_if_stopped(self) -> None:
        """Raise the ValidationError for the failure that stopped the run.

        Raises:
            ValidationError: If the traversal was stopped
        """
        if self.stop_message is not None:
            raise ValidationError(self.stop_message, condition_id=self.condition_id, path=self.path)


__all__ = [
    "ASSERTION_OUTCOMES",
    "TraversalState",
    "evaluates_conditions",
    "resolve_outcome",
]
