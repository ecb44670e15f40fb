"""Assertions applicable to ordered subjects (numbers, dates, decimals, ...).

None never satisfies an ordering assertion.
"""

from typing import Any, Optional

from graphvalidator.conditions import Condition
from graphvalidator.context import AssertionContext
from graphvalidator.types import AssertionType


def must_be_within_range(
    context: AssertionContext[Any],
    minimum: Any,
    maximum: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that minimum <= subject <= maximum."""
    subject = context.subject
    if message is None:
        message = f"must be within the specified range: {minimum} to {maximum}."
    context.validate(
        Condition("MUST_BE_WITHIN_RANGE", lambda: subject is not None and minimum <= subject <= maximum),
        message,
        type,
    )


def must_not_be_within_range(
    context: AssertionContext[Any],
    minimum: Any,
    maximum: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not be within the specified range: {minimum} to {maximum}."
    context.validate(
        Condition("MUST_NOT_BE_WITHIN_RANGE", lambda: subject is not None and not minimum <= subject <= maximum),
        message,
        type,
    )


def must_be_greater_than(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must be greater than the specified value: {value}."
    context.validate(
        Condition("MUST_BE_GREATER_THAN", lambda: subject is not None and subject > value),
        message,
        type,
    )


def must_be_greater_than_or_equal_to(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must be greater than or equal to the specified value: {value}."
    context.validate(
        Condition("MUST_BE_GREATER_THAN_OR_EQUAL_TO", lambda: subject is not None and subject >= value),
        message,
        type,
    )


def must_be_less_than(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must be less than the specified value: {value}."
    context.validate(
        Condition("MUST_BE_LESS_THAN", lambda: subject is not None and subject < value),
        message,
        type,
    )


def must_be_less_than_or_equal_to(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must be less than or equal to the specified value: {value}."
    context.validate(
        Condition("MUST_BE_LESS_THAN_OR_EQUAL_TO", lambda: subject is not None and subject <= value),
        message,
        type,
    )
