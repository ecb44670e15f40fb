"""Assertions applicable to a subject of any type."""

from typing import Any, Callable, Iterable, Optional

from graphvalidator.assertions._format import join_values
from graphvalidator.conditions import Condition
from graphvalidator.context import AssertionContext
from graphvalidator.types import AssertionType


def must_be_null(
    context: AssertionContext[Any],
    message: str = "must be null.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject is None."""
    subject = context.subject
    context.validate(Condition("MUST_BE_NULL", lambda: subject is None), message, type)


def must_not_be_null(
    context: AssertionContext[Any],
    message: str = "must not be null.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject is not None."""
    subject = context.subject
    context.validate(Condition("MUST_NOT_BE_NULL", lambda: subject is not None), message, type)


def must_be_equal_to(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject equals the specified value."""
    subject = context.subject
    if message is None:
        message = f"must be equal to the specified value: {value}."
    context.validate(Condition("MUST_BE_EQUAL_TO", lambda: subject == value), message, type)


def must_not_be_equal_to(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not be equal to the specified value: {value}."
    context.validate(Condition("MUST_NOT_BE_EQUAL_TO", lambda: subject != value), message, type)


def must_be_equal_by_reference_to(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject is the very same object as the specified value."""
    subject = context.subject
    if message is None:
        message = f"must be equal by reference to the specified value: {value}."
    context.validate(Condition("MUST_BE_EQUAL_BY_REFERENCE_TO", lambda: subject is value), message, type)


def must_not_be_equal_by_reference_to(
    context: AssertionContext[Any],
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not be equal by reference to the specified value: {value}."
    context.validate(Condition("MUST_NOT_BE_EQUAL_BY_REFERENCE_TO", lambda: subject is not value), message, type)


def must_be_equal_to_any(
    context: AssertionContext[Any],
    values: Iterable[Any],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject equals at least one of the specified values."""
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must be equal to any of the specified values: {join_values(values)}."
    context.validate(Condition("MUST_BE_EQUAL_TO_ANY", lambda: subject in values), message, type)


def must_not_be_equal_to_any(
    context: AssertionContext[Any],
    values: Iterable[Any],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must not be equal to any of the specified values: {join_values(values)}."
    context.validate(Condition("MUST_NOT_BE_EQUAL_TO_ANY", lambda: subject not in values), message, type)


def must_satisfy(
    context: AssertionContext[Any],
    predicate: Callable[[Any], bool],
    message: str = "must satisfy the specified predicate.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the predicate holds for the subject.

    The predicate receives the subject, which may be None.
    """
    subject = context.subject
    context.validate(Condition("MUST_SATISFY", lambda: predicate(subject)), message, type)


def must_not_satisfy(
    context: AssertionContext[Any],
    predicate: Callable[[Any], bool],
    message: str = "must not satisfy the specified predicate.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(Condition("MUST_NOT_SATISFY", lambda: not predicate(subject)), message, type)
