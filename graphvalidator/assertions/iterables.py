"""Assertions applicable to iterable subjects.

Membership is tested by equality, so elements need not be hashable. None
never satisfies an iterable assertion.
"""

from typing import Any, Iterable, List, Optional

from graphvalidator.assertions._format import join_values
from graphvalidator.conditions import Condition
from graphvalidator.context import AssertionContext
from graphvalidator.types import AssertionType

IterableContext = AssertionContext[Optional[Iterable[Any]]]


def _unordered_equals(left: List[Any], right: List[Any]) -> bool:
    if len(left) != len(right):
        return False
    remaining = list(right)
    for item in left:
        if item not in remaining:
            return False
        remaining.remove(item)
    return True


def _distinct(items: List[Any]) -> List[Any]:
    distinct: List[Any] = []
    for item in items:
        if item not in distinct:
            distinct.append(item)
    return distinct


def must_contain(
    context: IterableContext,
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must contain the specified element value: {value}."
    context.validate(
        Condition("MUST_CONTAIN", lambda: subject is not None and value in list(subject)),
        message,
        type,
    )


def must_contain_all(
    context: IterableContext,
    values: Iterable[Any],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must contain all of the specified element values: {join_values(values)}."

    def condition() -> bool:
        if subject is None:
            return False
        items = list(subject)
        return all(value in items for value in values)

    context.validate(Condition("MUST_CONTAIN_ALL", condition), message, type)


def must_contain_any(
    context: IterableContext,
    values: Iterable[Any],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must contain any of the specified element values: {join_values(values)}."

    def condition() -> bool:
        if subject is None:
            return False
        items = list(subject)
        return any(value in items for value in values)

    context.validate(Condition("MUST_CONTAIN_ANY", condition), message, type)


def must_contain_exactly(
    context: IterableContext,
    values: Iterable[Any],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject holds exactly the specified elements, in any order."""
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must contain exactly the specified element values: {join_values(values)}."
    context.validate(
        Condition("MUST_CONTAIN_EXACTLY", lambda: subject is not None and _unordered_equals(list(subject), values)),
        message,
        type,
    )


def must_contain_ordered_exactly(
    context: IterableContext,
    values: Iterable[Any],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject holds exactly the specified elements, in the same order."""
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must contain exactly the specified element values in order: {join_values(values)}."
    context.validate(
        Condition("MUST_CONTAIN_ORDERED_EXACTLY", lambda: subject is not None and list(subject) == values),
        message,
        type,
    )


def must_have_count(
    context: IterableContext,
    count: int,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must contain exactly the specified number of elements: {count}."
    context.validate(
        Condition("MUST_HAVE_COUNT", lambda: subject is not None and len(list(subject)) == count),
        message,
        type,
    )


def must_be_empty(
    context: IterableContext,
    message: str = "must be empty.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(
        Condition("MUST_BE_EMPTY", lambda: subject is not None and not list(subject)),
        message,
        type,
    )


def must_not_be_empty(
    context: IterableContext,
    message: str = "must not be empty.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(
        Condition("MUST_NOT_BE_EMPTY", lambda: subject is not None and bool(list(subject))),
        message,
        type,
    )


def must_be_single(
    context: IterableContext,
    message: str = "must contain a single element.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(
        Condition("MUST_BE_SINGLE", lambda: subject is not None and len(list(subject)) == 1),
        message,
        type,
    )


def must_be_distinct(
    context: IterableContext,
    message: str = "must contain distinct elements.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject

    def condition() -> bool:
        if subject is None:
            return False
        items = list(subject)
        return len(items) == len(_distinct(items))

    context.validate(Condition("MUST_BE_DISTINCT", condition), message, type)
