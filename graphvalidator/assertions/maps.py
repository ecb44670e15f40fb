"""Assertions applicable to mapping subjects."""

from typing import Any, Mapping, Optional

from graphvalidator.conditions import Condition
from graphvalidator.context import AssertionContext
from graphvalidator.types import AssertionType

MappingContext = AssertionContext[Optional[Mapping[Any, Any]]]


def must_contain_key(
    context: MappingContext,
    key: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must contain the specified key: {key}."
    context.validate(
        Condition("MUST_CONTAIN_KEY", lambda: subject is not None and key in subject),
        message,
        type,
    )


def must_not_contain_key(
    context: MappingContext,
    key: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not contain the specified key: {key}."
    context.validate(
        Condition("MUST_NOT_CONTAIN_KEY", lambda: subject is not None and key not in subject),
        message,
        type,
    )


def must_contain_value(
    context: MappingContext,
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must contain the specified value: {value}."
    context.validate(
        Condition("MUST_CONTAIN_VALUE", lambda: subject is not None and value in subject.values()),
        message,
        type,
    )


def must_not_contain_value(
    context: MappingContext,
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not contain the specified value: {value}."
    context.validate(
        Condition("MUST_NOT_CONTAIN_VALUE", lambda: subject is not None and value not in subject.values()),
        message,
        type,
    )


def _has_entry(subject: Mapping[Any, Any], key: Any, value: Any) -> bool:
    return key in subject and subject[key] == value


def must_contain_entry(
    context: MappingContext,
    key: Any,
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject maps key to value."""
    subject = context.subject
    if message is None:
        message = f"must contain the specified entry: {key} to {value}."
    context.validate(
        Condition("MUST_CONTAIN_ENTRY", lambda: subject is not None and _has_entry(subject, key, value)),
        message,
        type,
    )


def must_not_contain_entry(
    context: MappingContext,
    key: Any,
    value: Any,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not contain the specified entry: {key} to {value}."
    context.validate(
        Condition("MUST_NOT_CONTAIN_ENTRY", lambda: subject is not None and not _has_entry(subject, key, value)),
        message,
        type,
    )
