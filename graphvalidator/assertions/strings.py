"""Assertions applicable to string subjects.

A string is blank when it is empty or contains only whitespace. Unless an
assertion says otherwise, a None subject does not satisfy it.
"""

import re
from typing import Iterable, Optional, Pattern, Union

from graphvalidator.assertions._format import join_values
from graphvalidator.conditions import Condition
from graphvalidator.context import AssertionContext
from graphvalidator.types import AssertionType

StringContext = AssertionContext[Optional[str]]


def _is_blank(value: str) -> bool:
    return not value.strip()


def is_valid_luhn_checksum(value: str) -> bool:
    """Check a string of at least two digits against the Luhn (mod 10) algorithm.

    Examples:
        >>> is_valid_luhn_checksum("79927398713")
        True
        >>> is_valid_luhn_checksum("79927398710")
        False
    """
    if len(value) < 2 or not all(char in "0123456789" for char in value):
        return False
    total = 0
    for index, char in enumerate(reversed(value)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def must_be_null_or_blank(
    context: StringContext,
    message: str = "must be null or blank.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(
        Condition("MUST_BE_NULL_OR_BLANK", lambda: subject is None or _is_blank(subject)),
        message,
        type,
    )


def must_not_be_null_or_blank(
    context: StringContext,
    message: str = "must not be null or blank.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(
        Condition("MUST_NOT_BE_NULL_OR_BLANK", lambda: subject is not None and not _is_blank(subject)),
        message,
        type,
    )


def must_be_null_or_empty(
    context: StringContext,
    message: str = "must be null or empty.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(Condition("MUST_BE_NULL_OR_EMPTY", lambda: not subject), message, type)


def must_not_be_null_or_empty(
    context: StringContext,
    message: str = "must not be null or empty.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(Condition("MUST_NOT_BE_NULL_OR_EMPTY", lambda: bool(subject)), message, type)


def must_be_blank(
    context: StringContext,
    message: str = "must be blank.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(
        Condition("MUST_BE_BLANK", lambda: subject is not None and _is_blank(subject)),
        message,
        type,
    )


def must_not_be_blank(
    context: StringContext,
    message: str = "must not be blank.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject is not blank; None passes, use must_not_be_null_or_blank to reject it."""
    subject = context.subject
    context.validate(
        Condition("MUST_NOT_BE_BLANK", lambda: subject is None or not _is_blank(subject)),
        message,
        type,
    )


def must_be_empty(
    context: StringContext,
    message: str = "must be empty.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(Condition("MUST_BE_EMPTY", lambda: subject == ""), message, type)


def must_not_be_empty(
    context: StringContext,
    message: str = "must not be empty.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the subject is not empty; None passes."""
    subject = context.subject
    context.validate(Condition("MUST_NOT_BE_EMPTY", lambda: subject != ""), message, type)


def must_contain(
    context: StringContext,
    value: str,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must contain the specified value: {value}."
    context.validate(
        Condition("MUST_CONTAIN", lambda: subject is not None and value in subject),
        message,
        type,
    )


def must_not_contain(
    context: StringContext,
    value: str,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not contain the specified value: {value}."
    context.validate(
        Condition("MUST_NOT_CONTAIN", lambda: subject is None or value not in subject),
        message,
        type,
    )


def must_contain_all(
    context: StringContext,
    values: Iterable[str],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must contain all of the specified values: {join_values(values)}."
    context.validate(
        Condition("MUST_CONTAIN_ALL", lambda: subject is not None and all(v in subject for v in values)),
        message,
        type,
    )


def must_contain_any(
    context: StringContext,
    values: Iterable[str],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    values = list(values)
    if message is None:
        message = f"must contain any of the specified values: {join_values(values)}."
    context.validate(
        Condition("MUST_CONTAIN_ANY", lambda: subject is not None and any(v in subject for v in values)),
        message,
        type,
    )


def must_end_with(
    context: StringContext,
    value: str,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must end with the specified value: {value}."
    context.validate(
        Condition("MUST_END_WITH", lambda: subject is not None and subject.endswith(value)),
        message,
        type,
    )


def must_not_end_with(
    context: StringContext,
    value: str,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not end with the specified value: {value}."
    context.validate(
        Condition("MUST_NOT_END_WITH", lambda: subject is None or not subject.endswith(value)),
        message,
        type,
    )


def must_start_with(
    context: StringContext,
    value: str,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must start with the specified value: {value}."
    context.validate(
        Condition("MUST_START_WITH", lambda: subject is not None and subject.startswith(value)),
        message,
        type,
    )


def must_not_start_with(
    context: StringContext,
    value: str,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must not start with the specified value: {value}."
    context.validate(
        Condition("MUST_NOT_START_WITH", lambda: subject is None or not subject.startswith(value)),
        message,
        type,
    )


def must_have_length(
    context: StringContext,
    length: int,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must have the specified length: {length}."
    context.validate(
        Condition("MUST_HAVE_LENGTH", lambda: subject is not None and len(subject) == length),
        message,
        type,
    )


def must_have_length_between(
    context: StringContext,
    minimum: int,
    maximum: int,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that minimum <= len(subject) <= maximum."""
    subject = context.subject
    if message is None:
        message = f"must be between the specified minimum and maximum length: {minimum} to {maximum}."
    context.validate(
        Condition("MUST_HAVE_LENGTH_BETWEEN", lambda: subject is not None and minimum <= len(subject) <= maximum),
        message,
        type,
    )


def must_have_maximum_length(
    context: StringContext,
    maximum_length: int,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must have the specified maximum length: {maximum_length}."
    context.validate(
        Condition("MUST_HAVE_MAXIMUM_LENGTH", lambda: subject is not None and len(subject) <= maximum_length),
        message,
        type,
    )


def must_have_minimum_length(
    context: StringContext,
    minimum_length: int,
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    if message is None:
        message = f"must have the specified minimum length: {minimum_length}."
    context.validate(
        Condition("MUST_HAVE_MINIMUM_LENGTH", lambda: subject is not None and len(subject) >= minimum_length),
        message,
        type,
    )


def must_be_valid_luhn_checksum(
    context: StringContext,
    message: str = "must be a valid Luhn (Mod10) checksum.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(
        Condition("MUST_BE_VALID_LUHN_CHECKSUM", lambda: subject is not None and is_valid_luhn_checksum(subject)),
        message,
        type,
    )


def must_match_regex(
    context: StringContext,
    regex: Union[str, Pattern[str]],
    message: Optional[str] = None,
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    """Assert that the whole subject matches the regular expression."""
    subject = context.subject
    pattern = re.compile(regex)
    if message is None:
        message = f"must match the specified regular expression: {pattern.pattern}."
    context.validate(
        Condition("MUST_MATCH_REGEX", lambda: subject is not None and pattern.fullmatch(subject) is not None),
        message,
        type,
    )
