"""Assertions applicable to boolean subjects."""

from typing import Optional

from graphvalidator.conditions import Condition
from graphvalidator.context import AssertionContext
from graphvalidator.types import AssertionType


def must_be_true(
    context: AssertionContext[Optional[bool]],
    message: str = "must be true.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(Condition("MUST_BE_TRUE", lambda: subject is True), message, type)


def must_be_false(
    context: AssertionContext[Optional[bool]],
    message: str = "must be false.",
    type: AssertionType = AssertionType.RELATIVE,
) -> None:
    subject = context.subject
    context.validate(Condition("MUST_BE_FALSE", lambda: subject is False), message, type)
