"""Validation conditions.

A condition is a named, side-effect-free predicate bound to one subject value.
Its id is a stable, machine-usable identifier for the kind of check performed
(e.g. "MUST_NOT_BE_NULL") and does not depend on the value under test.
"""

from abc import ABC, abstractmethod

from graphvalidator.types import Predicate


class ValidationCondition(ABC):
    """Base class for validation conditions."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Identity of the condition."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Determine whether the condition holds for its bound subject."""


class Condition(ValidationCondition):
    """Condition backed by a zero-argument predicate.

    Examples:
        >>> condition = Condition("MUST_BE_TRUE", lambda: True)
        >>> condition.id
        'MUST_BE_TRUE'
        >>> condition.is_valid()
        True
    """

    def __init__(self, id: str, predicate: Predicate):
        self._id = id
        self._predicate = predicate

    @property
    def id(self) -> str:
        return self._id

    def is_valid(self) -> bool:
        return bool(self._predicate())

    def __repr__(self) -> str:
        return f"Condition({self._id!r})"


__all__ = [
    "ValidationCondition",
    "Condition",
]
