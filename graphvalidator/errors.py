"""Exception types for the graph validation engine.

Two families of errors are kept strictly apart:

- Validation errors (ValidationError, ValidationGraphError) describe invalid
  data. They are raised on purpose, either by a FAIL_FAST run on the first
  failed assertion or by the ensure_valid convenience wrappers.
- Programmer errors (InvalidValidationModeError, UnknownMemberKindError,
  ConditionEvaluationError) describe a misuse of the engine. They never derive
  from ValidationError, so a caller catching validation failures cannot
  swallow them by accident.
"""

from typing import List, Optional

from graphvalidator.types import ValidationMode


class ValidationError(Exception):
    """Raised when a FAIL_FAST validation run finds its first failure.

    Attributes:
        message: The fully rendered assertion message
        condition_id: Identity of the failed condition, if known
        path: Graph path of the member that failed, if known

    Examples:
        >>> err = ValidationError("Property 'Person.name' of type 'str' must not be empty.")
        >>> str(err)
        "Property 'Person.name' of type 'str' must not be empty."
    """

    def __init__(self, message: str, condition_id: Optional[str] = None, path: Optional[str] = None):
        self.message = message
        self.condition_id = condition_id
        self.path = path
        super().__init__(message)


class ValidationGraphError(ValidationError):
    """Raised when a COLLECT_ALL validation produced a non-empty result tree.

    Attributes:
        message: Summary naming the root type that failed
        failures: Every failed assertion message, in graph order
    """

    def __init__(self, message: str, failures: List[str]):
        self.failures = list(failures)
        super().__init__(message)


class InvalidValidationModeError(ValueError):
    """Raised when a null subject is validated outside FORCE_FAIL mode."""

    def __init__(self, mode: ValidationMode):
        self.mode = mode
        super().__init__(
            f"Validation of a null subject can only occur when the validation mode is set to "
            f"'{ValidationMode.FORCE_FAIL.value}', not '{mode.value}'."
        )


class UnknownMemberKindError(ValueError):
    """Raised when a graph path is requested for a node of an unsupported kind."""

    def __init__(self, kind: object, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown member kind {kind!r} for member '{name}'.")


class ConditionEvaluationError(RuntimeError):
    """Raised when a condition predicate fails with an exception.

    A predicate raising is a defect in the condition or in the way it was
    applied, not a data failure, so it is never recorded as an assertion.

    Attributes:
        condition_id: Identity of the condition that raised
        path: Graph path of the member being validated
    """

    def __init__(self, condition_id: str, path: str):
        self.condition_id = condition_id
        self.path = path
        super().__init__(f"Condition '{condition_id}' raised while validating '{path}'.")


__all__ = [
    "ValidationError",
    "ValidationGraphError",
    "InvalidValidationModeError",
    "UnknownMemberKindError",
    "ConditionEvaluationError",
]
