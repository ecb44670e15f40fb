"""Validator base class and entry points for the graph validation engine.

A Validator is the reusable definition of which assertions apply to a type.
Subclasses declare the subject type through the generic parameter (or a
subject_type class attribute) and implement define(), which registers member
validations on the builder it is given:

    >>> from dataclasses import dataclass
    >>> from graphvalidator.assertions import comparables
    >>> @dataclass
    ... class Range:
    ...     low: int
    ...     high: int
    >>> class RangeValidator(Validator[Range]):
    ...     def define(self, builder):
    ...         builder.property("low", action=lambda ctx: comparables.must_be_greater_than_or_equal_to(ctx, 0))
    >>> RangeValidator().validate(Range(low=-1, high=5)).to_list()
    ["Property 'Range.low' of type 'int' must be greater than or equal to the specified value: 0."]

define() is configuration only: it must not depend on the validation mode,
and validators hold no per-run state, so one instance can validate any number
of subjects.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Generic, List, Optional, Tuple, TypeVar, Union, get_args, get_origin

from graphvalidator.builder import ValidationBuilder
from graphvalidator.errors import InvalidValidationModeError, ValidationGraphError
from graphvalidator.modes import TraversalState
from graphvalidator.results import ValidationResult
from graphvalidator.types import ValidationMode

T = TypeVar("T")

Definition = Callable[[ValidationBuilder[Any]], None]

logger = logging.getLogger(__name__)


class Validator(ABC, Generic[T]):
    """Base class for validator implementations.

    Attributes:
        subject_type: The type validated by this validator; taken from the
            generic parameter when not declared explicitly
    """

    subject_type: ClassVar[Optional[type]] = None
    # Argument bound to Validator's parameter: a type, or a TypeVar of a generic subclass.
    _subject_parameter: ClassVar[Any] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("subject_type") is not None:
            return
        for base in cls.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, Validator)):
                continue
            parameter = _bind_subject_parameter(origin, get_args(base))
            cls._subject_parameter = parameter
            if isinstance(parameter, type):
                cls.subject_type = parameter
            break

    @abstractmethod
    def define(self, builder: ValidationBuilder[T]) -> None:
        """Declare the member validations of the subject type.

        Args:
            builder: The validation builder bound to the subject
        """

    def _subject_type(self) -> type:
        if self.subject_type is None:
            raise TypeError(f"{type(self).__name__} does not declare a subject type")
        return self.subject_type

    def validate(
        self,
        subject: Optional[T] = None,
        mode: Optional[Union[ValidationMode, str]] = None,
    ) -> ValidationResult:
        """Validate a subject and return the result tree.

        Args:
            subject: The subject to validate; None is only allowed in FORCE_FAIL mode
            mode: The validation mode; defaults to COLLECT_ALL for a subject
                and FORCE_FAIL without one

        Returns:
            The root ValidationResult holding every failed assertion

        Raises:
            ValidationError: In FAIL_FAST mode, on the first failed assertion
            InvalidValidationModeError: If subject is None outside FORCE_FAIL mode
        """
        if mode is None:
            mode = ValidationMode.FORCE_FAIL if subject is None else ValidationMode.COLLECT_ALL
        mode = ValidationMode(mode)
        if subject is None and mode != ValidationMode.FORCE_FAIL:
            raise InvalidValidationModeError(mode)

        subject_type = self._subject_type()
        state = TraversalState(mode=mode)
        result = ValidationResult(name=subject_type.__name__)
        logger.debug("Validating %s in %s mode", result.name, mode.value)

        self.define(ValidationBuilder(result, state, subject_type, subject))

        state.raise_if_stopped()
        logger.debug("Validated %s: %d failed assertion(s)", result.name, sum(1 for _ in result.iter_assertions()))
        return result

    def validate_as_child(
        self,
        subject: Optional[T],
        state: TraversalState,
        parent: ValidationResult,
    ) -> ValidationResult:
        """Validate a subject nested within another validation run.

        The returned result is created under parent but not attached to it;
        attaching is left to the caller.

        Raises:
            InvalidValidationModeError: If subject is None outside FORCE_FAIL mode
        """
        if subject is None and state.mode != ValidationMode.FORCE_FAIL:
            raise InvalidValidationModeError(state.mode)

        subject_type = self._subject_type()
        result = parent.create_object(subject_type.__name__)
        self.define(ValidationBuilder(result, state, subject_type, subject))
        return result

    def ensure_valid(self, subject: T) -> None:
        """Validate a subject and raise if any assertion failed.

        Raises:
            ValidationGraphError: Carrying every failure message, if the subject is invalid
        """
        result = self.validate(subject, ValidationMode.COLLECT_ALL)
        if result.has_failures():
            raise ValidationGraphError(
                f"Validation of the specified object type failed: {result.name}.",
                result.to_list(),
            )

    def manifest(self) -> List[str]:
        """List every failure message this validator can produce, without a subject."""
        return self.validate(None, ValidationMode.FORCE_FAIL).to_list()


def _bind_subject_parameter(origin: type, args: Tuple[Any, ...]) -> Any:
    """Resolve the subject argument of a parameterized Validator base.

    For Validator[X] this is X. For a generic subclass Base[X], the TypeVar
    Base passed to Validator is looked up among Base's own parameters.
    """
    if origin is Validator:
        return args[0] if args else None
    parameter = origin._subject_parameter
    parameters = getattr(origin, "__parameters__", ())
    if isinstance(parameter, TypeVar) and parameter in parameters and len(args) == len(parameters):
        return args[parameters.index(parameter)]
    return parameter


class _ActionValidator(Validator[Any]):
    """Validator whose definition is a plain callable."""

    def __init__(self, subject_type: type, action: Definition):
        self.subject_type = subject_type
        self._action = action

    def define(self, builder: ValidationBuilder[Any]) -> None:
        self._action(builder)


def validator_for(subject_type: type, action: Definition) -> Validator[Any]:
    """Build a validator on the fly from a definition callable.

    Args:
        subject_type: The type the validator applies to
        action: Callable receiving the ValidationBuilder, like Validator.define

    Examples:
        >>> from dataclasses import dataclass
        >>> from graphvalidator.assertions import generic
        >>> from typing import Optional
        >>> @dataclass
        ... class Token:
        ...     value: Optional[str] = None
        >>> validator = validator_for(Token, lambda b: b.property("value", action=generic.must_not_be_null))
        >>> validator.manifest()
        ["Property 'Token.value' of type 'Optional[str]' must not be null."]
    """
    return _ActionValidator(subject_type, action)


def ensure_valid(subject: Any, action: Definition, subject_type: Optional[type] = None) -> None:
    """Build a validator on the fly and validate a subject with it.

    Args:
        subject: The subject to validate
        action: Callable receiving the ValidationBuilder, like Validator.define
        subject_type: The subject's declared type; defaults to type(subject)

    Raises:
        ValidationGraphError: Carrying every failure message, if the subject is invalid
    """
    validator_for(subject_type or type(subject), action).ensure_valid(subject)


__all__ = [
    "Validator",
    "validator_for",
    "ensure_valid",
]
