"""Object graph validation engine.

graphvalidator walks a data object, including nested objects, collections and
mappings, and evaluates the assertions a validator declares against each
addressed member. It provides:
- A validation result tree recording every failed assertion by graph path
- Validation builders for properties, functions, collection elements and map entries
- Three validation modes: collect all failures, fail fast, or force every assertion to fail
- A catalog of built-in assertions for common value, string, iterable and mapping checks

Basic usage:
    >>> from dataclasses import dataclass
    >>> from graphvalidator import Validator
    >>> from graphvalidator.assertions import strings
    >>> @dataclass
    ... class Book:
    ...     title: str
    >>> class BookValidator(Validator[Book]):
    ...     def define(self, builder):
    ...         builder.property("title", action=lambda ctx: strings.must_have_minimum_length(ctx, 10))
    >>> print(BookValidator().validate(Book(title="short")))
    Property 'Book.title' of type 'str' must have the specified minimum length: 10.
"""

__version__ = "0.1.0"
__author__ = "graphvalidator contributors"

# Version info
VERSION = (0, 1, 0)

# Core exports
from graphvalidator.builder import Entry, ValidationBuilder
from graphvalidator.conditions import Condition, ValidationCondition
from graphvalidator.context import AssertionContext
from graphvalidator.errors import (
    ConditionEvaluationError,
    InvalidValidationModeError,
    UnknownMemberKindError,
    ValidationError,
    ValidationGraphError,
)
from graphvalidator.members import Function, Property, properties_of
from graphvalidator.results import Assertion, MemberResult, ValidationResult
from graphvalidator.types import AssertionType, MemberKind, ValidationMode
from graphvalidator.validator import Validator, ensure_valid, validator_for

# Package metadata
__all__ = [
    "__version__",
    "VERSION",
    "Assertion",
    "AssertionContext",
    "AssertionType",
    "Condition",
    "ConditionEvaluationError",
    "Entry",
    "Function",
    "InvalidValidationModeError",
    "MemberKind",
    "MemberResult",
    "Property",
    "UnknownMemberKindError",
    "ValidationBuilder",
    "ValidationCondition",
    "ValidationError",
    "ValidationGraphError",
    "ValidationMode",
    "ValidationResult",
    "Validator",
    "ensure_valid",
    "properties_of",
    "validator_for",
]
