"""Core type definitions for the graph validation engine.

This module defines the fundamental types used throughout the package:
- ValidationMode: Policy governing how failed assertions are handled
- AssertionType: Whether an assertion message is absolute or relative to its member
- MemberKind: The kind of location a result node addresses in the object graph
- AssertionOutcome: What a single assertion does under a given mode

These types form the contract between validator definitions and the traversal
that evaluates them.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from graphvalidator.context import AssertionContext


class ValidationMode(str, Enum):
    """Validation modes.

    The mode is fixed when a validation run starts and is passed unchanged
    through every level of recursion (see modes.ASSERTION_OUTCOMES).
    """
    COLLECT_ALL = "collect_all"
    FAIL_FAST = "fail_fast"
    FORCE_FAIL = "force_fail"


class AssertionType(str, Enum):
    """Relativity of an assertion message.

    RELATIVE messages are fragments prefixed with the member description,
    ABSOLUTE messages are returned as-is.
    """
    ABSOLUTE = "Absolute"
    RELATIVE = "Relative"


class MemberKind(str, Enum):
    """Kinds of node in the validation result tree.

    Member kinds carry the label used in relative assertion prefixes.
    """
    ROOT = "Root"
    OBJECT = "Object"
    PROPERTY = "Property"
    FUNCTION = "Function"
    ELEMENT = "Element"
    ENTRY = "Entry"


class AssertionOutcome(str, Enum):
    """Effect of a single assertion on the traversal."""
    IGNORE = "ignore"
    RECORD = "record"
    STOP = "stop"


AssertionAction: TypeAlias = Callable[["AssertionContext[Any]"], None]
Getter: TypeAlias = Callable[[Any], Any]
Predicate: TypeAlias = Callable[[], bool]


__all__ = [
    "ValidationMode",
    "AssertionType",
    "MemberKind",
    "AssertionOutcome",
    "AssertionAction",
    "Getter",
    "Predicate",
]
