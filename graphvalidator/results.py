"""Validation result tree for the graph validation engine.

This module defines the tree that records, per addressable member of a
validated object graph, which assertions failed.

- ValidationResult is the root of a validation run, or a nested object grafted
  under a member when a child validator runs. Nested objects are transparent
  in graph paths.
- MemberResult addresses a property, function result, collection element or
  map entry and owns the failed assertions made against it.

Nodes know their parent so they can compute their graph path
(e.g. "Order.lines[0].sku") and the descriptive prefix used to render
relative assertion messages. Children are only ever appended, and their
insertion order is the order of to_list().

The tree serializes to a camelCase dict in the same shape as the rest of the
package's to_dict() methods, and can be rebuilt from one with from_dict(),
which checks the document against RESULT_GRAPH_SCHEMA first.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Union

from jsonschema import Draft7Validator

from graphvalidator.conditions import Condition, ValidationCondition
from graphvalidator.errors import UnknownMemberKindError
from graphvalidator.members import Function, Property, format_type, is_optional
from graphvalidator.types import AssertionType, MemberKind

MEMBER_KINDS = (MemberKind.PROPERTY, MemberKind.FUNCTION, MemberKind.ELEMENT, MemberKind.ENTRY)

# Name of the synthetic entry visited when a map is validated without a value.
NULL_ENTRY_NAME = "key"


RESULT_GRAPH_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$ref": "#/definitions/result",
    "definitions": {
        "assertion": {
            "type": "object",
            "properties": {
                "conditionId": {"type": "string", "minLength": 1},
                "message": {"type": "string"},
                "type": {"enum": [t.value for t in AssertionType]},
            },
            "required": ["conditionId", "message", "type"],
            "additionalProperties": False,
        },
        "result": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "kind": {"enum": [k.value for k in MemberKind]},
                "type": {"type": "string"},
                "nullable": {"type": "boolean"},
                "assertions": {
                    "type": "array",
                    "items": {"$ref": "#/definitions/assertion"},
                },
                "members": {
                    "type": "array",
                    "items": {"$ref": "#/definitions/result"},
                },
            },
            "required": ["name", "kind"],
            "additionalProperties": False,
            "if": {"properties": {"kind": {"enum": [k.value for k in MEMBER_KINDS]}}},
            "then": {"required": ["type"]},
        },
    },
}


@dataclass(frozen=True)
class Assertion:
    """A failed assertion made against a member of the object graph.

    Attributes:
        condition: The condition that was asserted
        message: The assertion message; a fragment when the type is RELATIVE
        type: Whether the message is absolute or relative to the member

    Examples:
        >>> from graphvalidator.conditions import Condition
        >>> a = Assertion(Condition("MUST_NOT_BE_NULL", lambda: False), "must not be null.")
        >>> a.render("Property 'Person.name' of type 'str'")
        "Property 'Person.name' of type 'str' must not be null."
    """
    condition: ValidationCondition
    message: str
    type: AssertionType = AssertionType.RELATIVE

    def render(self, relative_prefix: str) -> str:
        """Render the message, prefixing it with the member description if relative."""
        if self.type == AssertionType.RELATIVE:
            return f"{relative_prefix} {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "conditionId": self.condition.id,
            "message": self.message,
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Assertion":
        """Create Assertion from dict.

        The recorded condition is rebuilt as one that does not hold.
        """
        condition_id = data["conditionId"]
        return cls(
            condition=Condition(condition_id, lambda: False),
            message=data["message"],
            type=AssertionType(data.get("type", AssertionType.RELATIVE.value)),
        )


def entry_name(key: Any) -> str:
    """Name of the result node for a map entry.

    Examples:
        >>> entry_name("currency")
        '"currency"'
        >>> entry_name(42)
        '42'
        >>> entry_name(None)
        'None'
    """
    if isinstance(key, str):
        return f'"{key}"'
    return str(key)


class ValidationResult:
    """Root of a validated object graph, or a nested object within one.

    A result without a parent is the root of a validation run. A result with a
    parent is a nested object grafted under a member by a child validator and
    contributes nothing of its own to graph paths.

    Attributes:
        name: Name of the validated subject type
        parent: The node this result is nested under, or None for the root

    Examples:
        >>> root = ValidationResult("Person")
        >>> root.kind
        <MemberKind.ROOT: 'Root'>
        >>> root.calculate_graph_path()
        'Person'
        >>> root.to_list()
        []
    """

    def __init__(self, name: str, parent: Optional["ValidationResult"] = None):
        self.name = name
        self.parent = parent
        self._members: List["ValidationResult"] = []

    @property
    def kind(self) -> MemberKind:
        return MemberKind.ROOT if self.parent is None else MemberKind.OBJECT

    @property
    def members(self) -> List["ValidationResult"]:
        """Child nodes, in the order they were attached."""
        return list(self._members)

    @property
    def assertions(self) -> List[Assertion]:
        return []

    def add_member(self, member: "ValidationResult") -> None:
        self._members.append(member)

    def create_object(self, name: str) -> "ValidationResult":
        """Create a nested object result under this node (not attached)."""
        return ValidationResult(name=name, parent=self)

    def create_member(self, accessor: Union[Property, Function]) -> "MemberResult":
        """Create a property or function result under this node (not attached)."""
        if isinstance(accessor, Property):
            kind = MemberKind.PROPERTY
        elif isinstance(accessor, Function):
            kind = MemberKind.FUNCTION
        else:
            raise TypeError(f"Unknown accessor type: {type(accessor).__name__}")
        return MemberResult(
            name=accessor.name,
            kind=kind,
            type_name=accessor.type_name,
            nullable=accessor.nullable,
            parent=self,
        )

    def create_element(self, index: int, annotation: Any) -> "MemberResult":
        """Create a collection element result under this node (not attached)."""
        return MemberResult(
            name=str(index),
            kind=MemberKind.ELEMENT,
            type_name=format_type(annotation),
            nullable=is_optional(annotation),
            parent=self,
        )

    def create_entry(self, key: Any, annotation: Any, synthetic: bool = False) -> "MemberResult":
        """Create a map entry result under this node (not attached).

        The synthetic entry of a missing map is named "key", whatever its key.
        """
        return MemberResult(
            name=NULL_ENTRY_NAME if synthetic else entry_name(key),
            kind=MemberKind.ENTRY,
            type_name=format_type(annotation),
            nullable=is_optional(annotation),
            parent=self,
        )

    def calculate_graph_path(self) -> str:
        """Calculate the graph path from the root of the object graph to this node."""
        if self.parent is None:
            return self.name
        return self.parent.calculate_graph_path()

    def iter_assertions(self) -> Iterator[Assertion]:
        """Iterate over the assertions of this node and its descendants, depth-first."""
        yield from self.assertions
        for member in self._members:
            yield from member.iter_assertions()

    def has_failures(self) -> bool:
        return next(self.iter_assertions(), None) is not None

    def is_empty(self) -> bool:
        """Check whether no assertion failed anywhere in this subtree."""
        return not self.has_failures()

    def to_list(self) -> List[str]:
        """Flatten all failed assertions in this subtree into rendered messages.

        Each node contributes its own assertions before those of its members.
        """
        failures: List[str] = []
        for member in self._members:
            failures.extend(member.to_list())
        return failures

    def __str__(self) -> str:
        return "\n".join(self.to_list())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, kind={self.kind.value!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization."""
        result: Dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
        }
        if self._members:
            result["members"] = [m.to_dict() for m in self._members]
        return result

    def to_json(self) -> str:
        """Convert to a compact JSON string."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationResult":
        """Rebuild a result tree from its dict form.

        Args:
            data: A document produced by to_dict() on a root result

        Returns:
            The root ValidationResult, with parents re-linked

        Raises:
            jsonschema.ValidationError: If the document does not match RESULT_GRAPH_SCHEMA
            ValueError: If the top-level node is not a root
        """
        Draft7Validator(RESULT_GRAPH_SCHEMA).validate(data)
        if data["kind"] != MemberKind.ROOT.value:
            raise ValueError(f"Expected a '{MemberKind.ROOT.value}' node, got '{data['kind']}'")
        root = cls(name=data["name"])
        root._load_members(data.get("members", []))
        return root

    def _load_members(self, members: List[Dict[str, Any]]) -> None:
        for item in members:
            kind = MemberKind(item["kind"])
            if kind == MemberKind.ROOT:
                raise ValueError(f"Root node '{item['name']}' cannot be nested")
            if kind == MemberKind.OBJECT:
                node: ValidationResult = self.create_object(item["name"])
            else:
                node = MemberResult(
                    name=item["name"],
                    kind=kind,
                    type_name=item["type"],
                    nullable=item.get("nullable", False),
                    parent=self,
                )
                for assertion in item.get("assertions", []):
                    node.add_assertion(Assertion.from_dict(assertion))
            node._load_members(item.get("members", []))
            self.add_member(node)


class MemberResult(ValidationResult):
    """Validation result of a member in the object graph.

    Attributes:
        name: Name of the member (property or function name, element index, entry key)
        type_name: Label of the member's declared type
        nullable: Whether the member's declared type admits None
        parent: The node this member belongs to

    Examples:
        >>> root = ValidationResult("Order")
        >>> lines = MemberResult("lines", MemberKind.PROPERTY, "list[str]", False, root)
        >>> lines.create_element(0, str).calculate_graph_path()
        'Order.lines[0]'
    """

    def __init__(
        self,
        name: str,
        kind: MemberKind,
        type_name: str,
        nullable: bool,
        parent: ValidationResult,
    ):
        super().__init__(name=name, parent=parent)
        self._kind = kind
        self.type_name = type_name
        self.nullable = nullable
        self._assertions: List[Assertion] = []

    @property
    def kind(self) -> MemberKind:
        return self._kind

    @property
    def assertions(self) -> List[Assertion]:
        """Failed assertions made directly against this member."""
        return list(self._assertions)

    def add_assertion(self, assertion: Assertion) -> None:
        self._assertions.append(assertion)

    def calculate_graph_path(self) -> str:
        """Calculate the graph path from the root of the object graph to this member.

        Raises:
            UnknownMemberKindError: If the member kind has no path representation
        """
        if self.parent is None:
            return self.name
        if self._kind == MemberKind.PROPERTY:
            return f"{self.parent.calculate_graph_path()}.{self.name}"
        if self._kind == MemberKind.FUNCTION:
            return f"{self.parent.calculate_graph_path()}.{self.name}()"
        if self._kind in (MemberKind.ELEMENT, MemberKind.ENTRY):
            return f"{self.parent.calculate_graph_path()}[{self.name}]"
        raise UnknownMemberKindError(self._kind, self.name)

    def create_relative_assertion_prefix(self) -> str:
        """Describe this member for prefixing relative assertion messages."""
        return f"{self._kind.value} '{self.calculate_graph_path()}' of type '{self.type_name}'"

    def to_list(self) -> List[str]:
        failures: List[str] = []
        if self._assertions:
            prefix = self.create_relative_assertion_prefix()
            failures.extend(a.render(prefix) for a in self._assertions)
        failures.extend(super().to_list())
        return failures

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, kind={self._kind.value!r}, "
            f"type_name={self.type_name!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization."""
        result: Dict[str, Any] = {
            "name": self.name,
            "kind": self._kind.value,
            "type": self.type_name,
            "nullable": self.nullable,
        }
        if self._assertions:
            result["assertions"] = [a.to_dict() for a in self._assertions]
        if self._members:
            result["members"] = [m.to_dict() for m in self._members]
        return result


__all__ = [
    "Assertion",
    "ValidationResult",
    "MemberResult",
    "RESULT_GRAPH_SCHEMA",
    "entry_name",
]
