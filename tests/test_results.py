"""Unit tests for the validation result tree.

Tests cover:
- Graph path rendering for every member kind
- Relative assertion prefixes and absolute messages
- Flattening order (pre-order, insertion order)
- Unknown member kinds
- Serialization to and from dicts, including schema checks
"""

import json

import jsonschema
import pytest

from graphvalidator import (
    Assertion,
    AssertionType,
    Condition,
    Function,
    MemberKind,
    MemberResult,
    Property,
    UnknownMemberKindError,
    ValidationResult,
)
from graphvalidator.results import RESULT_GRAPH_SCHEMA, entry_name

from tests.subjects import ComplexSubjectValidator


def failed(condition_id="MUST_FAIL"):
    return Condition(condition_id, lambda: False)


class TestGraphPaths:
    """Test graph path calculation."""

    def test_root_path_is_its_name(self):
        """Should render the root by name."""
        assert ValidationResult("Order").calculate_graph_path() == "Order"

    def test_property_path(self):
        """Should render a property as Root.p."""
        root = ValidationResult("R")
        assert root.create_member(Property("p", str)).calculate_graph_path() == "R.p"

    def test_function_path(self):
        """Should render a function as Root.f()."""
        root = ValidationResult("R")
        member = root.create_member(Function("f", lambda s: s, int))
        assert member.kind == MemberKind.FUNCTION
        assert member.calculate_graph_path() == "R.f()"

    def test_element_path(self):
        """Should render element 0 of collection c as Root.c[0]."""
        root = ValidationResult("R")
        collection = root.create_member(Property("c", list))
        assert collection.create_element(0, int).calculate_graph_path() == "R.c[0]"

    def test_entry_path_with_string_key(self):
        """Should wrap string keys in double quotes."""
        root = ValidationResult("R")
        mapping = root.create_member(Property("m", dict))
        assert mapping.create_entry("k", int).calculate_graph_path() == 'R.m["k"]'

    def test_entry_path_with_other_keys(self):
        """Should render non-string keys with str(), including a real None key."""
        root = ValidationResult("R")
        mapping = root.create_member(Property("m", dict))
        assert mapping.create_entry(3, int).calculate_graph_path() == "R.m[3]"
        assert mapping.create_entry(None, int).calculate_graph_path() == "R.m[None]"

    def test_synthetic_entry_path(self):
        """Should name the synthetic entry of a missing map 'key'."""
        root = ValidationResult("R")
        mapping = root.create_member(Property("m", dict))
        assert mapping.create_entry(None, int, synthetic=True).calculate_graph_path() == "R.m[key]"

    def test_nested_object_is_transparent(self):
        """Should not add a segment for a nested object."""
        root = ValidationResult("Root")
        parent = root.create_member(Property("parent", object))
        nested = parent.create_object("Child")
        child = nested.create_member(Property("child", str))

        assert nested.kind == MemberKind.OBJECT
        assert nested.calculate_graph_path() == "Root.parent"
        assert child.calculate_graph_path() == "Root.parent.child"

    def test_unknown_kind_raises(self):
        """Should refuse to compute a path for a non-member kind."""
        root = ValidationResult("R")
        member = MemberResult("x", MemberKind.OBJECT, "str", False, root)

        with pytest.raises(UnknownMemberKindError) as exc_info:
            member.calculate_graph_path()

        assert exc_info.value.kind == MemberKind.OBJECT

    def test_entry_name(self):
        """Should name entries consistently."""
        assert entry_name("a") == '"a"'
        assert entry_name(1.5) == "1.5"
        assert entry_name(None) == "None"


class TestAssertionRendering:
    """Test how assertions are rendered into failure messages."""

    def test_relative_prefix(self):
        """Should describe the member by kind, path and type."""
        root = ValidationResult("Person")
        member = root.create_member(Property("name", str))
        assert member.create_relative_assertion_prefix() == "Property 'Person.name' of type 'str'"

    def test_relative_and_absolute_messages(self):
        """Should prefix relative messages and keep absolute ones as they are."""
        root = ValidationResult("Person")
        member = root.create_member(Property("age", int))
        member.add_assertion(Assertion(failed(), "must be positive."))
        member.add_assertion(Assertion(failed(), "Age is required.", AssertionType.ABSOLUTE))
        root.add_member(member)

        assert root.to_list() == [
            "Property 'Person.age' of type 'int' must be positive.",
            "Age is required.",
        ]
        assert str(root) == "Property 'Person.age' of type 'int' must be positive.\nAge is required."

    def test_element_prefix_uses_element_type(self):
        """Should describe elements with their own type and nullability."""
        root = ValidationResult("R")
        element = root.create_member(Property("c", list)).create_element(2, int)
        assert element.create_relative_assertion_prefix() == "Element 'R.c[2]' of type 'int'"
        assert element.nullable is False


class TestFlatten:
    """Test flattening of the result tree."""

    def test_pre_order_and_insertion_order(self):
        """Should list a node's own assertions before its members', in insertion order."""
        root = ValidationResult("R")
        first = root.create_member(Property("a", list))
        first.add_assertion(Assertion(failed(), "one."))
        element = first.create_element(0, str)
        element.add_assertion(Assertion(failed(), "two."))
        first.add_member(element)
        second = root.create_member(Property("b", str))
        second.add_assertion(Assertion(failed(), "three."))
        root.add_member(first)
        root.add_member(second)

        assert root.to_list() == [
            "Property 'R.a' of type 'list' one.",
            "Element 'R.a[0]' of type 'str' two.",
            "Property 'R.b' of type 'str' three.",
        ]

    def test_has_failures(self):
        """Should report failures anywhere in the subtree."""
        root = ValidationResult("R")
        member = root.create_member(Property("a", str))
        assert not root.has_failures()
        assert not member.has_failures()
        assert root.is_empty()

        member.add_assertion(Assertion(failed(), "fails."))
        root.add_member(member)

        assert member.has_failures()
        assert root.has_failures()
        assert not root.is_empty()

    def test_members_is_a_copy(self):
        """Should not allow mutation of the tree through the members list."""
        root = ValidationResult("R")
        root.members.append(ValidationResult("X"))
        assert root.members == []


class TestSerialization:
    """Test conversion of the result tree to and from dicts."""

    def test_to_dict(self):
        """Should serialize kinds, types and assertions with camelCase keys."""
        root = ValidationResult("Person")
        member = root.create_member(Property("name", str))
        member.add_assertion(Assertion(failed("MUST_NOT_BE_BLANK"), "must not be blank."))
        root.add_member(member)

        assert root.to_dict() == {
            "name": "Person",
            "kind": "Root",
            "members": [
                {
                    "name": "name",
                    "kind": "Property",
                    "type": "str",
                    "nullable": False,
                    "assertions": [
                        {
                            "conditionId": "MUST_NOT_BE_BLANK",
                            "message": "must not be blank.",
                            "type": "Relative",
                        }
                    ],
                }
            ],
        }

    def test_document_matches_schema(self):
        """Should produce documents that satisfy the published schema."""
        document = ComplexSubjectValidator().validate().to_dict()
        jsonschema.Draft7Validator(RESULT_GRAPH_SCHEMA).validate(document)

    def test_round_trip_preserves_failures(self):
        """Should rebuild a tree with the same paths and messages."""
        original = ComplexSubjectValidator().validate()

        restored = ValidationResult.from_dict(json.loads(original.to_json()))

        assert restored.to_list() == original.to_list()
        assert restored.to_dict() == original.to_dict()

    def test_round_trip_preserves_condition_ids(self):
        """Should keep the identity of every recorded condition."""
        original = ComplexSubjectValidator().validate()
        restored = ValidationResult.from_dict(original.to_dict())

        assert [a.condition.id for a in restored.iter_assertions()] == [
            a.condition.id for a in original.iter_assertions()
        ]

    def test_from_dict_rejects_malformed_documents(self):
        """Should check documents against the schema before rebuilding."""
        with pytest.raises(jsonschema.ValidationError):
            ValidationResult.from_dict({"name": "R", "kind": "Root", "members": [{"name": "x", "kind": "Property"}]})

        with pytest.raises(jsonschema.ValidationError):
            ValidationResult.from_dict({"name": "R", "kind": "Sideways"})

    def test_from_dict_requires_a_root(self):
        """Should refuse a document whose top-level node is not a root."""
        with pytest.raises(ValueError):
            ValidationResult.from_dict({"name": "x", "kind": "Property", "type": "str"})

    def test_to_json_is_compact(self):
        """Should serialize without whitespace between tokens."""
        assert ValidationResult("R").to_json() == '{"name":"R","kind":"Root"}'
