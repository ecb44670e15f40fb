"""Unit tests for member accessors and type labels."""

from datetime import date
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional, Union
from uuid import UUID

import pytest

from graphvalidator import Function, Property, properties_of
from graphvalidator.members import element_annotation, format_type, is_optional, unwrap_optional, value_annotation

from tests.subjects import ComplexSubject, Customer, NameValuePair, elapsed, get_metadata_value


class TestFormatType:
    """Test type labels used in assertion messages."""

    def test_builtins(self):
        """Should render builtins by bare name."""
        assert format_type(str) == "str"
        assert format_type(int) == "int"
        assert format_type(bool) == "bool"

    def test_library_classes(self):
        """Should render other classes by module and qualified name."""
        assert format_type(date) == "datetime.date"
        assert format_type(Decimal) == "decimal.Decimal"
        assert format_type(UUID) == "uuid.UUID"
        assert format_type(NameValuePair) == "tests.subjects.NameValuePair"

    def test_generics(self):
        """Should render generic arguments recursively."""
        assert format_type(List[int]) == "list[int]"
        assert format_type(Dict[str, UUID]) == "dict[str, uuid.UUID]"
        assert format_type(Optional[List[NameValuePair]]) == "Optional[list[tests.subjects.NameValuePair]]"

    def test_special_forms(self):
        """Should render Any, None and unions."""
        assert format_type(Any) == "Any"
        assert format_type(None) == "None"
        assert format_type(Union[int, str]) == "Union[int, str]"


class TestOptional:
    """Test nullability helpers."""

    def test_is_optional(self):
        """Should treat Optional and Any as nullable."""
        assert is_optional(Optional[int])
        assert is_optional(Any)
        assert not is_optional(int)
        assert not is_optional(List[Optional[int]])

    def test_unwrap_optional(self):
        """Should strip None from an Optional annotation."""
        assert unwrap_optional(Optional[int]) is int
        assert unwrap_optional(str) is str

    def test_element_and_value_annotations(self):
        """Should derive element and value annotations from containers."""
        assert element_annotation(Optional[List[NameValuePair]]) is NameValuePair
        assert element_annotation(list) is Any
        assert value_annotation(Dict[str, UUID]) is UUID
        assert value_annotation(dict) is Any


class TestProperty:
    """Test property accessors."""

    def test_of_reads_type_hints(self):
        """Should take the annotation from the owner's type hints."""
        prop = Property.of(ComplexSubject, "items")

        assert prop.name == "items"
        assert prop.type_name == "Optional[list[tests.subjects.NameValuePair]]"
        assert prop.nullable

    def test_of_unknown_property(self):
        """Should reject a name the owner does not annotate."""
        with pytest.raises(AttributeError, match="no annotated property 'missing'"):
            Property.of(ComplexSubject, "missing")

    def test_get_by_name(self):
        """Should read the value by attribute name."""
        assert Property("name", str).get(NameValuePair("a", 1)) == "a"

    def test_get_with_getter(self):
        """Should read the value with a custom getter."""
        prop = Property("upper", str, getter=lambda pair: pair.name.upper())
        assert prop.get(NameValuePair("a", 1)) == "A"

    def test_properties_of_dataclass(self):
        """Should list dataclass fields in declaration order."""
        assert [p.name for p in properties_of(Customer)] == ["name", "address", "tags", "attributes"]

    def test_properties_of_annotated_class(self):
        """Should skip private names and class variables."""

        class Plain:
            visible: int
            _hidden: int
            shared: ClassVar[int] = 0

        assert [p.name for p in properties_of(Plain)] == ["visible"]


class TestFunction:
    """Test function accessors."""

    def test_of_uses_name_and_return_annotation(self):
        """Should take the name and return type from the callable."""
        fn = Function.of(elapsed)

        assert fn.name == "elapsed"
        assert fn.type_name == "int"
        assert not fn.nullable

    def test_of_with_explicit_name(self):
        """Should allow overriding the name."""
        fn = Function.of(get_metadata_value, name="metadata_value")
        assert fn.name == "metadata_value"
        assert fn.type_name == "uuid.UUID"

    def test_unannotated_function(self):
        """Should fall back to Any for unannotated callables."""
        fn = Function.of(lambda subject: subject)
        assert fn.type_name == "Any"
        assert fn.nullable

    def test_invoke_passes_arguments(self):
        """Should call the function with the subject first."""
        fn = Function("add", lambda subject, a, b: subject + a + b, int)
        assert fn.invoke(1, 2, 3) == 6
