"""Validation builder for the graph validation engine.

A ValidationBuilder decomposes one subject into the members a validator
declares, and runs the matching assertion block against each of them:

- property(): one or more properties, each validated with the same block
- function(): the result of a function called with the subject (and optional arguments)
- collection(): every element of an iterable property, addressed by index
- map(): every entry of a mapping property, addressed by key
- all_properties(): every public property of the subject type

Every member gets its own result node, but a node is only attached to its
owner once its subtree is complete, and only if an assertion failed somewhere
within it. The result tree therefore holds exactly the failures and nothing
else.

Each operation takes its assertion block as the action argument, or returns a
decorator when the action is omitted:

    >>> from dataclasses import dataclass
    >>> from graphvalidator import Validator
    >>> from graphvalidator.assertions import strings
    >>> @dataclass
    ... class Person:
    ...     name: str
    >>> class PersonValidator(Validator[Person]):
    ...     def define(self, builder):
    ...         @builder.property("name")
    ...         def check_name(ctx):
    ...             strings.must_not_be_blank(ctx)
    >>> PersonValidator().validate(Person(name=" ")).to_list()
    ["Property 'Person.name' of type 'str' must not be blank."]
"""

from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar, Union

from graphvalidator.context import AssertionContext
from graphvalidator.members import Function, Property, element_annotation, properties_of, value_annotation
from graphvalidator.modes import TraversalState
from graphvalidator.results import ValidationResult
from graphvalidator.types import AssertionAction

T = TypeVar("T")

PropertyRef = Union[Property, str]
FunctionRef = Union[Function, str, Callable[..., Any]]


class Entry(NamedTuple):
    """A map entry bound to the assertion context of a map() block."""
    key: Any
    value: Any


class ValidationBuilder(Generic[T]):
    """Builds the member results of one validated subject.

    Attributes:
        result: The node under which member results are attached
        state: Traversal state shared by the whole validation run
        subject_type: The declared type of the subject
        subject: The subject being validated; None only in FORCE_FAIL mode
    """

    def __init__(
        self,
        result: ValidationResult,
        state: TraversalState,
        subject_type: type,
        subject: Optional[T],
    ):
        self.result = result
        self.state = state
        self.subject_type = subject_type
        self.subject = subject

    def _decorator(self, register: Callable[[AssertionAction], None]) -> Callable[[AssertionAction], AssertionAction]:
        def decorator(action: AssertionAction) -> AssertionAction:
            register(action)
            return action
        return decorator

    def _resolve_property(self, member: PropertyRef) -> Property:
        if isinstance(member, Property):
            return member
        if isinstance(member, str):
            return Property.of(self.subject_type, member)
        raise TypeError(f"Expected a Property or a property name, got {type(member).__name__}")

    def _resolve_function(self, member: FunctionRef) -> Function:
        if isinstance(member, Function):
            return member
        if isinstance(member, str):
            return Function.of(getattr(self.subject_type, member), name=member)
        if callable(member):
            return Function.of(member)
        raise TypeError(f"Expected a Function, a function name or a callable, got {type(member).__name__}")

    def _run(self, result: ValidationResult, value: Any, action: AssertionAction) -> None:
        if self.state.stopped:
            return
        action(AssertionContext(result, self.state, value))

    def _attach(self, owner: ValidationResult, member: ValidationResult) -> None:
        if member.has_failures():
            owner.add_member(member)

    def property(self, *members: PropertyRef, action: Optional[AssertionAction] = None):
        """Validate one or more properties of the subject with the same assertion block.

        Args:
            *members: Property descriptors or names of annotated properties of the subject type
            action: The assertion block; if omitted, a decorator is returned
        """
        if action is None:
            return self._decorator(lambda fn: self.property(*members, action=fn))

        for member in members:
            if self.state.stopped:
                return None
            accessor = self._resolve_property(member)
            member_result = self.result.create_member(accessor)
            value = None if self.subject is None else accessor.get(self.subject)
            self._run(member_result, value, action)
            self._attach(self.result, member_result)
        return None

    def function(self, member: FunctionRef, *args: Any, action: Optional[AssertionAction] = None):
        """Validate the result of calling a function with the subject and any extra arguments.

        The function is not called when the subject is None.

        Args:
            member: A Function descriptor, a callable taking the subject first, or a method name
            *args: Extra arguments passed after the subject
            action: The assertion block; if omitted, a decorator is returned
        """
        if action is None:
            return self._decorator(lambda fn: self.function(member, *args, action=fn))

        if self.state.stopped:
            return None
        accessor = self._resolve_function(member)
        member_result = self.result.create_member(accessor)
        value = None if self.subject is None else accessor.invoke(self.subject, *args)
        self._run(member_result, value, action)
        self._attach(self.result, member_result)
        return None

    def collection(
        self,
        member: PropertyRef,
        action: Optional[AssertionAction] = None,
        member_action: Optional[AssertionAction] = None,
    ):
        """Validate every element of an iterable property.

        The iterable is read once into a list, which both blocks receive.
        Elements are visited in iteration order and addressed by index. A None
        collection is visited as a single None element, so the block still
        contributes its assertions.

        Args:
            member: Property descriptor or name of the iterable property
            action: The assertion block run for each element; if omitted, a decorator is returned
            member_action: Optional assertion block run against the collection itself first
        """
        if action is None:
            return self._decorator(lambda fn: self.collection(member, action=fn, member_action=member_action))

        if self.state.stopped:
            return None
        accessor = self._resolve_property(member)
        member_result = self.result.create_member(accessor)
        collection = None if self.subject is None else accessor.get(self.subject)

        if collection is not None:
            collection = list(collection)

        if member_action is not None:
            self._run(member_result, collection, member_action)

        elements = [None] if collection is None else collection

        annotation = element_annotation(accessor.annotation)
        for index, element in enumerate(elements):
            if self.state.stopped:
                break
            element_result = member_result.create_element(index, annotation)
            self._run(element_result, element, action)
            self._attach(member_result, element_result)

        self._attach(self.result, member_result)
        return None

    def map(
        self,
        member: PropertyRef,
        action: Optional[AssertionAction] = None,
        member_action: Optional[AssertionAction] = None,
    ):
        """Validate every entry of a mapping property.

        Entries are visited in the mapping's iteration order, addressed by key
        and bound to the context as Entry(key, value). A None mapping is visited
        as a single Entry(None, None), named "key" in graph paths.

        Args:
            member: Property descriptor or name of the mapping property
            action: The assertion block run for each entry; if omitted, a decorator is returned
            member_action: Optional assertion block run against the mapping itself first
        """
        if action is None:
            return self._decorator(lambda fn: self.map(member, action=fn, member_action=member_action))

        if self.state.stopped:
            return None
        accessor = self._resolve_property(member)
        member_result = self.result.create_member(accessor)
        mapping = None if self.subject is None else accessor.get(self.subject)

        if member_action is not None:
            self._run(member_result, mapping, member_action)

        synthetic = mapping is None
        entries = [Entry(None, None)] if synthetic else [Entry(key, value) for key, value in mapping.items()]

        annotation = value_annotation(accessor.annotation)
        for entry in entries:
            if self.state.stopped:
                break
            entry_result = member_result.create_entry(entry.key, annotation, synthetic=synthetic)
            self._run(entry_result, entry, action)
            self._attach(member_result, entry_result)

        self._attach(self.result, member_result)
        return None

    def all_properties(self, action: Optional[AssertionAction] = None):
        """Validate every public property of the subject type with the same assertion block."""
        if action is None:
            return self._decorator(lambda fn: self.all_properties(action=fn))
        return self.property(*properties_of(self.subject_type), action=action)


__all__ = [
    "ValidationBuilder",
    "Entry",
]
