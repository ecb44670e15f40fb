"""Member accessors for validated subjects.

Validators address the members of a subject through explicit descriptors:
a Property reads a value from the subject, a Function invokes a callable with
the subject as its first argument. Each descriptor carries the annotation of
the value it yields, from which the human-readable type label and nullability
shown in assertion messages are derived.

Descriptors can be written out by hand, or derived from the type hints of a
dataclass or annotated class with Property.of() / properties_of() and from a
callable's return annotation with Function.of().
"""

import builtins
import dataclasses
import sys
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, ClassVar, List, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from graphvalidator.types import Getter

if sys.version_info >= (3, 10):
    from types import UnionType

    _UNION_ORIGINS: Tuple[Any, ...] = (Union, UnionType)
else:
    _UNION_ORIGINS = (Union,)

_NONE_TYPE = type(None)


def _is_union(annotation: Any) -> bool:
    return get_origin(annotation) in _UNION_ORIGINS


def is_optional(annotation: Any) -> bool:
    """Check whether an annotation admits None.

    Examples:
        >>> is_optional(Optional[str])
        True
        >>> is_optional(str)
        False
    """
    if annotation is Any or annotation is None or annotation is _NONE_TYPE:
        return True
    return _is_union(annotation) and _NONE_TYPE in get_args(annotation)


def unwrap_optional(annotation: Any) -> Any:
    """Strip None from an Optional annotation; other annotations are returned unchanged."""
    if not _is_union(annotation):
        return annotation
    args = tuple(arg for arg in get_args(annotation) if arg is not _NONE_TYPE)
    if len(args) == 1:
        return args[0]
    return Union[args]


def format_type(annotation: Any) -> str:
    """Format an annotation as the type label used in assertion messages.

    Builtins are rendered by name, other classes by their qualified module path.

    Examples:
        >>> format_type(str)
        'str'
        >>> format_type(Optional[List[int]])
        'Optional[list[int]]'
        >>> import datetime
        >>> format_type(datetime.date)
        'datetime.date'
    """
    if annotation is Any:
        return "Any"
    if annotation is None or annotation is _NONE_TYPE:
        return "None"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, dataclasses.InitVar):
        return format_type(annotation.type)

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin in _UNION_ORIGINS:
        members = [arg for arg in args if arg is not _NONE_TYPE]
        if len(members) < len(args) and len(members) == 1:
            return f"Optional[{format_type(members[0])}]"
        return f"Union[{', '.join(format_type(arg) for arg in args)}]"

    if origin is not None:
        if not args:
            return _format_class(origin)
        return f"{_format_class(origin)}[{', '.join(format_type(arg) for arg in args)}]"

    if isinstance(annotation, type):
        return _format_class(annotation)

    return repr(annotation).replace("typing.", "")


def _format_class(cls: Any) -> str:
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", None)
    if name is None:
        return repr(cls).replace("typing.", "")
    module = getattr(cls, "__module__", None)
    if module in (None, builtins.__name__):
        return name
    return f"{module}.{name}"


def element_annotation(annotation: Any) -> Any:
    """Element annotation of an iterable annotation, or Any if it cannot be determined."""
    args = get_args(unwrap_optional(annotation))
    return args[0] if args else Any


def value_annotation(annotation: Any) -> Any:
    """Value annotation of a mapping annotation, or Any if it cannot be determined."""
    args = get_args(unwrap_optional(annotation))
    return args[1] if len(args) > 1 else Any


@dataclass(frozen=True)
class Property:
    """Accessor for a readable property of a subject.

    Attributes:
        name: Name of the property as it appears in graph paths
        annotation: Declared type of the property value
        getter: Callable reading the value from a subject; defaults to attribute access by name

    Examples:
        >>> from dataclasses import dataclass
        >>> @dataclass
        ... class Person:
        ...     name: str
        >>> prop = Property.of(Person, "name")
        >>> prop.type_name
        'str'
        >>> prop.get(Person(name="Ada"))
        'Ada'
    """
    name: str
    annotation: Any = Any
    getter: Optional[Getter] = None

    @property
    def type_name(self) -> str:
        return format_type(self.annotation)

    @property
    def nullable(self) -> bool:
        return is_optional(self.annotation)

    def get(self, subject: Any) -> Any:
        """Read the property value from the subject."""
        getter = self.getter or attrgetter(self.name)
        return getter(subject)

    @classmethod
    def of(cls, owner: type, name: str) -> "Property":
        """Create a Property from the type hints of the owning class.

        Raises:
            AttributeError: If the owner declares no annotated property with that name
        """
        hints = _type_hints(owner)
        if name not in hints:
            raise AttributeError(f"'{owner.__name__}' has no annotated property '{name}'")
        return cls(name=name, annotation=hints[name])


@dataclass(frozen=True)
class Function:
    """Accessor for a function invoked with the subject as its first argument."""
    name: str
    func: Callable[..., Any]
    annotation: Any = Any

    @property
    def type_name(self) -> str:
        return format_type(self.annotation)

    @property
    def nullable(self) -> bool:
        return is_optional(self.annotation)

    def invoke(self, subject: Any, *args: Any) -> Any:
        """Call the function with the subject followed by any extra arguments."""
        return self.func(subject, *args)

    @classmethod
    def of(cls, func: Callable[..., Any], name: Optional[str] = None) -> "Function":
        """Create a Function from a callable, using its name and return annotation."""
        try:
            hints = get_type_hints(func)
        except (NameError, TypeError):
            hints = getattr(func, "__annotations__", {})
        return cls(
            name=name or func.__name__,
            func=func,
            annotation=hints.get("return", Any),
        )


def _type_hints(owner: type) -> dict:
    try:
        return get_type_hints(owner)
    except NameError:
        return dict(getattr(owner, "__annotations__", {}))


def properties_of(owner: type) -> List[Property]:
    """Public properties of a dataclass or annotated class, in declaration order.

    Examples:
        >>> from dataclasses import dataclass
        >>> @dataclass
        ... class Point:
        ...     x: int
        ...     y: int
        ...     _cache: dict = None
        >>> [p.name for p in properties_of(Point)]
        ['x', 'y']
    """
    hints = _type_hints(owner)
    if dataclasses.is_dataclass(owner):
        names = [f.name for f in dataclasses.fields(owner)]
    else:
        names = [name for name, hint in hints.items() if get_origin(hint) is not ClassVar]
    return [
        Property(name=name, annotation=hints.get(name, Any))
        for name in names
        if not name.startswith("_")
    ]


__all__ = [
    "Property",
    "Function",
    "properties_of",
    "format_type",
    "is_optional",
    "unwrap_optional",
    "element_annotation",
    "value_annotation",
]
