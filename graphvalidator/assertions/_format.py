"""Formatting helpers shared by the built-in assertions."""

from typing import Any, Iterable


def join_values(values: Iterable[Any]) -> str:
    """Join values for display in an assertion message.

    Examples:
        >>> join_values([1, "a", None])
        '1, a, None'
    """
    return ", ".join(str(value) for value in values)
