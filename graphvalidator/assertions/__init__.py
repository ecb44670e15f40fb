"""Built-in assertions.

Assertions are plain functions taking an AssertionContext first. They are
grouped by the kind of subject they apply to:

- generic: nullability, equality, membership and predicates for any value
- booleans: truth values
- comparables: ordering and ranges
- strings: blankness, content, length, Luhn checksums and regular expressions
- iterables: element content, count and distinctness
- maps: keys, values and entries

Every assertion accepts an optional message, replacing the default, and an
AssertionType, RELATIVE by default.

Usage:
    >>> from graphvalidator.assertions import strings
    >>> def check_reference(ctx):
    ...     strings.must_not_be_null_or_blank(ctx)
    ...     strings.must_start_with(ctx, "REF")
"""

from graphvalidator.assertions import booleans, comparables, generic, iterables, maps, strings

__all__ = [
    "booleans",
    "comparables",
    "generic",
    "iterables",
    "maps",
    "strings",
]
