"""
Core type definitions for spec compilation.

This module contains the type aliases used for raw spec values, the frozen
marker tables that identify special node kinds, and the small shape
predicates shared by the flattener and the spec parser.
"""

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Callable

SpecValue = Any

Args = tuple[Any, ...]

SpecCallable = Callable[..., SpecValue]

AttributeValue = str | int | float | bool | list | tuple | dict | SpecCallable | None

# Marker suffixes whose *value* is the element name (children are empty)
ELEMENT_ALIASES = frozenset({"", "elem", "element", "tag"})

COMMENT = "comment"
CDATA = "cdata"
DOCTYPE = "doctype"
PROCESSING_INSTRUCTION = "processing-instruction"

# Reserved marker suffixes mapped to the node kind they produce
RESERVED_KINDS: Mapping[str, str] = MappingProxyType(
    {
        "comment": COMMENT,
        "cdata": CDATA,
        "doctype": DOCTYPE,
        "dtd": DOCTYPE,
        "pi": PROCESSING_INSTRUCTION,
        "processing-instruction": PROCESSING_INSTRUCTION,
    }
)


def is_scalar(value: Any) -> bool:
    """Check for values rendered directly by their string form."""
    return isinstance(value, (str, int, float, bool))


def is_sequence(value: Any) -> bool:
    """Check for ordered, non-string sequences (including one-shot iterators)."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Iterator))


def is_absent(value: Any) -> bool:
    """
    Check whether a value denotes "nothing at all".

    Params:
        value: Any spec or attribute value

    Returns:
        True for None and for empty strings, sequences and mappings
    """
    if value is None:
        return True
    if isinstance(value, (str, Sequence, Mapping)) and not isinstance(value, Iterator):
        return len(value) == 0
    return False


def scalar_text(value: Any) -> str:
    """Render a scalar, spelling booleans the way XML does."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
