"""
Flattening of nested attribute values into strings.

The same rules compute attribute values, comment and CDATA text, and
processing-instruction targets and content, so every call site goes through
:func:`flatten`.
"""

from collections.abc import Mapping, Set
from typing import Any

from xmlmixup.core.types import Args, is_absent, is_scalar, is_sequence, scalar_text


def flatten(value: Any, args: Args = ()) -> str | None:
    """
    Coerce an arbitrarily nested value into a single string.

    Rules, in priority order:
        - None and empty values are absent
        - strings, numbers and booleans render as themselves
        - mappings render as space-joined "key: value" pairs sorted by key,
          dropping pairs whose value is absent
        - callables are invoked with ``*args`` and their result flattened
        - sequences render as their flattened members joined by a space,
          dropping absent members
        - sets render like sequences, their members sorted by string form
        - anything else renders via ``str()``

    Params:
        value: The value to flatten
        args: Positional arguments for any callables encountered

    Returns:
        The flattened string, or None when the value is absent
    """
    if is_absent(value):
        return None

    if is_scalar(value):
        return scalar_text(value)

    if isinstance(value, Mapping):
        pairs = []
        for key in sorted(value, key=str):
            text = flatten(value[key], args)
            if text is not None:
                pairs.append(f"{key}: {text}")
        return " ".join(pairs) if pairs else None

    if callable(value):
        return flatten(value(*args), args)

    if isinstance(value, Set):
        value = sorted(value, key=str)

    if is_sequence(value):
        parts = [text for text in (flatten(item, args) for item in value) if text]
        return " ".join(parts) if parts else None

    return str(value)
