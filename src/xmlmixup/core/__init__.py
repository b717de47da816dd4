"""
Core xmlmixup components.

This package provides the spec type definitions, the attribute flattener
and the compiler settings model.
"""

from xmlmixup.core.flatten import flatten
from xmlmixup.core.settings import DEFAULT_SETTINGS, MixupSettings
from xmlmixup.core.types import (
    ELEMENT_ALIASES,
    RESERVED_KINDS,
    Args,
    AttributeValue,
    SpecValue,
    is_absent,
    is_scalar,
    is_sequence,
)

__all__ = [
    "flatten",
    "MixupSettings",
    "DEFAULT_SETTINGS",
    "Args",
    "AttributeValue",
    "SpecValue",
    "ELEMENT_ALIASES",
    "RESERVED_KINDS",
    "is_absent",
    "is_scalar",
    "is_sequence",
]
