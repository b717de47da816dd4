"""
xmlmixup exception classes.

This package provides all exception types raised while compiling specs
into document trees, for consistent error handling and reporting.
"""

from xmlmixup.exceptions.core import (
    AmbiguousStructuralMapError,
    ErrorContext,
    ErrorLevel,
    InvalidAdjacencyReferenceError,
    MissingElementNameError,
    MissingRequiredChildrenError,
    MixupError,
    MultipleAdjacencyTargetsError,
    SpecDepthExceededError,
    UnresolvableNamespacePrefixError,
)

__all__ = [
    "ErrorContext",
    "ErrorLevel",
    "MixupError",
    "MultipleAdjacencyTargetsError",
    "InvalidAdjacencyReferenceError",
    "AmbiguousStructuralMapError",
    "MissingRequiredChildrenError",
    "MissingElementNameError",
    "UnresolvableNamespacePrefixError",
    "SpecDepthExceededError",
]
