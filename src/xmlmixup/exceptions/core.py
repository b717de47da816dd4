"""
Exception classes for markup compilation.

This module defines specific exception types for the contract violations
that can occur while turning a spec into document nodes. Every failure is
synchronous; the partially built tree is left as constructed up to the
failure point.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Spec path and operation only
    DEVELOPER = "developer"  # Also includes a repr of the offending spec value


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where in a (possibly deeply nested) spec an error occurred and
    which compile step was running at the time.

    Params:
        spec_path: Rendered path to the offending value (e.g. "$[0]<html>[1]")
        spec_repr: Truncated repr of the offending spec value
        operation: Compile step that failed (e.g. "element", "pi")
    """

    spec_path: str | None = None
    spec_repr: str | None = None
    operation: str | None = None

    REPR_LIMIT = 120

    @classmethod
    def for_value(
        cls, path: tuple[str, ...], value: object, operation: str | None = None
    ) -> "ErrorContext":
        """
        Build a context from a compile path and the value being compiled.

        Params:
            path: Path segments accumulated during recursion
            value: The spec value being compiled
            operation: Compile step that failed

        Returns:
            ErrorContext with the rendered path and a bounded repr
        """
        text = repr(value)
        if len(text) > cls.REPR_LIMIT:
            text = text[: cls.REPR_LIMIT - 3] + "..."
        return cls(spec_path="".join(path), spec_repr=text, operation=operation)

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.spec_path:
            lines.append(f"  at spec path {self.spec_path}")

        if self.operation:
            lines.append(f"  while compiling {self.operation}")

        # Developer level: show the value itself
        if error_level == ErrorLevel.DEVELOPER and self.spec_repr:
            lines.append(f"  spec: {self.spec_repr}")

        return "\n".join(lines)


class MixupError(Exception):
    """Base exception for all markup compilation errors."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            message: Primary error message
            context: ErrorContext with spec location information
            error_level: Level of detail to show in error message
        """
        self.message = message
        self.context = context
        self.error_level = error_level

        full_message = message
        if context:
            location_info = context.format_location(error_level)
            if location_info:
                full_message = f"{message}\n{location_info}"

        super().__init__(full_message)


class MultipleAdjacencyTargetsError(MixupError):
    """Raised when more than one of parent/before/after/replace is supplied."""

    def __init__(self, keys: list[str], **kwargs):
        """
        Initialize the exception.

        Params:
            keys: The adjacency keywords that were supplied together
        """
        self.keys = keys
        super().__init__(
            f"Only one adjacency target may be given, got: {', '.join(keys)}",
            **kwargs,
        )


class InvalidAdjacencyReferenceError(MixupError):
    """Raised when an adjacency reference is not a node or cannot host siblings."""

    def __init__(self, mode: str, reason: str, **kwargs):
        """
        Initialize the exception.

        Params:
            mode: The adjacency mode (parent, before, after, replace)
            reason: Why the reference cannot be used
        """
        self.mode = mode
        self.reason = reason
        super().__init__(f"Invalid '{mode}' adjacency reference: {reason}", **kwargs)


class AmbiguousStructuralMapError(MixupError):
    """Raised when a structural map has more than one candidate name slot."""

    def __init__(self, kind: str, keys: list, **kwargs):
        """
        Initialize the exception.

        Params:
            kind: Which name slot form is duplicated ("compact" or "marker")
            keys: The competing keys
        """
        self.kind = kind
        self.keys = keys
        super().__init__(
            f"Spec can't have multiple {kind} keys: {', '.join(repr(k) for k in keys)}",
            **kwargs,
        )


class MissingRequiredChildrenError(MixupError):
    """Raised when a node kind that needs children was given none."""

    def __init__(self, kind: str, **kwargs):
        """
        Initialize the exception.

        Params:
            kind: The node kind lacking children (e.g. "processing-instruction")
        """
        self.kind = kind
        super().__init__(f"A {kind} spec requires at least one child", **kwargs)


class MissingElementNameError(MixupError):
    """Raised when element dispatch is reached without a name."""

    def __init__(self, **kwargs):
        super().__init__("Element name inference is not supported", **kwargs)


class UnresolvableNamespacePrefixError(MixupError):
    """Raised when a prefix is bound to no URI even after inheritance."""

    def __init__(self, prefixes: list[str], element_name: str, **kwargs):
        """
        Initialize the exception.

        Params:
            prefixes: The prefixes left without a namespace URI
            element_name: The element being created
        """
        self.prefixes = prefixes
        self.element_name = element_name
        super().__init__(
            f"Unresolvable namespace prefix {', '.join(repr(p) for p in prefixes)} "
            f"on element '{element_name}'",
            **kwargs,
        )


class SpecDepthExceededError(MixupError):
    """Raised when spec nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int, **kwargs):
        """
        Initialize the exception.

        Params:
            max_depth: The configured limit that was exceeded
        """
        self.max_depth = max_depth
        super().__init__(f"Spec nesting exceeds maximum depth of {max_depth}", **kwargs)
