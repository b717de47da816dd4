"""
Parser for markup specs.

This module classifies one raw spec value (sequence, callable, structural
map, existing node or scalar) into exactly one tagged variant. Children are
left raw; the compiler parses them as it recurses into them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from xmlmixup.core.settings import DEFAULT_SETTINGS, MixupSettings
from xmlmixup.core.types import (
    CDATA,
    COMMENT,
    DOCTYPE,
    ELEMENT_ALIASES,
    PROCESSING_INSTRUCTION,
    RESERVED_KINDS,
    Args,
    SpecCallable,
    SpecValue,
    is_absent,
    is_sequence,
    scalar_text,
)
from xmlmixup.exceptions.core import AmbiguousStructuralMapError, ErrorContext
from xmlmixup.provider.base import DocumentProvider, Node


@dataclass
class SequenceSpec:
    """An ordered list of specs compiled one after another."""

    items: list[SpecValue]


@dataclass
class CallableSpec:
    """A function whose return value is itself a spec."""

    function: SpecCallable

    def invoke(self, args: Args) -> SpecValue:
        return self.function(*args)


@dataclass
class ElementSpec:
    """
    An element to create.

    Params:
        name: Raw name value, flattened by the compiler; may be missing
        attributes: Attribute bag, including any xmlns declarations
        children: Raw child specs
    """

    name: Any
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list[SpecValue] = field(default_factory=list)


@dataclass
class CommentSpec:
    """A comment whose text is the flattened children."""

    children: list[SpecValue] = field(default_factory=list)


@dataclass
class CDataSpec:
    """A CDATA section whose text is the flattened children."""

    children: list[SpecValue] = field(default_factory=list)


@dataclass
class ProcessingInstructionSpec:
    """
    A processing instruction.

    The first child is the target. Further children form the content;
    without them the content is rendered from the attributes.
    """

    children: list[SpecValue] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass
class DoctypeSpec:
    """A document type declaration: root name, public id, system id."""

    children: list[SpecValue] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass
class NodeSpec:
    """An existing node, copied before it is attached."""

    node: Node


@dataclass
class TextSpec:
    """Any other value, rendered as a text node."""

    value: Any

    @property
    def text(self) -> str:
        return scalar_text(self.value)


ParsedSpec = (
    SequenceSpec
    | CallableSpec
    | ElementSpec
    | CommentSpec
    | CDataSpec
    | ProcessingInstructionSpec
    | DoctypeSpec
    | NodeSpec
    | TextSpec
)


def as_children(value: SpecValue) -> list[SpecValue]:
    """Normalize a children slot to a list."""
    if value is None:
        return []
    if is_sequence(value):
        return list(value)
    return [value]


class SpecParser:
    """Classifier turning raw spec values into ``ParsedSpec`` variants."""

    def __init__(
        self, provider: DocumentProvider, settings: MixupSettings = DEFAULT_SETTINGS
    ):
        self.provider = provider
        self.settings = settings

    def parse(
        self, value: SpecValue, path: tuple[str, ...] = ("$",)
    ) -> ParsedSpec | None:
        """
        Classify a single spec value.

        Params:
            value: The raw spec value
            path: Location of the value, used in error messages

        Returns:
            The matching spec variant, or None when the spec is absent

        Raises:
            AmbiguousStructuralMapError: If a map has competing name slots
        """
        if is_absent(value):
            return None

        # Nodes first: some providers' nodes are themselves sequences
        if self.provider.is_node(value):
            return NodeSpec(value)

        if is_sequence(value):
            return SequenceSpec(list(value))

        if callable(value):
            return CallableSpec(value)

        if isinstance(value, Mapping):
            return self._parse_map(value, path)

        return TextSpec(value)

    def _parse_map(self, spec: Mapping, path: tuple[str, ...]) -> ParsedSpec:
        """Resolve the name slot of a structural map and dispatch on it."""
        marker = self.settings.marker
        name = None
        children: list[SpecValue] = []

        compact = [k for k in spec if isinstance(k, tuple) or self.provider.is_node(k)]
        special = [k for k in spec if self.settings.marker_key(k)]

        if not is_absent(spec.get(None)):
            # Explicit name slot: a bare name, or [name, *children]
            slot = spec[None]
            if is_sequence(slot):
                items = list(slot)
                if items:
                    name, children = items[0], items[1:]
            else:
                name = slot
        elif compact:
            # Compact form: the key holds the children, the value the name
            if len(compact) > 1:
                raise self._ambiguous("compact", compact, spec, path)
            key = compact[0]
            name = spec[key]
            children = list(key) if isinstance(key, tuple) else [key]
        elif special:
            if len(special) > 1:
                raise self._ambiguous("marker", special, spec, path)
            key = special[0]
            suffix = key[len(marker):]
            if suffix in ELEMENT_ALIASES:
                name = spec[key]
            else:
                name = key if suffix in RESERVED_KINDS else suffix
                children = as_children(spec[key])

        attributes = {
            k: v
            for k, v in spec.items()
            if isinstance(k, str) and not self.settings.marker_key(k)
        }

        kind = None
        if isinstance(name, str) and name.startswith(marker):
            kind = RESERVED_KINDS.get(name[len(marker):])

        if kind == COMMENT:
            return CommentSpec(children)
        if kind == CDATA:
            return CDataSpec(children)
        if kind == PROCESSING_INSTRUCTION:
            return ProcessingInstructionSpec(children, attributes)
        if kind == DOCTYPE:
            return DoctypeSpec(children, attributes)
        return ElementSpec(name, attributes, children)

    def _ambiguous(
        self, kind: str, keys: list, spec: Mapping, path: tuple[str, ...]
    ) -> AmbiguousStructuralMapError:
        return AmbiguousStructuralMapError(
            kind,
            keys,
            context=ErrorContext.for_value(path, spec, "structural map"),
            error_level=self.settings.error_level,
        )


def parse_spec(
    value: SpecValue,
    provider: DocumentProvider,
    settings: MixupSettings = DEFAULT_SETTINGS,
) -> ParsedSpec | None:
    """
    Convenience function to classify a spec value.

    Params:
        value: The raw spec value
        provider: Provider used to recognise existing nodes
        settings: Compiler settings (marker character)

    Returns:
        The matching spec variant, or None when the spec is absent

    Raises:
        AmbiguousStructuralMapError: If a map has competing name slots
    """
    return SpecParser(provider, settings).parse(value)
