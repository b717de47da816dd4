"""
Namespace resolution for new elements.

Splits element and attribute names into prefix and local part, extracts
``xmlns`` declarations from the attribute bag, and fills in every prefix
that was used but not declared from the namespaces in scope at the
element's (pseudo-)parent.
"""

import re
from typing import Any

from attrs import frozen

from xmlmixup.core.flatten import flatten
from xmlmixup.core.types import Args
from xmlmixup.exceptions.core import (
    ErrorContext,
    ErrorLevel,
    UnresolvableNamespacePrefixError,
)
from xmlmixup.provider.base import DocumentProvider, Node

QNAME_PATTERN = re.compile(r"^(?:([^:]+):)?(.+)$")
XMLNS_PATTERN = re.compile(r"^xmlns(?::(.*))?$", re.IGNORECASE)

XML_PREFIX = "xml"


def split_qualified_name(name: str) -> tuple[str | None, str]:
    """
    Split a name on its first colon.

    Params:
        name: A possibly prefixed name (e.g. "svg:rect")

    Returns:
        Tuple of (prefix or None, local part)
    """
    match = QNAME_PATTERN.match(name)
    if match is None:
        return None, name
    prefix, local = match.groups()
    return prefix, local


def declaration_key(prefix: str | None) -> str:
    """Attribute name declaring ``prefix`` ("xmlns" for the default namespace)."""
    return "xmlns" if prefix is None else f"xmlns:{prefix}"


@frozen
class NamespaceResolution:
    """
    Result of resolving an element's namespaces.

    Params:
        prefix: Element name prefix, or None
        local_name: Element local name
        bindings: Final prefix -> URI map, declared and inherited
        declarations: Subset of bindings declared on this element
        attributes: Flattened plain attributes
    """

    prefix: str | None
    local_name: str
    bindings: dict[str | None, str]
    declarations: dict[str | None, str]
    attributes: dict[str, str]

    @property
    def qualified_name(self) -> str:
        if self.prefix is None:
            return self.local_name
        return f"{self.prefix}:{self.local_name}"


class NamespaceResolver:
    """Compute namespace bindings and plain attributes for a new element."""

    def __init__(self, provider: DocumentProvider):
        self.provider = provider

    def resolve(
        self,
        name: str,
        attributes: dict[str, Any],
        pseudo_parent: Node,
        args: Args = (),
        anchor: Node | None = None,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ) -> NamespaceResolution:
        """
        Resolve the namespaces of an element named ``name``.

        Params:
            name: Requested element name, optionally prefixed
            attributes: Raw attribute bag (values not yet flattened)
            pseudo_parent: Node whose in-scope namespaces are inherited
            args: Arguments for callables in attribute values
            anchor: Attached node whose in-scope namespaces back up those of
                ``pseudo_parent`` (nearer declarations win)
            context: Location of the element spec, for error messages
            error_level: Detail level for error messages

        Returns:
            NamespaceResolution for the element

        Raises:
            UnresolvableNamespacePrefixError: If a prefix has no URI after
                inheritance
        """
        prefix, local = split_qualified_name(name)

        declared: dict[str | None, str] = {}
        plain: dict[str, str] = {}
        for key, value in attributes.items():
            text = flatten(value, args)
            if text is None:
                continue
            match = XMLNS_PATTERN.match(key)
            if match:
                declared[match.group(1) or None] = text
            else:
                plain[key] = text

        # Every prefix in use needs an entry, even if still unresolved
        namespaces: dict[str | None, str | None] = dict(declared)
        for key in plain:
            attribute_prefix, _ = split_qualified_name(key)
            namespaces.setdefault(attribute_prefix, None)
        namespaces.setdefault(prefix, None)

        # The xml prefix is bound by definition and never declared
        namespaces.pop(XML_PREFIX, None)
        declared.pop(XML_PREFIX, None)

        unresolved = [p for p, uri in namespaces.items() if uri is None]
        if unresolved:
            in_scope = self.provider.namespace_declarations_of(pseudo_parent)
            if anchor is not None:
                in_scope = {
                    **self.provider.namespace_declarations_of(anchor),
                    **in_scope,
                }
            for unbound in unresolved:
                namespaces[unbound] = in_scope.get(declaration_key(unbound))

        if namespaces.get(None) is None:
            namespaces.pop(None, None)

        missing = sorted(p for p, uri in namespaces.items() if uri is None)
        if missing:
            raise UnresolvableNamespacePrefixError(
                missing, name, context=context, error_level=error_level
            )

        return NamespaceResolution(
            prefix=prefix,
            local_name=local,
            bindings=namespaces,
            declarations=declared,
            attributes=plain,
        )
