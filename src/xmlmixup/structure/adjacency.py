"""
Adjacency targets and node attachment.

Every node the compiler creates is attached through one ``attach`` call
keyed by where it goes relative to an existing node: under it, before it,
after it, or in its place.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable

from attrs import frozen

from xmlmixup.exceptions.core import (
    InvalidAdjacencyReferenceError,
    MultipleAdjacencyTargetsError,
)
from xmlmixup.provider.base import DocumentProvider, Node

logger = logging.getLogger(__name__)


class Adjacency(Enum):
    """Where a new node goes relative to the reference node."""

    PARENT = "parent"
    BEFORE = "before"
    AFTER = "after"
    REPLACE = "replace"


@frozen
class AdjacencyTarget:
    """An adjacency mode paired with its reference node."""

    mode: Adjacency
    node: Any

    @classmethod
    def parent(cls, node: Node) -> "AdjacencyTarget":
        return cls(Adjacency.PARENT, node)

    @classmethod
    def before(cls, node: Node) -> "AdjacencyTarget":
        return cls(Adjacency.BEFORE, node)

    @classmethod
    def after(cls, node: Node) -> "AdjacencyTarget":
        return cls(Adjacency.AFTER, node)

    @classmethod
    def replace(cls, node: Node) -> "AdjacencyTarget":
        return cls(Adjacency.REPLACE, node)

    @classmethod
    def from_keywords(
        cls,
        parent: Node | None = None,
        before: Node | None = None,
        after: Node | None = None,
        replace: Node | None = None,
    ) -> "AdjacencyTarget | None":
        """
        Build a target from keyword-style adjacency arguments.

        Params:
            parent: Node to append under
            before: Sibling to insert before
            after: Sibling to insert after
            replace: Sibling to replace

        Returns:
            The single supplied target, or None when none was supplied

        Raises:
            MultipleAdjacencyTargetsError: If more than one was supplied
        """
        candidates = (
            (Adjacency.PARENT, parent),
            (Adjacency.BEFORE, before),
            (Adjacency.AFTER, after),
            (Adjacency.REPLACE, replace),
        )
        supplied = [(mode, node) for mode, node in candidates if node is not None]
        if len(supplied) > 1:
            raise MultipleAdjacencyTargetsError([mode.value for mode, _ in supplied])
        if not supplied:
            return None
        mode, node = supplied[0]
        return cls(mode, node)

    @property
    def is_parent(self) -> bool:
        return self.mode is Adjacency.PARENT


def _attach_parent(provider: DocumentProvider, node: Node, reference: Node) -> None:
    if provider.is_document(reference) and provider.is_element(node):
        provider.set_root(reference, node)
    elif provider.is_fragment(node):
        # The fragment itself is discarded
        for child in provider.children_of(node):
            _attach_parent(provider, child, reference)
    else:
        provider.append_child(reference, node)


def _attach_before(provider: DocumentProvider, node: Node, reference: Node) -> None:
    provider.insert_before(node, reference)


def _attach_after(provider: DocumentProvider, node: Node, reference: Node) -> None:
    provider.insert_after(node, reference)


def _attach_replace(provider: DocumentProvider, node: Node, reference: Node) -> None:
    provider.replace(reference, node)


ATTACHMENTS: Mapping[Adjacency, Callable[[DocumentProvider, Node, Node], None]] = (
    MappingProxyType(
        {
            Adjacency.PARENT: _attach_parent,
            Adjacency.BEFORE: _attach_before,
            Adjacency.AFTER: _attach_after,
            Adjacency.REPLACE: _attach_replace,
        }
    )
)


class AdjacencyDispatcher:
    """Attach nodes to a tree according to an ``AdjacencyTarget``."""

    def __init__(self, provider: DocumentProvider):
        self.provider = provider

    def attach(self, target: AdjacencyTarget, node: Node) -> None:
        """
        Attach ``node`` relative to the target's reference node.

        Params:
            target: Adjacency mode and reference node
            node: The node to attach

        Raises:
            InvalidAdjacencyReferenceError: If a sibling mode is used with a
                reference that has no parent
        """
        if not target.is_parent and self.provider.parent_of(target.node) is None:
            raise InvalidAdjacencyReferenceError(
                target.mode.value, "reference node has no parent"
            )
        logger.debug("Attaching %r (%s %r)", node, target.mode.value, target.node)
        ATTACHMENTS[target.mode](self.provider, node, target.node)

    def implicit_parent(self, target: AdjacencyTarget) -> Node:
        """
        Return the node that will end up as the parent of attached nodes.

        Params:
            target: Adjacency mode and reference node

        Returns:
            The reference itself for PARENT, otherwise the reference's parent

        Raises:
            InvalidAdjacencyReferenceError: If a sibling reference has no parent
        """
        if target.is_parent:
            return target.node
        parent = self.provider.parent_of(target.node)
        if parent is None:
            raise InvalidAdjacencyReferenceError(
                target.mode.value, "reference node has no parent"
            )
        return parent
