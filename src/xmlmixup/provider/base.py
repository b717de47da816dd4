"""
Document Provider interface.

The compiler never stores or mutates tree structure itself; every node
allocation, tree mutation and introspection goes through a provider.
"""

from abc import ABC, abstractmethod
from typing import Any

Node = Any
Document = Any


class DocumentProvider(ABC):
    """
    Abstract document object model used by the markup compiler.

    Implementations own node allocation, tree mutation and namespace
    storage. Per-document operations must not share global state so that
    independent documents can be built concurrently.
    """

    # Node allocation

    @abstractmethod
    def create_document(self, version: str | None = None) -> Document: ...

    @abstractmethod
    def create_fragment(self, document: Document) -> Node: ...

    @abstractmethod
    def create_element(
        self, document: Document, qualified_name: str, namespace_uri: str | None = None
    ) -> Node: ...

    @abstractmethod
    def add_namespace_declaration(
        self, element: Node, prefix: str | None, uri: str
    ) -> None: ...

    @abstractmethod
    def set_attribute(
        self, element: Node, key: str, value: str, namespace_uri: str | None = None
    ) -> None: ...

    @abstractmethod
    def create_text(self, document: Document, text: str) -> Node: ...

    @abstractmethod
    def create_comment(self, document: Document, text: str) -> Node: ...

    @abstractmethod
    def create_cdata(self, document: Document, text: str) -> Node: ...

    @abstractmethod
    def create_processing_instruction(
        self, document: Document, target: str, content: str
    ) -> Node: ...

    @abstractmethod
    def create_internal_subset(
        self,
        document: Document,
        root_name: str,
        public_id: str | None = None,
        system_id: str | None = None,
    ) -> Node:
        """Create a doctype declaration and associate it with the document."""

    # Tree operations

    @abstractmethod
    def append_child(self, parent: Node, node: Node) -> None: ...

    @abstractmethod
    def insert_before(self, node: Node, sibling: Node) -> None: ...

    @abstractmethod
    def insert_after(self, node: Node, sibling: Node) -> None: ...

    @abstractmethod
    def replace(self, sibling: Node, node: Node) -> None:
        """Put ``node`` at the tree position of ``sibling``, removing ``sibling``."""

    @abstractmethod
    def set_root(self, document: Document, element: Node) -> None: ...

    @abstractmethod
    def remove(self, node: Node) -> None:
        """Detach ``node`` from its parent."""

    # Introspection

    @abstractmethod
    def document_of(self, node: Node) -> Document: ...

    @abstractmethod
    def parent_of(self, node: Node) -> Node | None: ...

    @abstractmethod
    def children_of(self, node: Node) -> list[Node]: ...

    @abstractmethod
    def namespace_declarations_of(self, node: Node) -> dict[str, str]:
        """
        Return the namespace declarations in scope at ``node``.

        Keys are ``xmlns`` for the default namespace and ``xmlns:<prefix>``
        otherwise; the nearest declaration wins.
        """

    @abstractmethod
    def duplicate(self, node: Node, deep: bool, document: Document) -> Node:
        """Copy ``node`` for use in ``document`` without touching the original."""

    # Node kind discriminators

    @abstractmethod
    def is_node(self, value: Any) -> bool: ...

    @abstractmethod
    def is_document(self, node: Node) -> bool: ...

    @abstractmethod
    def is_element(self, node: Node) -> bool: ...

    @abstractmethod
    def is_fragment(self, node: Node) -> bool: ...

    @abstractmethod
    def is_text(self, node: Node) -> bool: ...
