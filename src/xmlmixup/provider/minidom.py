"""
Document Provider backed by the standard library DOM (xml.dom.minidom).
"""

import logging
from typing import Any
from xml.dom import XMLNS_NAMESPACE, minidom

from xmlmixup.provider.base import Document, DocumentProvider, Node

logger = logging.getLogger(__name__)


class MinidomProvider(DocumentProvider):
    """Build trees out of ``xml.dom.minidom`` nodes.

    Notes:
      - Element namespaces are bound at creation time; namespace declarations
        are ordinary ``xmlns`` attributes, as minidom serializes them.
      - ``Document.removeChild`` cannot detach the document element in
        minidom, so root replacement always goes through ``replaceChild``.
    """

    def create_document(self, version: str | None = None) -> Document:
        document = minidom.getDOMImplementation().createDocument(None, None, None)
        if version is not None:
            document.version = version
        return document

    def create_fragment(self, document: Document) -> Node:
        return document.createDocumentFragment()

    def create_element(
        self, document: Document, qualified_name: str, namespace_uri: str | None = None
    ) -> Node:
        return document.createElementNS(namespace_uri, qualified_name)

    def add_namespace_declaration(
        self, element: Node, prefix: str | None, uri: str
    ) -> None:
        name = "xmlns" if prefix is None else f"xmlns:{prefix}"
        element.setAttributeNS(XMLNS_NAMESPACE, name, uri)

    def set_attribute(
        self, element: Node, key: str, value: str, namespace_uri: str | None = None
    ) -> None:
        element.setAttributeNS(namespace_uri, key, value)

    def create_text(self, document: Document, text: str) -> Node:
        return document.createTextNode(text)

    def create_comment(self, document: Document, text: str) -> Node:
        return document.createComment(text)

    def create_cdata(self, document: Document, text: str) -> Node:
        return document.createCDATASection(text)

    def create_processing_instruction(
        self, document: Document, target: str, content: str
    ) -> Node:
        return document.createProcessingInstruction(target, content)

    def create_internal_subset(
        self,
        document: Document,
        root_name: str,
        public_id: str | None = None,
        system_id: str | None = None,
    ) -> Node:
        doctype = document.implementation.createDocumentType(
            root_name, public_id, system_id
        )
        doctype.ownerDocument = document

        existing = document.doctype
        if existing is not None and existing.parentNode is document:
            logger.warning(
                "Replacing document type declaration '%s' with '%s'",
                existing.name,
                root_name,
            )
            document.replaceChild(doctype, existing)
        elif document.documentElement is not None:
            # The declaration precedes the document element
            document.insertBefore(doctype, document.documentElement)
        else:
            document.appendChild(doctype)

        document.doctype = doctype
        return doctype

    def append_child(self, parent: Node, node: Node) -> None:
        parent.appendChild(node)

    def insert_before(self, node: Node, sibling: Node) -> None:
        sibling.parentNode.insertBefore(node, sibling)

    def insert_after(self, node: Node, sibling: Node) -> None:
        sibling.parentNode.insertBefore(node, sibling.nextSibling)

    def replace(self, sibling: Node, node: Node) -> None:
        parent = sibling.parentNode
        if not self.is_fragment(node):
            parent.replaceChild(node, sibling)
            return

        children = list(node.childNodes)
        if not children:
            self.remove(sibling)
            return

        first, rest = children[0], children[1:]
        parent.replaceChild(first, sibling)
        previous = first
        for child in rest:
            self.insert_after(child, previous)
            previous = child

    def set_root(self, document: Document, element: Node) -> None:
        existing = document.documentElement
        if existing is None:
            document.appendChild(element)
        elif existing is not element:
            document.replaceChild(element, existing)

    def remove(self, node: Node) -> None:
        parent = node.parentNode
        if self.is_document(parent):
            # Document.removeChild fails on the document element
            minidom.Node.removeChild(parent, node)
            if parent.doctype is node:
                parent.doctype = None
        else:
            parent.removeChild(node)

    def document_of(self, node: Node) -> Document:
        if self.is_document(node):
            return node
        return node.ownerDocument

    def parent_of(self, node: Node) -> Node | None:
        return node.parentNode

    def children_of(self, node: Node) -> list[Node]:
        return list(node.childNodes)

    def namespace_declarations_of(self, node: Node) -> dict[str, str]:
        declarations: dict[str, str] = {}
        current = node
        while current is not None:
            if self.is_element(current):
                for name, value in current.attributes.items():
                    if name == "xmlns" or name.startswith("xmlns:"):
                        declarations.setdefault(name, value)
                # Elements created elsewhere may carry a namespace without declaring it
                if current.namespaceURI:
                    key = f"xmlns:{current.prefix}" if current.prefix else "xmlns"
                    declarations.setdefault(key, current.namespaceURI)
            current = current.parentNode
        return declarations

    def duplicate(self, node: Node, deep: bool, document: Document) -> Node:
        return document.importNode(node, deep)

    def is_node(self, value: Any) -> bool:
        return isinstance(value, minidom.Node)

    def is_document(self, node: Node) -> bool:
        return node.nodeType == minidom.Node.DOCUMENT_NODE

    def is_element(self, node: Node) -> bool:
        return node.nodeType == minidom.Node.ELEMENT_NODE

    def is_fragment(self, node: Node) -> bool:
        return node.nodeType == minidom.Node.DOCUMENT_FRAGMENT_NODE

    def is_text(self, node: Node) -> bool:
        return node.nodeType == minidom.Node.TEXT_NODE
