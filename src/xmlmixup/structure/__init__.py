"""
Tree construction: adjacency dispatch, namespace resolution and the
markup compiler.
"""

from xmlmixup.structure.adjacency import (
    Adjacency,
    AdjacencyDispatcher,
    AdjacencyTarget,
)
from xmlmixup.structure.compiler import MarkupCompiler, markup, xml_doc
from xmlmixup.structure.namespaces import (
    NamespaceResolution,
    NamespaceResolver,
    split_qualified_name,
)

__all__ = [
    "Adjacency",
    "AdjacencyDispatcher",
    "AdjacencyTarget",
    "MarkupCompiler",
    "markup",
    "xml_doc",
    "NamespaceResolution",
    "NamespaceResolver",
    "split_qualified_name",
]
