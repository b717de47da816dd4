"""
xmlmixup - generate XML trees from nested declarative specs

xmlmixup compiles nested maps, sequences, callables, scalars and existing
nodes into document nodes attached at a chosen point of a host document.
"""

from importlib.metadata import version

from xmlmixup.core.flatten import flatten
from xmlmixup.core.settings import MixupSettings
from xmlmixup.mixin import Mixup
from xmlmixup.provider import DocumentProvider, MinidomProvider
from xmlmixup.structure import AdjacencyTarget, MarkupCompiler, markup, xml_doc
from xmlmixup.templates import xhtml_stub

__version__ = version("xml-mixup")

__all__ = [
    "__version__",
    "markup",
    "xml_doc",
    "xhtml_stub",
    "flatten",
    "Mixup",
    "MarkupCompiler",
    "AdjacencyTarget",
    "MixupSettings",
    "DocumentProvider",
    "MinidomProvider",
]
