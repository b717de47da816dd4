"""
Markup compiler: turns specs into document nodes.

This module contains the recursive engine that classifies each spec value,
creates the matching node through the Document Provider, attaches it via
the adjacency dispatcher, and recurses into children. Every call returns the
last node it created in document order.

Spec shapes:
    - ``None`` / empty: nothing is created
    - list, tuple, iterator: each member compiled in order
    - callable: called with ``*args``; the result is compiled in its place
    - mapping: one element, comment, CDATA section, processing instruction
      or doctype (see ``xmlmixup.parsing.parser``)
    - existing node: deep-copied, then attached
    - anything else: a text node
"""

import logging
from xml.dom import XML_NAMESPACE

from xmlmixup.core.flatten import flatten
from xmlmixup.core.settings import DEFAULT_SETTINGS, MixupSettings
from xmlmixup.core.types import Args, SpecValue
from xmlmixup.exceptions.core import (
    ErrorContext,
    InvalidAdjacencyReferenceError,
    MissingElementNameError,
    MissingRequiredChildrenError,
    SpecDepthExceededError,
)
from xmlmixup.parsing.parser import (
    CallableSpec,
    CDataSpec,
    CommentSpec,
    DoctypeSpec,
    ElementSpec,
    NodeSpec,
    ProcessingInstructionSpec,
    SequenceSpec,
    SpecParser,
    TextSpec,
)
from xmlmixup.provider.base import Document, DocumentProvider, Node
from xmlmixup.provider.minidom import MinidomProvider
from xmlmixup.structure.adjacency import AdjacencyDispatcher, AdjacencyTarget
from xmlmixup.structure.namespaces import (
    XML_PREFIX,
    NamespaceResolver,
    split_qualified_name,
)

logger = logging.getLogger(__name__)


class MarkupCompiler:
    """Compile specs into nodes of documents owned by a ``DocumentProvider``.

    The compiler holds no per-call state; everything a call needs (adjacency
    target, document, callback arguments, namespace pseudo-parent and
    anchor) is threaded through the recursion as parameters. The anchor is
    the attached node whose namespaces back up those of a pseudo-parent
    still sitting in a detached fragment.
    """

    def __init__(
        self,
        provider: DocumentProvider | None = None,
        settings: MixupSettings = DEFAULT_SETTINGS,
    ):
        self.provider = provider or MinidomProvider()
        self.settings = settings
        self.parser = SpecParser(self.provider, settings)
        self.dispatcher = AdjacencyDispatcher(self.provider)
        self.resolver = NamespaceResolver(self.provider)

    def compile(
        self,
        spec: SpecValue = None,
        adjacency: AdjacencyTarget | None = None,
        document: Document | None = None,
        args: Args = (),
    ) -> Node:
        """
        Build the nodes described by ``spec`` and attach them.

        Params:
            spec: The spec to compile
            adjacency: Where the result goes; defaults to under the document
            document: Document to build in; derived from the adjacency
                reference, or created, when not given
            args: Positional arguments for every callable in the spec

        Returns:
            The last node created in document order, or the adjacency
            reference (the document by default) when nothing was created

        Raises:
            InvalidAdjacencyReferenceError: If the reference is not a node or
                a sibling reference has no parent
            MixupError: For any other malformed spec
        """
        args = tuple(args)

        if adjacency is None:
            if document is None:
                document = self.provider.create_document(self.settings.xml_version)
            adjacency = AdjacencyTarget.parent(document)
        else:
            if not self.provider.is_node(adjacency.node):
                raise InvalidAdjacencyReferenceError(
                    adjacency.mode.value, f"{adjacency.node!r} is not a node"
                )
            if document is None:
                document = self.provider.document_of(adjacency.node)
            # Fail before anything is built
            self.dispatcher.implicit_parent(adjacency)

        node = self._compile(spec, adjacency, document, args, None, None, ("$",), 0)
        return adjacency.node if node is None else node

    def _compile(
        self,
        spec: SpecValue,
        target: AdjacencyTarget,
        document: Document,
        args: Args,
        pseudo: Node | None,
        anchor: Node | None,
        path: tuple[str, ...],
        depth: int,
    ) -> Node | None:
        """Compile one spec value; None means nothing was created."""
        max_depth = self.settings.max_depth
        if max_depth is not None and depth > max_depth:
            raise SpecDepthExceededError(
                max_depth,
                context=ErrorContext.for_value(path, spec),
                error_level=self.settings.error_level,
            )

        parsed = self.parser.parse(spec, path)
        if parsed is None:
            return None

        logger.debug("Compiling %s at %s", type(parsed).__name__, "".join(path))

        if isinstance(parsed, SequenceSpec):
            return self._compile_sequence(
                parsed, target, document, args, pseudo, anchor, path, depth
            )

        if isinstance(parsed, CallableSpec):
            return self._compile(
                parsed.invoke(args),
                target,
                document,
                args,
                pseudo,
                anchor,
                path + ("()",),
                depth + 1,
            )

        if isinstance(parsed, ElementSpec):
            return self._compile_element(
                parsed, target, document, args, pseudo, anchor, path, depth
            )

        if isinstance(parsed, CommentSpec):
            text = flatten(parsed.children, args) or ""
            node = self.provider.create_comment(document, text)
        elif isinstance(parsed, CDataSpec):
            text = flatten(parsed.children, args) or ""
            node = self.provider.create_cdata(document, text)
        elif isinstance(parsed, ProcessingInstructionSpec):
            node = self._processing_instruction(parsed, document, args, path)
        elif isinstance(parsed, DoctypeSpec):
            # Associated with the document by the provider, never dispatched
            return self._doctype(parsed, document, args, path)
        elif isinstance(parsed, NodeSpec):
            node = self.provider.duplicate(parsed.node, True, document)
        elif isinstance(parsed, TextSpec):
            node = self.provider.create_text(document, parsed.text)
        else:
            raise TypeError(f"Unhandled spec variant {type(parsed).__name__}")

        self.dispatcher.attach(target, node)
        return node

    def _compile_sequence(
        self,
        parsed: SequenceSpec,
        target: AdjacencyTarget,
        document: Document,
        args: Args,
        pseudo: Node | None,
        anchor: Node | None,
        path: tuple[str, ...],
        depth: int,
    ) -> Node | None:
        parent = self.dispatcher.implicit_parent(target)
        if target.is_parent:
            holder = parent
        else:
            holder = self.provider.create_fragment(document)

        # Namespaces are inherited from the real parent, never the fragment
        context = pseudo if pseudo is not None else parent

        last = None
        for index, item in enumerate(parsed.items):
            node = self._compile(
                item,
                AdjacencyTarget.parent(holder),
                document,
                args,
                context,
                anchor,
                path + (f"[{index}]",),
                depth + 1,
            )
            if node is not None:
                last = node

        if last is not None and not target.is_parent:
            self.dispatcher.attach(target, holder)
        return last

    def _compile_element(
        self,
        parsed: ElementSpec,
        target: AdjacencyTarget,
        document: Document,
        args: Args,
        pseudo: Node | None,
        anchor: Node | None,
        path: tuple[str, ...],
        depth: int,
    ) -> Node:
        context = ErrorContext.for_value(path, parsed, "element")
        name = flatten(parsed.name, args)
        if name is None:
            raise MissingElementNameError(
                context=context, error_level=self.settings.error_level
            )

        if pseudo is None:
            pseudo = self.dispatcher.implicit_parent(target)
        resolution = self.resolver.resolve(
            name,
            parsed.attributes,
            pseudo,
            args,
            anchor=anchor,
            context=context,
            error_level=self.settings.error_level,
        )
        bindings = resolution.bindings

        element = self.provider.create_element(
            document,
            resolution.qualified_name,
            self._namespace_for(resolution.prefix, bindings),
        )
        for prefix, uri in sorted(
            resolution.declarations.items(), key=lambda item: item[0] or ""
        ):
            self.provider.add_namespace_declaration(element, prefix, uri)
        for key, value in sorted(resolution.attributes.items()):
            prefix, _ = split_qualified_name(key)
            self.provider.set_attribute(
                element, key, value, self._namespace_for(prefix, bindings, attribute=True)
            )

        self.dispatcher.attach(target, element)

        if not parsed.children:
            return element

        # Descendants built inside a detached fragment still see the
        # namespaces in scope where the fragment will be attached
        if anchor is None:
            anchor = pseudo

        # The deepest last descendant is what bubbles up
        node = self._compile(
            parsed.children,
            AdjacencyTarget.parent(element),
            document,
            args,
            None,
            anchor,
            path + (f"<{resolution.qualified_name}>",),
            depth + 1,
        )
        return element if node is None else node

    @staticmethod
    def _namespace_for(
        prefix: str | None, bindings: dict[str | None, str], attribute: bool = False
    ) -> str | None:
        """Namespace URI for a prefix; unprefixed attributes have none."""
        if prefix == XML_PREFIX:
            return XML_NAMESPACE
        if prefix is None and attribute:
            return None
        return bindings.get(prefix) or None

    def _processing_instruction(
        self,
        parsed: ProcessingInstructionSpec,
        document: Document,
        args: Args,
        path: tuple[str, ...],
    ) -> Node:
        target = flatten(parsed.children[0], args) if parsed.children else None
        if target is None:
            raise MissingRequiredChildrenError(
                "processing-instruction",
                context=ErrorContext.for_value(path, parsed, "processing-instruction"),
                error_level=self.settings.error_level,
            )

        rest = parsed.children[1:]
        if rest:
            content = flatten(rest, args) or ""
        else:
            pairs = []
            for key in sorted(parsed.attributes):
                value = flatten(parsed.attributes[key], args)
                if value is not None:
                    pairs.append(f'{key}="{value}"')
            content = " ".join(pairs)

        return self.provider.create_processing_instruction(document, target, content)

    def _doctype(
        self,
        parsed: DoctypeSpec,
        document: Document,
        args: Args,
        path: tuple[str, ...],
    ) -> Node:
        children = list(parsed.children) + [None, None, None]
        root = flatten(children[0], args)
        if root is None:
            raise MissingRequiredChildrenError(
                "doctype",
                context=ErrorContext.for_value(path, parsed, "doctype"),
                error_level=self.settings.error_level,
            )

        public_id = flatten(children[1], args)
        if public_id is None:
            public_id = flatten(parsed.attributes.get("public"), args)
        system_id = flatten(children[2], args)
        if system_id is None:
            system_id = flatten(parsed.attributes.get("system"), args)

        return self.provider.create_internal_subset(document, root, public_id, system_id)


def xml_doc(
    version: str | None = None, provider: DocumentProvider | None = None
) -> Document:
    """
    Generate a blank document.

    Params:
        version: XML version recorded on the document
        provider: Document Provider; minidom when omitted

    Returns:
        A new, empty document
    """
    return (provider or MinidomProvider()).create_document(version)


def markup(
    spec: SpecValue = None,
    *,
    doc: Document | None = None,
    args: Args = (),
    parent: Node | None = None,
    before: Node | None = None,
    after: Node | None = None,
    replace: Node | None = None,
    provider: DocumentProvider | None = None,
    settings: MixupSettings = DEFAULT_SETTINGS,
) -> Node:
    """
    Generate a tree from a spec.

    Example:
        >>> node = markup([
        ...     {"#pi": "xml-stylesheet", "type": "text/xsl", "href": "/transform"},
        ...     {"#dtd": "html"},
        ...     {"#html": [
        ...         {"#head": [{"#title": "look ma, title"}]},
        ...         {"#body": [{"#h1": "Illustrious Heading"}, {"#p": "lolwut"}]},
        ...     ], "xmlns": "http://www.w3.org/1999/xhtml"},
        ... ])
        >>> node.data
        'lolwut'

    Params:
        spec: The tree specification
        doc: Document to build in; created when none is given or derivable
        args: Positional arguments passed to every callable in the spec
        parent: Node under which the result is attached (the default
            adjacency, itself defaulting to the document)
        before: Sibling the result is inserted before
        after: Sibling the result is inserted after
        replace: Sibling the result replaces
        provider: Document Provider; minidom when omitted
        settings: Compiler settings

    Returns:
        The last node generated in document order; the document when called
        without a spec

    Raises:
        MultipleAdjacencyTargetsError: If more than one of parent, before,
            after and replace is given
    """
    adjacency = AdjacencyTarget.from_keywords(
        parent=parent, before=before, after=after, replace=replace
    )
    compiler = MarkupCompiler(provider, settings)
    return compiler.compile(spec, adjacency, doc, args)
