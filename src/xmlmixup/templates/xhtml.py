"""
XHTML document skeletons.

``xhtml_stub`` assembles a spec for a complete XHTML page (stylesheet
processing instruction, doctype, ``<html>``, ``<head>`` and ``<body>``) and
compiles it like any other spec.
"""

from collections.abc import Mapping
from typing import Any

from xmlmixup.core.flatten import flatten
from xmlmixup.core.settings import DEFAULT_SETTINGS, MixupSettings
from xmlmixup.core.types import Args, SpecValue, is_absent, is_sequence
from xmlmixup.provider.base import Document, DocumentProvider, Node
from xmlmixup.structure.compiler import markup

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"


def _has_name_slot(spec: Mapping, settings: MixupSettings) -> bool:
    return None in spec or any(
        isinstance(k, tuple) or settings.marker_key(k) for k in spec
    )


def _elements(tag: str, value: Any, settings: MixupSettings) -> list[SpecValue]:
    """
    Coerce a ``link``/``meta``/``style``/``script`` argument into specs.

    Mappings without a name slot are attribute bags for ``tag``; mappings
    with one are passed through as specs; strings become the element's text
    (or ``src`` for scripts).
    """
    if is_absent(value):
        return []
    items = list(value) if is_sequence(value) else [value]

    specs: list[SpecValue] = []
    for item in items:
        if isinstance(item, Mapping):
            if _has_name_slot(item, settings):
                specs.append(item)
            else:
                specs.append({None: tag, **item})
        elif tag == "script":
            specs.append({None: tag, "src": item})
        else:
            specs.append({None: [tag, item]})
    return specs


def _title(title: Any, args: Args) -> SpecValue:
    """A title string, a [text, *properties] sequence, or a full spec."""
    if is_absent(title) or isinstance(title, Mapping):
        return title
    if is_sequence(title):
        text, *properties = list(title)
        return {None: ["title", text], "property": flatten(properties, args)}
    return {None: ["title", title]}


def xhtml_stub(
    doc: Document | None = None,
    base: Any = None,
    ns: Mapping | None = None,
    prefix: Mapping | None = None,
    vocab: Any = None,
    lang: Any = None,
    title: Any = None,
    link: Any = (),
    meta: Any = (),
    style: Any = (),
    script: Any = (),
    head: Mapping | None = None,
    body: Mapping | None = None,
    attr: Mapping | None = None,
    content: SpecValue = (),
    transform: Any = None,
    dtd: Any = True,
    xmlns: Any = True,
    args: Args = (),
    provider: DocumentProvider | None = None,
    settings: MixupSettings = DEFAULT_SETTINGS,
) -> Node:
    """
    Generate an XHTML stub, with optional RDFa attributes.

    Params:
        doc: An optional document to build in
        base: The ``href`` of ``<base/>``
        ns: Additional ``xmlns:*`` declarations for the root element
        prefix: RDFa ``prefix=`` mapping for the root element
        vocab: RDFa ``vocab=`` for the root element
        lang: ``lang=`` (and ``xml:lang=`` when namespaces are on)
        title: Title text; a sequence puts its tail in ``property=``; a
            mapping is used as the title spec
        link: One or more ``<link/>`` attribute mappings or specs
        meta: One or more ``<meta/>`` attribute mappings or specs
        style: One or more ``<style>`` texts, attribute mappings or specs
        script: One or more ``<script>`` sources, attribute mappings or specs
        head: A spec overriding the whole ``<head>``
        body: A spec overriding the whole ``<body>``
        attr: Attributes for ``<body>``
        content: Spec attached under ``<body>``
        transform: URL of an XSLT stylesheet, or a full PI spec mapping
        dtd: Whether to add ``<!DOCTYPE html>``; a ``(public, system)`` pair
            adds identifiers
        xmlns: Whether to declare the XHTML namespace; a mapping declares
            only its contents
        args: Arguments for callbacks in the spec
        provider: Document Provider; minidom when omitted
        settings: Compiler settings

    Returns:
        The last node generated, in document order
    """
    spec: list[SpecValue] = []

    if transform:
        if isinstance(transform, Mapping):
            spec.append(transform)
        else:
            spec.append(
                {
                    None: [f"{settings.marker}pi", "xml-stylesheet"],
                    "type": "text/xsl",
                    "href": str(transform),
                }
            )

    if dtd:
        identifiers = list(dtd) if is_sequence(dtd) else []
        spec.append({None: [f"{settings.marker}dtd", "html", *identifiers]})

    if not head:
        children = [_title(title, args)]
        if base:
            children.append({None: "base", "href": base})
        for tag, value in (
            ("link", link),
            ("meta", meta),
            ("style", style),
            ("script", script),
        ):
            children.extend(_elements(tag, value, settings))
        head = {None: ["head", *children]}

    if not body:
        body = {None: ["body", content], **(attr or {})}

    root: dict[Any, Any] = {None: ["html", head, body]}
    if vocab:
        root["vocab"] = vocab
    if lang:
        root["lang"] = lang
    if prefix:
        root["prefix"] = dict(prefix)

    if isinstance(xmlns, Mapping):
        for key, uri in xmlns.items():
            root["xmlns" if key is None else f"xmlns:{key}"] = uri
    elif xmlns:
        root["xmlns"] = XHTML_NAMESPACE
        if lang:
            root["xml:lang"] = lang

    for key, uri in (ns or {}).items():
        root[f"xmlns:{key}"] = uri

    spec.append(root)

    return markup(spec, doc=doc, args=args, provider=provider, settings=settings)
