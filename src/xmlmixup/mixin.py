"""
Mixin exposing the markup helpers as methods.

Classes that build many documents can inherit from ``Mixup`` and set
``mixup_provider`` / ``mixup_settings`` once instead of passing them to
every call.
"""

from typing import Any

from xmlmixup.core.settings import DEFAULT_SETTINGS, MixupSettings
from xmlmixup.core.types import Args, SpecValue
from xmlmixup.provider.base import Document, DocumentProvider, Node
from xmlmixup.structure.compiler import markup, xml_doc
from xmlmixup.templates.xhtml import xhtml_stub


class Mixup:
    """Adds ``markup``, ``xml_doc`` and ``xhtml_stub`` to a class.

    Example:
        >>> class Page(Mixup):
        ...     pass
        >>> Page().markup({"#p": "hello"}).data
        'hello'
    """

    mixup_provider: DocumentProvider | None = None
    mixup_settings: MixupSettings = DEFAULT_SETTINGS

    def xml_doc(self, version: str | None = None) -> Document:
        """Generate a blank document, versioned from the settings by default."""
        if version is None:
            version = self.mixup_settings.xml_version
        return xml_doc(version, provider=self.mixup_provider)

    def markup(
        self,
        spec: SpecValue = None,
        *,
        doc: Document | None = None,
        args: Args = (),
        parent: Node | None = None,
        before: Node | None = None,
        after: Node | None = None,
        replace: Node | None = None,
    ) -> Node:
        """Generate a tree from a spec; see ``xmlmixup.markup``."""
        return markup(
            spec,
            doc=doc,
            args=args,
            parent=parent,
            before=before,
            after=after,
            replace=replace,
            provider=self.mixup_provider,
            settings=self.mixup_settings,
        )

    def xhtml_stub(self, **kwargs: Any) -> Node:
        """Generate an XHTML stub; see ``xmlmixup.templates.xhtml_stub``."""
        kwargs.setdefault("provider", self.mixup_provider)
        kwargs.setdefault("settings", self.mixup_settings)
        return xhtml_stub(**kwargs)
