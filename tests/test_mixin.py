"""
Tests for the package surface and the ``Mixup`` mixin.
"""

from xml.dom import minidom

import xmlmixup
from xmlmixup import Mixup, MinidomProvider, MixupSettings


class RecordingProvider(MinidomProvider):
    """Minidom provider that counts the documents it creates."""

    def __init__(self):
        self.documents = 0

    def create_document(self, version=None):
        self.documents += 1
        return super().create_document(version)


class Page(Mixup):
    pass


class CustomPage(Mixup):
    mixup_provider = RecordingProvider()
    mixup_settings = MixupSettings(marker="@", xml_version="1.1")


class TestPackage:
    """Top-level exports."""

    def test_has_version(self):
        """Test that the package exposes a version string."""
        assert isinstance(xmlmixup.__version__, str)
        assert xmlmixup.__version__

    def test_module_level_markup(self):
        """Test that markup is importable from the package."""
        node = xmlmixup.markup({None: ["p", "hi"]})
        assert node.data == "hi"


class TestMixup:
    """Methods added to classes that inherit ``Mixup``."""

    def test_has_markup_method(self):
        """Test that mixed-in classes gain a markup method."""
        assert callable(Page().markup)

    def test_empty_markup_returns_document(self):
        """Test that markup() returns a new document."""
        doc = Page().markup()
        assert doc.nodeType == minidom.Node.DOCUMENT_NODE

    def test_markup_makes_element(self):
        """Test that markup builds an element."""
        node = Page().markup({None: "foo"})
        assert node.tagName == "foo"

    def test_markup_with_parent(self):
        """Test that markup attaches under a given parent."""
        page = Page()
        html = page.markup({None: "html"})
        node = page.markup({"#body": "text"}, parent=html)
        assert node.parentNode.parentNode is html

    def test_xml_doc(self):
        """Test that xml_doc records the requested version."""
        doc = Page().xml_doc("1.1")
        assert doc.version == "1.1"

    def test_xhtml_stub(self):
        """Test that xhtml_stub is available on the mixin."""
        node = Page().xhtml_stub(title="T", content={"#p": "body"})
        assert node.data == "body"
        assert node.ownerDocument.doctype is not None

    def test_class_level_provider_and_settings(self):
        """Test that class attributes pick the provider and settings."""
        page = CustomPage()
        before = page.mixup_provider.documents

        node = page.markup({"@p": "hi"})

        assert page.mixup_provider.documents == before + 1
        assert node.parentNode.tagName == "p"
        assert node.ownerDocument.version == "1.1"

    def test_class_level_settings_reach_xhtml_stub(self):
        """Test that class settings also apply to xhtml_stub."""
        node = CustomPage().xhtml_stub(content={"@p": "x"})
        assert node.data == "x"

    def test_explicit_settings_win_in_xhtml_stub(self):
        """Test that explicit settings override class settings."""
        node = CustomPage().xhtml_stub(content={"#p": "x"}, settings=MixupSettings())
        assert node.data == "x"
