"""
Tests for adjacency targets and node attachment.
"""

import pytest

from xmlmixup.exceptions.core import (
    InvalidAdjacencyReferenceError,
    MultipleAdjacencyTargetsError,
)
from xmlmixup.structure.adjacency import (
    Adjacency,
    AdjacencyDispatcher,
    AdjacencyTarget,
)


@pytest.fixture
def dispatcher(provider):
    return AdjacencyDispatcher(provider)


@pytest.fixture
def middle(provider, document, root):
    """A <middle/> element, the only child of <root>."""
    element = provider.create_element(document, "middle")
    provider.append_child(root, element)
    return element


def child_names(node):
    return [child.nodeName for child in node.childNodes]


class TestAdjacencyTarget:
    """Construction of adjacency targets."""

    def test_constructors(self, root):
        """Test that each constructor sets its mode."""
        assert AdjacencyTarget.parent(root).mode is Adjacency.PARENT
        assert AdjacencyTarget.before(root).mode is Adjacency.BEFORE
        assert AdjacencyTarget.after(root).mode is Adjacency.AFTER
        assert AdjacencyTarget.replace(root).mode is Adjacency.REPLACE

    def test_from_keywords_single(self, root):
        """Test that one keyword yields the matching target."""
        target = AdjacencyTarget.from_keywords(after=root)
        assert target == AdjacencyTarget.after(root)
        assert not target.is_parent

    def test_from_keywords_none(self):
        """Test that no keywords yield no target."""
        assert AdjacencyTarget.from_keywords() is None

    def test_from_keywords_multiple_raises(self, root, document):
        """Test that two keywords are rejected and both named."""
        with pytest.raises(MultipleAdjacencyTargetsError) as exc_info:
            AdjacencyTarget.from_keywords(parent=root, replace=document)
        assert exc_info.value.keys == ["parent", "replace"]

    def test_target_is_immutable(self, root, document):
        """Test that targets cannot be modified."""
        target = AdjacencyTarget.parent(root)
        with pytest.raises(AttributeError):
            target.node = document


class TestAttach:
    """Attachment for each adjacency mode."""

    def test_parent_appends_last(self, provider, document, dispatcher, root, middle):
        """Test that parent mode appends after existing children."""
        node = provider.create_element(document, "last")
        dispatcher.attach(AdjacencyTarget.parent(root), node)
        assert child_names(root) == ["middle", "last"]

    def test_parent_document_sets_root(self, provider, document, dispatcher):
        """Test that an element under a document becomes its root."""
        element = provider.create_element(document, "top")
        dispatcher.attach(AdjacencyTarget.parent(document), element)
        assert document.documentElement is element

    def test_parent_document_replaces_root(self, provider, document, dispatcher, root):
        """Test that a new root element displaces the old one."""
        element = provider.create_element(document, "top")
        dispatcher.attach(AdjacencyTarget.parent(document), element)
        assert document.documentElement is element
        assert root.parentNode is None

    def test_parent_fragment_is_unpacked(self, provider, document, dispatcher, root):
        """Test that a fragment's children are attached, not the fragment."""
        fragment = provider.create_fragment(document)
        provider.append_child(fragment, provider.create_element(document, "a"))
        provider.append_child(fragment, provider.create_text(document, "b"))

        dispatcher.attach(AdjacencyTarget.parent(root), fragment)

        assert child_names(root) == ["a", "#text"]
        assert fragment.childNodes == []

    def test_before(self, provider, document, dispatcher, root, middle):
        """Test insertion before a sibling."""
        dispatcher.attach(
            AdjacencyTarget.before(middle), provider.create_element(document, "first")
        )
        assert child_names(root) == ["first", "middle"]

    def test_after(self, provider, document, dispatcher, root, middle):
        """Test insertion after a sibling."""
        dispatcher.attach(
            AdjacencyTarget.after(middle), provider.create_element(document, "last")
        )
        assert child_names(root) == ["middle", "last"]

    def test_replace(self, provider, document, dispatcher, root, middle):
        """Test that replace mode removes the reference."""
        dispatcher.attach(
            AdjacencyTarget.replace(middle), provider.create_element(document, "new")
        )
        assert child_names(root) == ["new"]
        assert middle.parentNode is None

    @pytest.mark.parametrize("mode", ["before", "after", "replace"])
    def test_sibling_mode_without_parent_raises(
        self, provider, document, dispatcher, mode
    ):
        """Test that sibling modes need a reference with a parent."""
        orphan = provider.create_element(document, "orphan")
        target = getattr(AdjacencyTarget, mode)(orphan)
        with pytest.raises(InvalidAdjacencyReferenceError) as exc_info:
            dispatcher.attach(target, provider.create_text(document, "x"))
        assert exc_info.value.mode == mode


class TestImplicitParent:
    """The node that ends up holding attached nodes."""

    def test_parent_mode(self, dispatcher, root):
        """Test that parent mode holds under the reference itself."""
        assert dispatcher.implicit_parent(AdjacencyTarget.parent(root)) is root

    def test_sibling_mode(self, dispatcher, root, middle):
        """Test that sibling modes hold under the reference's parent."""
        assert dispatcher.implicit_parent(AdjacencyTarget.before(middle)) is root

    def test_orphan_sibling_raises(self, provider, document, dispatcher):
        """Test that an orphan sibling reference is rejected."""
        orphan = provider.create_element(document, "orphan")
        with pytest.raises(InvalidAdjacencyReferenceError):
            dispatcher.implicit_parent(AdjacencyTarget.replace(orphan))
