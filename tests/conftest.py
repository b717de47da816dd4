"""
Shared test fixtures and utilities for the xmlmixup test suite.
"""

import pytest

from xmlmixup.provider.minidom import MinidomProvider


@pytest.fixture
def provider():
    """Default minidom Document Provider."""
    return MinidomProvider()


@pytest.fixture
def document(provider):
    """A fresh, empty document."""
    return provider.create_document()


@pytest.fixture
def root(provider, document):
    """A document whose root element <root> declares xmlns:svg="urn:svg"."""
    element = provider.create_element(document, "root")
    provider.add_namespace_declaration(element, "svg", "urn:svg")
    provider.set_root(document, element)
    return element
