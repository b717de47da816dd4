"""
Document Providers.

The compiler delegates all tree storage to a provider; ``MinidomProvider``
is the default.
"""

from xmlmixup.provider.base import DocumentProvider
from xmlmixup.provider.minidom import MinidomProvider

__all__ = [
    "DocumentProvider",
    "MinidomProvider",
]
