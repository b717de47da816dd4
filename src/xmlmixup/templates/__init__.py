"""
Convenience spec builders layered on the markup compiler.
"""

from xmlmixup.templates.xhtml import XHTML_NAMESPACE, xhtml_stub

__all__ = [
    "XHTML_NAMESPACE",
    "xhtml_stub",
]
