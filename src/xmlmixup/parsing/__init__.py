"""
Spec parsing.

Classifies raw spec values into tagged variants consumed by the compiler.
"""

from xmlmixup.parsing.parser import (
    CallableSpec,
    CDataSpec,
    CommentSpec,
    DoctypeSpec,
    ElementSpec,
    NodeSpec,
    ParsedSpec,
    ProcessingInstructionSpec,
    SequenceSpec,
    SpecParser,
    TextSpec,
    as_children,
    parse_spec,
)

__all__ = [
    "SpecParser",
    "parse_spec",
    "as_children",
    "ParsedSpec",
    "SequenceSpec",
    "CallableSpec",
    "ElementSpec",
    "CommentSpec",
    "CDataSpec",
    "ProcessingInstructionSpec",
    "DoctypeSpec",
    "NodeSpec",
    "TextSpec",
]
