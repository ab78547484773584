"""Delimited attribute list codec.

This module handles:
- Delimiter policies (``;`` and ``|``)
- Per-element string codecs
- The ``AttributeList`` container
- Pydantic and XML event serialization of lists
"""

from .container import AttributeList
from .delimiters import Delimiter, Semicolon, VerticalBar
from .element_codecs import (
    BooleanCodec,
    ElementCodec,
    EnumCodec,
    IntegerCodec,
    StringCodec,
    TypeAdapterCodec,
    register_codec,
    resolve_codec,
)
from .wire import join_values, parse_values, split_fragments

__all__ = [
    "AttributeList",
    "Delimiter",
    "Semicolon",
    "VerticalBar",
    "ElementCodec",
    "StringCodec",
    "IntegerCodec",
    "BooleanCodec",
    "EnumCodec",
    "TypeAdapterCodec",
    "register_codec",
    "resolve_codec",
    "join_values",
    "parse_values",
    "split_fragments",
]
