"""Android manifest schema library.

Pydantic models for AndroidManifest.xml elements built around a codec for
delimited attribute lists: attributes such as ``android:authorities`` that
hold several values in one string.
"""

__version__ = "0.1.0"

from .attribute_list import AttributeList, Delimiter, Semicolon, VerticalBar
from .shared.exceptions import (
    AttributeListError,
    ElementDecodeError,
    EmptyInputError,
    EmptyListError,
    MalformedStreamError,
    ManifestSchemaError,
)

__all__ = [
    "AttributeList",
    "Delimiter",
    "Semicolon",
    "VerticalBar",
    "ManifestSchemaError",
    "AttributeListError",
    "EmptyListError",
    "EmptyInputError",
    "ElementDecodeError",
    "MalformedStreamError",
]
