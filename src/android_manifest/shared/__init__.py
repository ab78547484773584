"""Shared utilities for the manifest schema library."""

from .config import Settings, clear_settings_cache, get_settings
from .exceptions import (
    AttributeListError,
    ElementDecodeError,
    EmptyInputError,
    EmptyListError,
    MalformedStreamError,
    ManifestMappingError,
    ManifestSchemaError,
    XmlSyntaxError,
    XmlWriteError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Exceptions
    "ManifestSchemaError",
    "AttributeListError",
    "EmptyListError",
    "EmptyInputError",
    "ElementDecodeError",
    "MalformedStreamError",
    "XmlSyntaxError",
    "XmlWriteError",
    "ManifestMappingError",
]
