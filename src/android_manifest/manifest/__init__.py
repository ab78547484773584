"""Manifest element models.

This module handles:
- Pydantic models for manifest elements
- Mapping models to and from XML
"""

from .elements import (
    Activity,
    ConfigChange,
    Data,
    IntentFilter,
    ManifestElement,
    MetaData,
    PathPermission,
    Permission,
    ProtectionLevel,
    Provider,
    WindowSoftInputMode,
)
from .xml_mapping import from_element, from_xml, to_element, to_xml

__all__ = [
    "ManifestElement",
    "Activity",
    "Data",
    "IntentFilter",
    "MetaData",
    "PathPermission",
    "Permission",
    "Provider",
    "ConfigChange",
    "ProtectionLevel",
    "WindowSoftInputMode",
    "from_element",
    "from_xml",
    "to_element",
    "to_xml",
]
