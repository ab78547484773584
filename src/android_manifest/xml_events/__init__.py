"""XML event framework.

This module handles:
- Typed XML events
- Reading events from XML text or lxml elements
- Writing events back to XML
"""

from .events import (
    Characters,
    Comment,
    EndElement,
    ProcessingInstruction,
    StartElement,
    Whitespace,
    XmlEvent,
)
from .reader import XmlEventReader
from .writer import XmlEventWriter

__all__ = [
    "XmlEvent",
    "StartElement",
    "EndElement",
    "Characters",
    "Whitespace",
    "Comment",
    "ProcessingInstruction",
    "XmlEventReader",
    "XmlEventWriter",
]
