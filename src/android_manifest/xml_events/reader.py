"""Pull-style reader over a sequence of XML events.

Events can come from XML text (parsed by lxml through a parser target),
from an lxml element subtree, or from a list built by the caller.
Adjacent text chunks are merged into one event, and whitespace-only text
is dropped unless ``skip_whitespace`` is turned off.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from aws_lambda_powertools import Logger
from lxml import etree

from ..shared.config import get_settings
from ..shared.exceptions import XmlSyntaxError
from .events import (
    Comment,
    EndElement,
    ProcessingInstruction,
    StartElement,
    Whitespace,
    XmlEvent,
    text_event,
)

logger = Logger(service="xml-events", level=get_settings().log_level)


class _EventCollector:
    """lxml parser target recording events in document order."""

    def __init__(self) -> None:
        self.events: list[XmlEvent] = []
        self._text: list[str] = []

    def _flush_text(self) -> None:
        if self._text:
            self.events.append(text_event("".join(self._text)))
            self._text = []

    def start(self, tag: str, attrib: dict[str, str], nsmap: dict[str | None, str] | None = None) -> None:
        self._flush_text()
        self.events.append(
            StartElement(name=tag, attributes=dict(attrib), namespaces=dict(nsmap or {}))
        )

    def end(self, tag: str) -> None:
        self._flush_text()
        self.events.append(EndElement(name=tag))

    def data(self, data: str) -> None:
        self._text.append(data)

    def comment(self, text: str) -> None:
        self._flush_text()
        self.events.append(Comment(text=text or ""))

    def pi(self, target: str, data: str | None = None) -> None:
        self._flush_text()
        self.events.append(ProcessingInstruction(target=target, data=data))

    def close(self) -> list[XmlEvent]:
        self._flush_text()
        return self.events


def _walk(element: Any) -> Iterator[XmlEvent]:
    """Yield the events of an lxml element, excluding its tail."""
    if element.tag is etree.Comment:
        yield Comment(text=element.text or "")
        return
    if element.tag is etree.PI:
        yield ProcessingInstruction(target=element.target, data=element.text)
        return

    yield StartElement(
        name=element.tag,
        attributes=dict(element.attrib),
        namespaces=dict(element.nsmap),
    )
    if element.text:
        yield text_event(element.text)
    for child in element:
        yield from _walk(child)
        if child.tail:
            yield text_event(child.tail)
    yield EndElement(name=element.tag)


class XmlEventReader:
    """Sequential access to XML events.

    Example:
        >>> reader = XmlEventReader.from_string("<a>x;y</a>")
        >>> reader.next_event().kind
        'StartElement'
    """

    def __init__(self, events: Iterable[XmlEvent], skip_whitespace: bool | None = None) -> None:
        """Wrap an event sequence.

        Args:
            events: Events in document order
            skip_whitespace: Drop Whitespace events; defaults to the
                XML_SKIP_WHITESPACE_EVENTS setting
        """
        if skip_whitespace is None:
            skip_whitespace = get_settings().skip_whitespace_events
        self._events = [
            event for event in events if not (skip_whitespace and isinstance(event, Whitespace))
        ]
        self._position = 0

    @classmethod
    def from_string(cls, xml: str | bytes, skip_whitespace: bool | None = None) -> "XmlEventReader":
        """Parse XML text into a reader.

        Raises:
            XmlSyntaxError: If the text isn't well-formed XML
        """
        if isinstance(xml, str):
            xml = xml.encode("utf-8")

        parser = etree.XMLParser(
            target=_EventCollector(),
            resolve_entities=False,
            no_network=True,
        )
        try:
            events = etree.fromstring(xml, parser)
        except etree.XMLSyntaxError as e:
            raise XmlSyntaxError(
                f"XML syntax error: {e}",
                {"line": e.lineno, "column": e.offset},
            ) from e

        logger.debug("Parsed XML into events", extra={"event_count": len(events)})
        return cls(events, skip_whitespace)

    @classmethod
    def from_element(cls, element: Any, skip_whitespace: bool | None = None) -> "XmlEventReader":
        """Create a reader over an lxml element subtree."""
        return cls(_walk(element), skip_whitespace)

    def next_event(self) -> XmlEvent | None:
        """Consume and return the next event, or None once exhausted."""
        if self._position >= len(self._events):
            return None
        event = self._events[self._position]
        self._position += 1
        return event

    def peek(self) -> XmlEvent | None:
        """Return the next event without consuming it."""
        if self._position >= len(self._events):
            return None
        return self._events[self._position]

    def remaining(self) -> int:
        return len(self._events) - self._position

    def __iter__(self) -> Iterator[XmlEvent]:
        while (event := self.next_event()) is not None:
            yield event
