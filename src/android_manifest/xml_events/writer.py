"""Event sink that renders written events as XML with lxml."""

from typing import Any

from lxml import etree

from ..shared.exceptions import XmlWriteError
from .events import (
    Characters,
    Comment,
    EndElement,
    ProcessingInstruction,
    StartElement,
    Whitespace,
    XmlEvent,
)


class XmlEventWriter:
    """Collects XML events and builds an lxml tree from them.

    Element balance is checked as events arrive, so a bad sequence fails at
    the offending event rather than when rendering.

    Example:
        >>> writer = XmlEventWriter()
        >>> writer.write(StartElement(name="authorities"))
        >>> writer.write(Characters(text="com.a;com.b"))
        >>> writer.write(EndElement(name="authorities"))
        >>> writer.to_string()
        '<authorities>com.a;com.b</authorities>'
    """

    def __init__(self) -> None:
        self.events: list[XmlEvent] = []
        self._open: list[str] = []
        self._roots = 0

    def write(self, event: XmlEvent) -> None:
        """Append an event.

        Raises:
            XmlWriteError: If the event can't appear at this position
        """
        if isinstance(event, StartElement):
            if not self._open:
                if self._roots:
                    raise XmlWriteError(
                        "XML document can only have one root element",
                        {"element": event.name},
                    )
                self._roots += 1
            self._open.append(event.name)
        elif isinstance(event, EndElement):
            if not self._open:
                raise XmlWriteError(
                    f"End element '{event.name}' without a start element",
                    {"element": event.name},
                )
            if self._open[-1] != event.name:
                raise XmlWriteError(
                    f"End element '{event.name}' does not match open element '{self._open[-1]}'",
                    {"element": event.name, "open_element": self._open[-1]},
                )
            self._open.pop()
        elif not self._open:
            raise XmlWriteError(
                f"{event.kind} event outside of an element",
                {"event": event.kind},
            )
        self.events.append(event)

    def characters(self, text: str) -> None:
        """Shortcut for writing a text event."""
        self.write(Characters(text=text))

    def to_element(self) -> Any:
        """Build the lxml element tree of the written events.

        Raises:
            XmlWriteError: If nothing was written or elements are still open
        """
        if self._open:
            raise XmlWriteError(
                f"Unclosed elements: {', '.join(self._open)}",
                {"open_elements": list(self._open)},
            )
        if not self._roots:
            raise XmlWriteError("No element was written")

        builder = etree.TreeBuilder()
        for event in self.events:
            if isinstance(event, StartElement):
                builder.start(event.name, event.attributes, event.namespaces or None)
            elif isinstance(event, EndElement):
                builder.end(event.name)
            elif isinstance(event, (Characters, Whitespace)):
                builder.data(event.text)
            elif isinstance(event, Comment):
                builder.comment(event.text)
            elif isinstance(event, ProcessingInstruction):
                builder.pi(event.target, event.data)
        return builder.close()

    def to_string(self, pretty_print: bool = False) -> str:
        """Render the written events as an XML string."""
        return etree.tostring(self.to_element(), encoding="unicode", pretty_print=pretty_print)
