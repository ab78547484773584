"""XML event support for delimited attribute lists.

A list is always written as the character content of its enclosing
element, never as an XML attribute. The caller opens and closes the
element; this module only supplies the text.

Decoding scans events with a small state machine:

    SCANNING --StartElement--> SCANNING
    SCANNING --Characters----> DONE    (text parsed like the pydantic path)
    SCANNING --other / end---> FAILED  (MalformedStreamError)
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from aws_lambda_powertools import Logger

from ..shared.config import get_settings
from ..shared.exceptions import MalformedStreamError
from ..xml_events import Characters, StartElement, XmlEventReader, XmlEventWriter
from .wire import join_values, parse_values

if TYPE_CHECKING:
    from .container import AttributeList

logger = Logger(service="attribute-list", level=get_settings().log_level)

A = TypeVar("A")
N = TypeVar("N")


class ScanState(str, Enum):
    """States of the character data scan."""

    SCANNING = "scanning"
    DONE = "done"
    FAILED = "failed"


def serialize(attribute_list: "AttributeList", writer: XmlEventWriter) -> None:
    """Write the joined values as a single character data event.

    Raises:
        EmptyListError: If the list has no values; nothing is written
    """
    writer.characters(join_values(attribute_list))


def serialize_attributes(attribute_list: "AttributeList", attributes: A, namespaces: N) -> tuple[A, N]:
    """Contribute no attributes or namespaces to the enclosing element."""
    return attributes, namespaces


def deserialize(cls: type["AttributeList"], reader: XmlEventReader) -> "AttributeList":
    """Read a list from the first character data event of ``reader``.

    Leading start elements are skipped. Everything after the character
    data event is left unread.

    Raises:
        MalformedStreamError: If another event kind comes first or the
            stream ends without character data
        EmptyInputError, ElementDecodeError: From parsing the text
    """
    state = ScanState.SCANNING
    event: Any = None
    skipped = 0

    while state is ScanState.SCANNING:
        event = reader.next_event()
        if isinstance(event, StartElement):
            skipped += 1
        elif isinstance(event, Characters):
            state = ScanState.DONE
        else:
            state = ScanState.FAILED

    if state is ScanState.FAILED:
        seen = event.kind if event is not None else "end of stream"
        logger.warning(
            "No character data for value list",
            extra={"event": seen, "skipped_elements": skipped},
        )
        raise MalformedStreamError(details={"event": seen, "skipped_elements": skipped})

    return parse_values(cls, event.text)
