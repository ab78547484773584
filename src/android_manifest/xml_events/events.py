"""Typed XML events.

Element names use lxml's Clark notation (``{namespace}local``) so events
coming from a parser and events written by hand compare equal.
"""

from pydantic import BaseModel, ConfigDict, Field


class XmlEvent(BaseModel):
    """Base class of all XML stream events."""

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> str:
        """Event kind name, e.g. 'StartElement'."""
        return type(self).__name__


class StartElement(XmlEvent):
    """Opening tag of an element."""

    name: str = Field(min_length=1, description="Element name in Clark notation")
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Attribute values keyed by Clark-notation name",
    )
    namespaces: dict[str | None, str] = Field(
        default_factory=dict,
        description="Prefix to namespace URI bindings declared or in scope",
    )

    @property
    def local_name(self) -> str:
        """Element name without its namespace."""
        return self.name.rsplit("}", 1)[-1]


class EndElement(XmlEvent):
    """Closing tag of an element."""

    name: str = Field(min_length=1, description="Element name in Clark notation")


class Characters(XmlEvent):
    """Text content holding at least one non-whitespace character."""

    text: str


class Whitespace(XmlEvent):
    """Whitespace-only text, usually indentation between elements."""

    text: str


class Comment(XmlEvent):
    """XML comment."""

    text: str = ""


class ProcessingInstruction(XmlEvent):
    """Processing instruction such as ``<?xml-stylesheet ...?>``."""

    target: str = Field(min_length=1)
    data: str | None = None


def text_event(text: str) -> Characters | Whitespace:
    """Build the event matching a piece of text."""
    if text.strip():
        return Characters(text=text)
    return Whitespace(text=text)
