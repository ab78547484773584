"""Per-value codecs used by delimited attribute lists.

An element codec turns one logical value into its string form and back.
The list codec only joins and splits; everything type specific lives here.

Resolution order for an element type:
1. A codec registered with :func:`register_codec`
2. A ``__manifest_codec__`` attribute on the type
3. :class:`EnumCodec` for ``Enum`` subclasses
4. :class:`TypeAdapterCodec` (pydantic) for anything else
"""

from enum import Enum
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")


class ElementCodec(Protocol[T]):
    """String codec for a single list element.

    ``decode`` raises ``ValueError`` for text that isn't a valid value.
    ``encode`` raises ``TypeError`` or ``ValueError`` for values it can't
    represent.
    """

    def encode(self, value: T) -> str: ...

    def decode(self, text: str) -> T: ...


class StringCodec:
    """Plain strings. Empty fragments are rejected."""

    def encode(self, value: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        return value

    def decode(self, text: str) -> str:
        if not text:
            raise ValueError("value can't be empty")
        return text


class IntegerCodec:
    """Base-10 integers."""

    def encode(self, value: int) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return str(value)

    def decode(self, text: str) -> int:
        try:
            return int(text, 10)
        except ValueError:
            raise ValueError(f"{text!r} is not a valid integer") from None


class BooleanCodec:
    """XML schema style ``true`` / ``false``."""

    def encode(self, value: bool) -> str:
        if not isinstance(value, bool):
            raise TypeError(f"expected bool, got {type(value).__name__}")
        return "true" if value else "false"

    def decode(self, text: str) -> bool:
        lowered = text.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ValueError(f"{text!r} is not a valid boolean; expected 'true' or 'false'")


class EnumCodec:
    """Enum members, written as their value."""

    def __init__(self, enum_type: type[Enum]) -> None:
        self.enum_type = enum_type
        self._by_text = {str(member.value): member for member in enum_type}

    def encode(self, value: Enum) -> str:
        if not isinstance(value, self.enum_type):
            raise TypeError(f"expected {self.enum_type.__name__}, got {type(value).__name__}")
        return str(value.value)

    def decode(self, text: str) -> Enum:
        try:
            return self._by_text[text]
        except KeyError:
            allowed = ", ".join(self._by_text)
            raise ValueError(
                f"{text!r} is not a valid {self.enum_type.__name__}; expected one of: {allowed}"
            ) from None


class TypeAdapterCodec:
    """Fallback codec validating fragments with a pydantic ``TypeAdapter``."""

    def __init__(self, element_type: Any) -> None:
        self.element_type = element_type
        self._adapter = TypeAdapter(element_type)

    def encode(self, value: Any) -> str:
        dumped = self._adapter.dump_python(value, mode="json")
        if isinstance(dumped, bool):
            return "true" if dumped else "false"
        if not isinstance(dumped, (str, int, float)):
            raise TypeError(f"{type(value).__name__} does not serialize to a scalar")
        return str(dumped)

    def decode(self, text: str) -> Any:
        try:
            return self._adapter.validate_python(text)
        except ValidationError as e:
            raise ValueError(e.errors()[0]["msg"]) from e


_REGISTRY: dict[Any, ElementCodec] = {
    str: StringCodec(),
    int: IntegerCodec(),
    bool: BooleanCodec(),
}


def register_codec(element_type: Any, codec: ElementCodec) -> None:
    """Register the codec used for ``element_type``.

    Only affects list classes specialized after the call.
    """
    _REGISTRY[element_type] = codec


def resolve_codec(element_type: Any) -> ElementCodec:
    """Find the codec for ``element_type``.

    Args:
        element_type: Type of the list elements

    Returns:
        Codec instance for that type
    """
    if element_type in _REGISTRY:
        return _REGISTRY[element_type]

    hook = getattr(element_type, "__manifest_codec__", None)
    if hook is not None:
        return hook

    if isinstance(element_type, type) and issubclass(element_type, Enum):
        return EnumCodec(element_type)

    return TypeAdapterCodec(element_type)
