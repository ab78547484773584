"""Ordered, typed container for delimited attribute values.

``AttributeList`` is specialized with a delimiter policy and an element type::

    Authorities = AttributeList[Semicolon, str]
    ConfigChanges = AttributeList[VerticalBar, ConfigChange]

Each specialization is a distinct class, cached so that repeated
subscription returns the same class. The container itself only holds
values; pydantic and XML event support are thin hooks delegating to
:mod:`.pydantic_adapter` and :mod:`.xml_adapter`.
"""

from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

from . import pydantic_adapter, xml_adapter
from .delimiters import Delimiter
from .element_codecs import ElementCodec, resolve_codec

_SPECIALIZATIONS: dict[tuple[type[Delimiter], Any], type["AttributeList"]] = {}


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))


class AttributeList:
    """Non-empty (on the wire) ordered list of values of one element type.

    Attributes:
        delimiter: Delimiter policy of the specialized class
        element_type: Type of every value in the list
        codec: Element codec resolved for ``element_type``
    """

    delimiter: ClassVar[type[Delimiter] | None] = None
    element_type: ClassVar[Any] = None
    codec: ClassVar[ElementCodec | None] = None

    __slots__ = ("_values",)

    def __class_getitem__(cls, params: Any) -> type["AttributeList"]:
        if cls.delimiter is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("AttributeList takes exactly two parameters: [Delimiter, ElementType]")

        delimiter, element_type = params
        if not (isinstance(delimiter, type) and issubclass(delimiter, Delimiter)):
            raise TypeError(f"{delimiter!r} is not a Delimiter subclass")

        key = (delimiter, element_type)
        specialized = _SPECIALIZATIONS.get(key)
        if specialized is None:
            specialized = type(
                f"{cls.__name__}[{delimiter.__name__}, {_type_name(element_type)}]",
                (cls,),
                {
                    "__slots__": (),
                    "__module__": cls.__module__,
                    "delimiter": delimiter,
                    "element_type": element_type,
                    "codec": resolve_codec(element_type),
                },
            )
            _SPECIALIZATIONS[key] = specialized
        return specialized

    def __init__(self, values: Iterable[Any] = ()) -> None:
        if type(self).delimiter is None:
            raise TypeError(
                "AttributeList must be specialized before use, e.g. AttributeList[Semicolon, str]"
            )
        self._values = tuple(values)

    @classmethod
    def new(cls) -> "AttributeList":
        """Create an empty list. It can't be encoded until it has values."""
        return cls()

    @classmethod
    def from_sequence(cls, values: Iterable[Any]) -> "AttributeList":
        """Create a list over ``values`` in their given order.

        No validation happens here; emptiness is checked when encoding.
        """
        return cls(values)

    def values(self) -> tuple[Any, ...]:
        """Return the values in wire order."""
        return self._values

    def is_empty(self) -> bool:
        return not self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self), self._values))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values)!r})"

    # Generic serializer (pydantic)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        return pydantic_adapter.build_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, core_schema: Any, handler: Any) -> dict[str, Any]:
        return pydantic_adapter.build_json_schema(cls)

    # XML event stream

    def xml_serialize(self, writer: Any) -> None:
        xml_adapter.serialize(self, writer)

    def xml_serialize_attributes(self, attributes: Any, namespaces: Any) -> tuple[Any, Any]:
        return xml_adapter.serialize_attributes(self, attributes, namespaces)

    @classmethod
    def xml_deserialize(cls, reader: Any) -> "AttributeList":
        return xml_adapter.deserialize(cls, reader)
