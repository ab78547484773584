"""Wire format of delimited attribute lists.

Both serializer adapters go through these two functions, so the pydantic
and XML representations of a list are always the same string:

    value1<D>value2<D>...valueN

Whitespace handling is controlled by ``Settings.whitespace_mode``. The
default ``strip_all`` removes every whitespace character before splitting,
which matches existing manifests but means values can't contain spaces.
``trim`` only strips around delimiters and at the ends.
"""

from typing import TYPE_CHECKING, Any

from aws_lambda_powertools import Logger

from ..shared.config import get_settings
from ..shared.exceptions import ElementDecodeError, EmptyInputError, EmptyListError

if TYPE_CHECKING:
    from .container import AttributeList

logger = Logger(service="attribute-list", level=get_settings().log_level)


def _describe(cls: type["AttributeList"]) -> dict[str, Any]:
    return {
        "delimiter": cls.delimiter.symbol(),
        "element_type": getattr(cls.element_type, "__name__", repr(cls.element_type)),
    }


def join_values(attribute_list: "AttributeList") -> str:
    """Encode a list as one delimited string.

    Args:
        attribute_list: Specialized list to encode

    Returns:
        Values encoded by the element codec and joined with the delimiter

    Raises:
        EmptyListError: If the list has no values
        TypeError, ValueError: Propagated unchanged from the element codec
    """
    cls = type(attribute_list)
    if attribute_list.is_empty():
        raise EmptyListError(_describe(cls))

    # Encode every value before joining so a failure leaves no output behind
    encoded = [cls.codec.encode(value) for value in attribute_list.values()]
    wire = cls.delimiter.symbol().join(encoded)

    logger.debug("Encoded value list", extra={"count": len(encoded), **_describe(cls)})
    return wire


def split_fragments(text: str, symbol: str, whitespace_mode: str | None = None) -> list[str]:
    """Split a delimited string into fragments.

    Args:
        text: Raw wire string
        symbol: Delimiter symbol, matched literally
        whitespace_mode: 'strip_all' or 'trim'; defaults to the configured mode

    Returns:
        Fragments in wire order, or an empty list if nothing but
        whitespace was given
    """
    mode = whitespace_mode or get_settings().whitespace_mode
    if mode == "strip_all":
        stripped = "".join(text.split())
        if not stripped:
            return []
        return stripped.split(symbol)

    if not text.strip():
        return []
    return [fragment.strip() for fragment in text.split(symbol)]


def parse_values(
    cls: type["AttributeList"],
    text: str,
    whitespace_mode: str | None = None,
) -> "AttributeList":
    """Decode a delimited string into a new list of class ``cls``.

    Args:
        cls: Specialized list class to build
        text: Wire string
        whitespace_mode: Optional override of the configured whitespace mode

    Returns:
        New list holding the decoded values in wire order

    Raises:
        EmptyInputError: If the string is empty or only whitespace
        ElementDecodeError: If any fragment fails to decode
    """
    fragments = split_fragments(text, cls.delimiter.symbol(), whitespace_mode)
    if not fragments:
        raise EmptyInputError(_describe(cls))

    values = []
    for position, fragment in enumerate(fragments):
        try:
            values.append(cls.codec.decode(fragment))
        except (TypeError, ValueError) as e:
            logger.warning(
                "Failed to decode value list fragment",
                extra={"fragment": fragment, "position": position, **_describe(cls)},
            )
            raise ElementDecodeError(fragment, position, str(e), _describe(cls)) from e

    logger.debug("Decoded value list", extra={"count": len(values), **_describe(cls)})
    return cls.from_sequence(values)
