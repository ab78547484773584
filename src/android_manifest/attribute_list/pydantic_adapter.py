"""Pydantic integration for delimited attribute lists.

A model field typed ``AttributeList[Semicolon, str]`` validates from a
delimited string and serializes back to one, in both python and JSON mode:

    >>> class Provider(BaseModel):
    ...     authorities: AttributeList[Semicolon, str]
    >>> Provider(authorities="com.a;com.b").model_dump()
    {'authorities': 'com.a;com.b'}

Codec failures are reported as pydantic errors with stable error types so
they can be told apart in ``ValidationError.errors()``.
"""

from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError, core_schema

from ..shared.exceptions import ElementDecodeError, EmptyInputError
from .wire import join_values, parse_values

if TYPE_CHECKING:
    from .container import AttributeList


def build_core_schema(cls: type["AttributeList"]) -> core_schema.CoreSchema:
    """Build the pydantic core schema of a specialized list class."""

    def validate(value: Any) -> "AttributeList":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "attribute_list_type",
                "expected a {delimiter}-delimited string, got {type_name}",
                {"delimiter": cls.delimiter.symbol(), "type_name": type(value).__name__},
            )
        try:
            return parse_values(cls, value)
        except EmptyInputError as e:
            raise PydanticCustomError("attribute_list_empty_input", e.message) from e
        except ElementDecodeError as e:
            raise PydanticCustomError(
                "attribute_list_element_decode",
                "invalid value '{fragment}' at position {position}: {reason}",
                {"fragment": e.fragment, "position": e.position, "reason": e.reason},
            ) from e

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            join_values,
            return_schema=core_schema.str_schema(),
        ),
    )


def build_json_schema(cls: type["AttributeList"]) -> dict[str, Any]:
    """JSON schema of a specialized list: a single delimited string."""
    symbol = cls.delimiter.symbol()
    return {
        "type": "string",
        "minLength": 1,
        "description": f"One or more values in the format 'value1' or 'value1{symbol}value2{symbol}value3'",
    }
