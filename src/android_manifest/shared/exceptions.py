"""Custom exception hierarchy for the manifest schema library.

All library exceptions inherit from ManifestSchemaError, enabling
consistent error handling and structured error reporting.

Exception hierarchy:
    ManifestSchemaError (base)
    ├── AttributeListError
    │   ├── EmptyListError
    │   ├── EmptyInputError
    │   ├── ElementDecodeError
    │   └── MalformedStreamError
    ├── XmlSyntaxError
    ├── XmlWriteError
    └── ManifestMappingError
"""

from typing import Any


class ManifestSchemaError(Exception):
    """Base exception for all library errors.

    Provides structured error information suitable for logging
    and for reporting back to callers.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for filtering
        details: Additional context as key-value pairs
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize library error.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (e.g., 'EMPTY_LIST')
            details: Additional context for debugging
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for JSON serialization.

        Returns:
            Dictionary with error_code, error_message, and details.
            Note: Uses 'error_message' instead of 'message' to avoid conflicts
            with Python's logging module which reserves 'message' internally.
        """
        return {
            "error_code": self.error_code,
            "error_message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.error_code!r}, {self.message!r})"


class AttributeListError(ManifestSchemaError):
    """Raised when a delimited attribute list can't be encoded or decoded."""


class EmptyListError(AttributeListError):
    """Raised when encoding a list with zero values.

    Manifest attributes backed by a value list must name at least one value,
    so an empty list is never written as an empty string.
    """

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("a value list can't be empty", "EMPTY_LIST", details)


class EmptyInputError(AttributeListError):
    """Raised when decoding a value list from an empty string."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "there is no default value list; at least one value must be specified",
            "EMPTY_INPUT",
            details,
        )


class ElementDecodeError(AttributeListError):
    """Raised when one fragment of a delimited string fails to decode.

    The whole list is rejected; no partially decoded list is returned.
    """

    def __init__(
        self,
        fragment: str,
        position: int,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize element decode error.

        Args:
            fragment: The offending fragment after whitespace handling
            position: 0-based index of the fragment in the list
            reason: Message reported by the element codec
            details: Additional context (delimiter, element type)
        """
        error_details = {
            "fragment": fragment,
            "position": position,
            "reason": reason,
            **(details or {}),
        }
        message = f"invalid value {fragment!r} at position {position}: {reason}"
        super().__init__(message, "ELEMENT_DECODE_ERROR", error_details)
        self.fragment = fragment
        self.position = position
        self.reason = reason


class MalformedStreamError(AttributeListError):
    """Raised when an XML event stream holds no usable character data.

    This covers:
    - An unexpected event before any character data
    - The stream ending without character data
    """

    def __init__(
        self,
        message: str = "unable to parse attribute",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, "MALFORMED_STREAM", details)


class XmlSyntaxError(ManifestSchemaError):
    """Raised when XML text can't be parsed into events."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "XML_SYNTAX_ERROR", details)


class XmlWriteError(ManifestSchemaError):
    """Raised when a written event sequence can't be rendered as XML.

    This covers:
    - End element without a matching start element
    - Elements left open when rendering
    - Events that can't appear at the current position
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "XML_WRITE_ERROR", details)


class ManifestMappingError(ManifestSchemaError):
    """Raised when a manifest element can't be mapped to or from XML.

    This covers:
    - Unexpected root element
    - Missing required attributes or child elements
    - Invalid attribute values
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "MANIFEST_MAPPING_ERROR", details)
