"""Conversion error codes and error values."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Reasons a query could not be converted."""
    # Entity positions (subject, object)
    UNKNOWN_ENTITY = "UnknownEntity"
    NO_ENTITY_MAPPING = "NoEntityMapping"
    UNSUPPORTED_NODE_TYPE = "UnsupportedNodeType"
    # Relation position (predicate)
    UNKNOWN_PROPERTY = "UnknownProperty"
    NO_PROPERTY_MAPPING = "NoPropertyMapping"
    UNSUPPORTED_PROPERTY_TYPE = "UnsupportedPropertyType"
    # WHERE clause shape other than a basic graph pattern
    UNSUPPORTED = "Unsupported"
    # Parser/generator failures and anything else unexpected
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConversionError:
    """A typed conversion failure, returned rather than raised."""
    code: ErrorCode
    message: str = ""

    def __str__(self) -> str:
        if self.message:
            return f"{self.code}: {self.message}"
        return str(self.code)
