"""Map Freebase entity and property IRIs to Wikidata IRIs."""

from collections.abc import Mapping
from dataclasses import dataclass

from .config import (
    ENTITY_PREFIX,
    FB_ENTITY_PREFIX,
    FB_PROPERTY_PREFIX,
    PROPERTY_PREFIX,
)
from .errors import ConversionError, ErrorCode
from .terms import IRI, Other, Term, Var


@dataclass
class MappingResult:
    """Result of mapping a single term."""
    term: Term
    error: ConversionError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class IdentifierMapper:
    """Rewrites IRIs of one kind (entity or property) using a mapping table."""

    def __init__(
        self,
        legacy_prefix: str,
        successor_prefix: str,
        mappings: Mapping[str, str],
        unknown_code: ErrorCode,
        missing_code: ErrorCode,
        unsupported_code: ErrorCode,
    ):
        self.legacy_prefix = legacy_prefix
        self.successor_prefix = successor_prefix
        self.mappings = mappings
        self.unknown_code = unknown_code
        self.missing_code = missing_code
        self.unsupported_code = unsupported_code

    def map(self, term: Term, missing: set[str]) -> MappingResult:
        """
        Map one term.

        Args:
            term: The classified term at an entity or property position
            missing: Set collecting legacy ids that have no mapping entry

        Returns:
            MappingResult holding the (possibly rewritten) term, or the error
        """
        if isinstance(term, Var):
            return MappingResult(term)

        if isinstance(term, IRI):
            if not term.value.startswith(self.legacy_prefix):
                return MappingResult(term, ConversionError(
                    self.unknown_code, f"Not recognized IRI: {term.value}"
                ))
            legacy_id = term.value[len(self.legacy_prefix):]
            if legacy_id not in self.mappings:
                missing.add(legacy_id)
                return MappingResult(term, ConversionError(
                    self.missing_code, f"IRI missing in the mapping: {term.value}"
                ))
            return MappingResult(IRI(self.successor_prefix + self.mappings[legacy_id]))

        if isinstance(term, Other):
            return MappingResult(term, ConversionError(
                self.unsupported_code, f"Not supported node: {term.node!r}"
            ))

        raise TypeError(f"Expected IRI, Var or Other, got {type(term).__name__}")


def entity_mapper(mappings: Mapping[str, str]) -> IdentifierMapper:
    """Mapper for subject and object positions."""
    return IdentifierMapper(
        FB_ENTITY_PREFIX,
        ENTITY_PREFIX,
        mappings,
        unknown_code=ErrorCode.UNKNOWN_ENTITY,
        missing_code=ErrorCode.NO_ENTITY_MAPPING,
        unsupported_code=ErrorCode.UNSUPPORTED_NODE_TYPE,
    )


def property_mapper(mappings: Mapping[str, str]) -> IdentifierMapper:
    """Mapper for predicate positions."""
    return IdentifierMapper(
        FB_PROPERTY_PREFIX,
        PROPERTY_PREFIX,
        mappings,
        unknown_code=ErrorCode.UNKNOWN_PROPERTY,
        missing_code=ErrorCode.NO_PROPERTY_MAPPING,
        unsupported_code=ErrorCode.UNSUPPORTED_PROPERTY_TYPE,
    )
