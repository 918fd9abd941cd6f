"""Walk the WHERE clause of a parsed query and rewrite its identifiers."""

from rdflib.plugins.sparql.sparql import Prologue

from .errors import ConversionError, ErrorCode
from .mapper import IdentifierMapper
from .stats import ConversionStats
from .terms import IRI, classify_term

TRIPLES_BLOCK = "TriplesBlock"


def _convert_position(
    triples,
    index: int,
    mapper: IdentifierMapper,
    prologue: Prologue,
    missing: set[str],
) -> ConversionError | None:
    """Map the term at triples[index] and write a rewritten IRI back in place."""
    result = mapper.map(classify_term(triples[index], prologue), missing)
    if not result.success:
        return result.error
    if isinstance(result.term, IRI):
        triples[index] = result.term.to_node()
    return None


def convert_triples(
    triples,
    prologue: Prologue,
    entities: IdentifierMapper,
    properties: IdentifierMapper,
    stats: ConversionStats,
) -> ConversionError | None:
    """
    Convert a flat subject/predicate/object run of a triples block.

    Positions are visited subject, predicate, object for each triple in
    document order; the first failure stops the walk.
    """
    if len(triples) % 3 != 0:
        return ConversionError(ErrorCode.UNSUPPORTED, f"Malformed triples: {list(triples)!r}")

    for start in range(0, len(triples), 3):
        error = (
            _convert_position(triples, start, entities, prologue, stats.missing_entity_mappings)
            or _convert_position(triples, start + 1, properties, prologue, stats.missing_property_mappings)
            or _convert_position(triples, start + 2, entities, prologue, stats.missing_entity_mappings)
        )
        if error:
            return error
    return None


def convert_where(
    where,
    prologue: Prologue,
    entities: IdentifierMapper,
    properties: IdentifierMapper,
    stats: ConversionStats,
) -> ConversionError | None:
    """
    Convert every basic graph pattern of a WHERE clause in place.

    Args:
        where: The GroupGraphPatternSub node of the parsed query
        prologue: Query prologue used to expand prefixed names
        entities: Mapper for subject/object positions
        properties: Mapper for predicate positions
        stats: Tracker whose missing-mapping sets are extended

    Returns:
        The first ConversionError encountered, or None on success
    """
    if where.name != "GroupGraphPatternSub":
        return ConversionError(ErrorCode.UNSUPPORTED, f"Unsupported WHERE clause: {where.name}")

    for clause in where.part or []:
        if clause.name != TRIPLES_BLOCK:
            return ConversionError(ErrorCode.UNSUPPORTED, f"Unsupported clause: {clause.name}")
        for triples in clause.triples or []:
            error = convert_triples(triples, prologue, entities, properties, stats)
            if error:
                return error
    return None
