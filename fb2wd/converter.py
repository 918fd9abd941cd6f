"""Convert Freebase SPARQL queries to Wikidata SPARQL queries."""

import logging
from collections.abc import Iterable, Mapping

from .dataset import ConvertedExample, QuestionRecord
from .errors import ErrorCode
from .mapper import entity_mapper, property_mapper
from .preprocess import preprocess_sparql
from .sparql import generate_sparql, parse_sparql
from .stats import SUCCESS, ConversionStats
from .walker import convert_where

logger = logging.getLogger(__name__)


class QueryConverter:
    """Convert single queries, recording every outcome on a ConversionStats."""

    def __init__(
        self,
        entity_mappings: Mapping[str, str],
        property_mappings: Mapping[str, str],
        stats: ConversionStats | None = None,
    ):
        self.entities = entity_mapper(entity_mappings)
        self.properties = property_mapper(property_mappings)
        self.stats = stats or ConversionStats()

    def convert(self, sparql: str) -> str | None:
        """
        Convert one WebQuestions SPARQL query.

        Exactly one outcome is counted per call. Nothing is raised: any
        failure yields None.

        Args:
            sparql: Freebase SPARQL text in the dataset's dialect

        Returns:
            Wikidata SPARQL text, or None if the query could not be converted
        """
        try:
            parsed = parse_sparql(preprocess_sparql(sparql))
            if parsed.where is not None:
                error = convert_where(
                    parsed.where,
                    parsed.prologue,
                    self.entities,
                    self.properties,
                    self.stats,
                )
                if error:
                    logger.debug(f"Conversion failed: {error}")
                    self.stats.count(error.code)
                    return None
            converted = generate_sparql(parsed)
            if not converted:
                raise ValueError("Generated query is empty")
        except Exception as e:
            logger.debug(f"Conversion failed: {ErrorCode.UNKNOWN}: {e!r}")
            self.stats.count(ErrorCode.UNKNOWN)
            return None

        self.stats.count(SUCCESS)
        return converted

    def convert_example(self, example: QuestionRecord) -> ConvertedExample:
        """Keep the first parse that converts; later parses are not attempted."""
        for parse in example.parses:
            converted = self.convert(parse.sparql)
            if converted:
                return ConvertedExample(example.raw_question, converted)
        return ConvertedExample(example.raw_question)


def convert_examples(
    examples: Iterable[QuestionRecord],
    converter: QueryConverter,
) -> list[ConvertedExample]:
    """Convert a batch of examples, preserving input order."""
    return [converter.convert_example(example) for example in examples]
