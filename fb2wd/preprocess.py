"""Normalize WebQuestions SPARQL into text the SPARQL grammar accepts."""

import re

from .config import XSD_PREFIX_DECL

# Result must not be an entity mentioned in the question
MENTIONED_ENTITY_FILTER = re.compile(r"FILTER \(\?x \!= ns:m.[^)]+\)")

# Result must be an entity, or a literal without language tag or in English
LANGUAGE_FILTERS = (
    "FILTER (!isLiteral(?x) OR lang(?x) = '' OR langMatches(lang(?x), 'en'))",
    "FILTER (!isLiteral(?x) OR (lang(?x) = '' OR lang(?x) = 'en'))",
)

NEWLINE_RUN = re.compile(r"[\n]+")

HAVING_WITHOUT_PARENS = "Having COUNT(?city) = 2"
HAVING_WITH_PARENS = "Having (COUNT(?city) = 2)"


def preprocess_sparql(sparql: str) -> str:
    """
    Rewrite a WebQuestions SPARQL string into grammar-valid SPARQL.

    The dataset omits the xsd prefix, double-encodes newlines, uses `OR`
    instead of `||` and carries fixed answer filters that have nothing to
    do with the graph pattern. The rules are exact matches for that
    dataset; anything they miss fails later at parse time.

    Args:
        sparql: SPARQL text as stored in the dataset

    Returns:
        Preprocessed SPARQL text
    """
    sparql = XSD_PREFIX_DECL + sparql
    sparql = sparql.replace("\\n", "\n")
    sparql = MENTIONED_ENTITY_FILTER.sub("", sparql)
    for language_filter in LANGUAGE_FILTERS:
        sparql = sparql.replace(language_filter, "", 1)
    sparql = NEWLINE_RUN.sub("\n", sparql)
    sparql = sparql.replace(" OR ", "||")
    sparql = sparql.replace(HAVING_WITHOUT_PARENS, HAVING_WITH_PARENS, 1)
    return sparql
