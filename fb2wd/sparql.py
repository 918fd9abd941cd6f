"""Parse SPARQL text into an rdflib query tree and write it back out."""

from dataclasses import dataclass

from pyparsing import ParseResults
from rdflib.plugins.sparql.algebra import translatePrologue
from rdflib.plugins.sparql.parser import parseQuery
from rdflib.plugins.sparql.parserutils import CompValue
from rdflib.plugins.sparql.sparql import Prologue

from .serializer import SparqlSerializer


@dataclass
class ParsedQuery:
    """A parsed SELECT/ASK query: the rdflib parse tree plus its prologue."""
    tree: ParseResults
    prologue: Prologue

    @property
    def query(self) -> CompValue:
        return self.tree[1]

    @property
    def where(self) -> CompValue | None:
        return self.query.where


def parse_sparql(sparql: str) -> ParsedQuery:
    """Parse SPARQL text. Raises pyparsing's ParseException on bad syntax."""
    tree = parseQuery(sparql)
    return ParsedQuery(tree=tree, prologue=translatePrologue(tree[0], None))


def generate_sparql(parsed: ParsedQuery) -> str:
    """
    Generate SPARQL text from a (possibly rewritten) parse tree.

    Raises NotImplementedError for query forms and patterns the serializer
    does not write.
    """
    return SparqlSerializer(parsed.prologue).serialize(parsed.query)
