"""Triple-pattern terms as seen by the identifier mapper."""

from dataclasses import dataclass

from rdflib.plugins.sparql.parserutils import CompValue
from rdflib.plugins.sparql.sparql import Prologue
from rdflib.term import URIRef, Variable


@dataclass(frozen=True)
class IRI:
    """An absolute IRI (prefixed names already expanded)."""
    value: str

    def to_node(self) -> URIRef:
        return URIRef(self.value)


@dataclass(frozen=True)
class Var:
    """A query variable."""
    name: str


@dataclass(frozen=True)
class Other:
    """Any other parse-tree node: literals, blank nodes, property paths..."""
    node: object


Term = IRI | Var | Other


def unwrap_path(node):
    """
    Reduce a trivial property path to the IRI it wraps.

    The parser wraps every predicate in PathAlternative/PathSequence/PathElt
    nodes. A path with a single element and no modifier is just its IRI;
    anything else is returned as the path node it is.
    """
    while isinstance(node, CompValue):
        if node.name in ("PathAlternative", "PathSequence") and len(node.part) == 1:
            node = node.part[0]
        elif node.name == "PathElt" and not node.mod:
            node = node.part
        else:
            break
    return node


def classify_term(node, prologue: Prologue) -> Term:
    """Classify a parse-tree node occurring in a triple pattern."""
    node = unwrap_path(node)
    if isinstance(node, Variable):
        return Var(str(node))
    if isinstance(node, URIRef):
        return IRI(str(prologue.absolutize(node)))
    if isinstance(node, CompValue) and node.name == "pname":
        return IRI(str(prologue.absolutize(node)))
    return Other(node)
