"""Serialize an rdflib SPARQL parse tree back into query text.

Only the shapes that survive conversion are written: SELECT and ASK
queries whose WHERE clause is a basic graph pattern, with the usual
solution modifiers (GROUP BY, HAVING, ORDER BY, LIMIT, OFFSET). IRIs are
written in full, so the output carries no PREFIX declarations.
"""

from pyparsing import ParseResults
from rdflib.namespace import XSD
from rdflib.plugins.sparql.parserutils import CompValue
from rdflib.plugins.sparql.sparql import Prologue
from rdflib.term import BNode, Literal, URIRef, Variable

from .terms import unwrap_path

PLAIN_DATATYPES = (XSD.integer, XSD.decimal, XSD.double, XSD.boolean)

# Fixed operator, or None where the node carries its own op list
BINARY_EXPRESSIONS = {
    "ConditionalOrExpression": "||",
    "ConditionalAndExpression": "&&",
    "AdditiveExpression": None,
    "MultiplicativeExpression": None,
}

UNARY_EXPRESSIONS = {
    "UnaryNot": "!",
    "UnaryMinus": "-",
    "UnaryPlus": "+",
}

AGGREGATE_NAMES = {
    "Aggregate_Count": "COUNT",
    "Aggregate_Sum": "SUM",
    "Aggregate_Min": "MIN",
    "Aggregate_Max": "MAX",
    "Aggregate_Avg": "AVG",
    "Aggregate_Sample": "SAMPLE",
    "Aggregate_GroupConcat": "GROUP_CONCAT",
}


class SparqlSerializer:
    """Write a parsed query out as SPARQL text."""

    def __init__(self, prologue: Prologue):
        self.prologue = prologue

    def serialize(self, query: CompValue) -> str:
        if query.name == "SelectQuery":
            head = self._select_clause(query)
        elif query.name == "AskQuery":
            head = "ASK"
        else:
            raise NotImplementedError(f"Cannot serialize {query.name}")

        if query.valuesClause is not None:
            raise NotImplementedError("Cannot serialize VALUES")

        lines = [head]
        lines.extend(self._dataset_clause(c) for c in query.datasetClause or [])
        lines.append("WHERE " + self._group(query.where))
        lines.extend(self._solution_modifiers(query))
        return "\n".join(lines)

    # Query form

    def _select_clause(self, query: CompValue) -> str:
        parts = ["SELECT"]
        if query.modifier:
            parts.append(str(query.modifier))
        if query.projection:
            for projection in query.projection:
                if projection.var is not None:
                    parts.append(self.term(projection.var))
                else:
                    parts.append(f"({self.expression(projection.expr)} AS {self.term(projection.evar)})")
        else:
            parts.append("*")
        return " ".join(parts)

    def _dataset_clause(self, clause: CompValue) -> str:
        if clause.named is not None:
            return f"FROM NAMED {self.term(clause.named)}"
        return f"FROM {self.term(clause.default)}"

    # Graph pattern

    def _group(self, where: CompValue) -> str:
        if where.name != "GroupGraphPatternSub":
            raise NotImplementedError(f"Cannot serialize {where.name}")

        lines = ["{"]
        for clause in where.part or []:
            if clause.name != "TriplesBlock":
                raise NotImplementedError(f"Cannot serialize {clause.name}")
            for triples in clause.triples or []:
                for start in range(0, len(triples), 3):
                    s, p, o = (self.term(t) for t in triples[start:start + 3])
                    lines.append(f"  {s} {p} {o} .")
        lines.append("}")
        return "\n".join(lines)

    # Solution modifiers

    def _solution_modifiers(self, query: CompValue) -> list[str]:
        lines = []
        if query.groupby is not None:
            conditions = [self._group_condition(c) for c in query.groupby.condition]
            lines.append("GROUP BY " + " ".join(conditions))
        if query.having is not None:
            conditions = [f"({self.expression(c)})" for c in query.having.condition]
            lines.append("HAVING " + " ".join(conditions))
        if query.orderby is not None:
            conditions = [self._order_condition(c) for c in query.orderby.condition]
            lines.append("ORDER BY " + " ".join(conditions))
        if query.limitoffset is not None:
            if query.limitoffset.limit is not None:
                lines.append(f"LIMIT {query.limitoffset.limit}")
            if query.limitoffset.offset is not None:
                lines.append(f"OFFSET {query.limitoffset.offset}")
        return lines

    def _group_condition(self, condition) -> str:
        if isinstance(condition, Variable):
            return self.term(condition)
        if isinstance(condition, CompValue) and condition.name == "GroupAs":
            if condition.var is not None:
                return f"({self.expression(condition.expr)} AS {self.term(condition.var)})"
            return f"({self.expression(condition.expr)})"
        return self.expression(condition)

    def _order_condition(self, condition) -> str:
        if isinstance(condition, CompValue) and condition.name == "OrderCondition":
            if condition.order:
                return f"{condition.order}({self.expression(condition.expr)})"
            condition = condition.expr
        if isinstance(condition, Variable):
            return self.term(condition)
        return f"({self.expression(condition)})"

    # Terms and expressions

    def term(self, node) -> str:
        node = unwrap_path(node)
        if isinstance(node, CompValue) and node.name in ("pname", "literal"):
            node = self.prologue.absolutize(node)
        if isinstance(node, Variable):
            return f"?{node}"
        if isinstance(node, Literal):
            if node.datatype in PLAIN_DATATYPES and node.language is None:
                return str(node)
            return node.n3()
        if isinstance(node, (URIRef, BNode)):
            return node.n3()
        raise NotImplementedError(f"Cannot serialize term {node!r}")

    def expression(self, node) -> str:
        if not isinstance(node, CompValue) or node.name in ("pname", "literal"):
            return self.term(node)

        name = node.name
        if name in BINARY_EXPRESSIONS:
            return self._binary(node, BINARY_EXPRESSIONS[name])
        if name == "RelationalExpression":
            return self._relational(node)
        if name in UNARY_EXPRESSIONS:
            return UNARY_EXPRESSIONS[name] + self.expression(node.expr)
        if name in AGGREGATE_NAMES:
            return self._aggregate(node)
        if name == "Function":
            return self._call(self.term(node.iri), node.expr, node.distinct)
        if name.startswith("Builtin_") and name not in ("Builtin_EXISTS", "Builtin_NOTEXISTS"):
            args = [value for value in node.values() if not _is_empty(value)]
            return self._call(name[len("Builtin_"):], args)
        raise NotImplementedError(f"Cannot serialize expression {name}")

    def _binary(self, node: CompValue, operator: str | None) -> str:
        others = _as_list(node.other)
        if not others:
            return self.expression(node.expr)
        operators = [operator] * len(others) if operator else [str(op) for op in _as_list(node.op)]
        text = self.expression(node.expr)
        for op, other in zip(operators, others):
            text += f" {op} {self.expression(other)}"
        return f"({text})"

    def _relational(self, node: CompValue) -> str:
        if node.op is None:
            return self.expression(node.expr)
        op = str(node.op)
        if op in ("IN", "NOT IN"):
            members = ", ".join(self.expression(e) for e in _as_list(node.other))
            return f"({self.expression(node.expr)} {op} ({members}))"
        return f"({self.expression(node.expr)} {op} {self.expression(node.other)})"

    def _aggregate(self, node: CompValue) -> str:
        distinct = "DISTINCT " if node.distinct else ""
        if isinstance(node.vars, str) and node.vars == "*":
            argument = "*"
        else:
            argument = self.expression(node.vars)
        if node.separator is not None:
            argument += f" ; SEPARATOR={Literal(str(node.separator)).n3()}"
        return f"{AGGREGATE_NAMES[node.name]}({distinct}{argument})"

    def _call(self, function: str, args, distinct=None) -> str:
        rendered = [self.expression(arg) for arg in _flatten(args)]
        prefix = "DISTINCT " if distinct else ""
        return f"{function}({prefix}{', '.join(rendered)})"


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, (list, ParseResults)):
        return list(value)
    return [value]


def _flatten(values) -> list:
    flat = []
    for value in _as_list(values):
        if isinstance(value, (list, ParseResults)):
            flat.extend(value)
        else:
            flat.append(value)
    return flat


def _is_empty(value) -> bool:
    return value is None or (isinstance(value, (list, ParseResults)) and len(value) == 0)
