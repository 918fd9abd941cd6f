import pytest

from fb2wd.converter import QueryConverter


@pytest.fixture
def entity_mappings():
    return {
        "02mjmr": "Q76",
        "025s5v9": "Q13133",
    }


@pytest.fixture
def property_mappings():
    return {
        "people.person.spouse_s": "P26",
        "people.marriage.spouse": "P26",
        "people.person.place_of_birth": "P19",
    }


@pytest.fixture
def webqsp_sparql():
    """A WebQuestionsSP parse, fixed answer filters included."""
    return (
        "PREFIX ns: <http://rdf.freebase.com/ns/>\n"
        "SELECT DISTINCT ?x\n"
        "WHERE {\n"
        "FILTER (?x != ns:m.02mjmr)\n"
        "FILTER (!isLiteral(?x) OR lang(?x) = '' OR langMatches(lang(?x), 'en'))\n"
        "ns:m.02mjmr ns:people.person.place_of_birth ?x .\n"
        "}\n"
    )


@pytest.fixture
def converter(entity_mappings, property_mappings):
    return QueryConverter(entity_mappings, property_mappings)
