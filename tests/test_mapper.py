"""Tests for entity and property identifier mapping."""

import pytest
from rdflib import Literal

from fb2wd.config import (
    ENTITY_PREFIX,
    FB_ENTITY_PREFIX,
    FB_PROPERTY_PREFIX,
    PROPERTY_PREFIX,
)
from fb2wd.errors import ErrorCode
from fb2wd.mapper import entity_mapper, property_mapper
from fb2wd.terms import IRI, Other, Var


@pytest.fixture
def entities(entity_mappings):
    return entity_mapper(entity_mappings)


@pytest.fixture
def properties(property_mappings):
    return property_mapper(property_mappings)


class TestEntityMapper:
    def test_maps_known_entity(self, entities):
        missing = set()
        result = entities.map(IRI(FB_ENTITY_PREFIX + "02mjmr"), missing)
        assert result.success
        assert result.term == IRI(ENTITY_PREFIX + "Q76")
        assert missing == set()

    def test_variable_passes_through(self, entities):
        missing = set()
        result = entities.map(Var("x"), missing)
        assert result.success
        assert result.term == Var("x")

    def test_unknown_prefix(self, entities):
        missing = set()
        result = entities.map(IRI("http://rdf.freebase.com/ns/g.11b6"), missing)
        assert result.error.code == ErrorCode.UNKNOWN_ENTITY
        assert "http://rdf.freebase.com/ns/g.11b6" in result.error.message
        assert missing == set()

    def test_missing_mapping_recorded_once(self, entities):
        missing = set()
        for _ in range(3):
            result = entities.map(IRI(FB_ENTITY_PREFIX + "0notmapped"), missing)
            assert result.error.code == ErrorCode.NO_ENTITY_MAPPING
        assert missing == {"0notmapped"}

    def test_literal_unsupported(self, entities):
        result = entities.map(Other(Literal("Barack Obama")), set())
        assert result.error.code == ErrorCode.UNSUPPORTED_NODE_TYPE

    def test_rejects_non_term(self, entities):
        with pytest.raises(TypeError):
            entities.map("http://rdf.freebase.com/ns/m.02mjmr", set())


class TestPropertyMapper:
    def test_maps_known_property(self, properties):
        result = properties.map(IRI(FB_PROPERTY_PREFIX + "people.person.spouse_s"), set())
        assert result.term == IRI(PROPERTY_PREFIX + "P26")

    def test_unknown_prefix(self, properties):
        rdf_type = "http://www.w3.org/1999/02/22-rdf-syntax-ns#type"
        result = properties.map(IRI(rdf_type), set())
        assert result.error.code == ErrorCode.UNKNOWN_PROPERTY

    def test_missing_mapping(self, properties):
        missing = set()
        result = properties.map(IRI(FB_PROPERTY_PREFIX + "film.film.directed_by"), missing)
        assert result.error.code == ErrorCode.NO_PROPERTY_MAPPING
        assert missing == {"film.film.directed_by"}

    def test_other_unsupported(self, properties):
        result = properties.map(Other(object()), set())
        assert result.error.code == ErrorCode.UNSUPPORTED_PROPERTY_TYPE

    def test_variable_passes_through(self, properties):
        assert properties.map(Var("p"), set()).term == Var("p")
