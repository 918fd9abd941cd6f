"""Tests for conversion outcome tracking."""

from fb2wd.errors import ConversionError, ErrorCode
from fb2wd.stats import SUCCESS, ConversionStats


class TestConversionStats:
    def test_count(self):
        stats = ConversionStats()
        stats.count(SUCCESS)
        stats.count(ErrorCode.NO_ENTITY_MAPPING)
        stats.count(ErrorCode.NO_ENTITY_MAPPING)
        assert stats.counter == {"success": 1, "NoEntityMapping": 2}
        assert stats.total == 3

    def test_merge(self):
        first = ConversionStats()
        first.count(SUCCESS)
        first.missing_entity_mappings.update({"a", "b"})
        second = ConversionStats()
        second.count(SUCCESS)
        second.count(ErrorCode.UNSUPPORTED)
        second.missing_entity_mappings.add("b")
        second.missing_property_mappings.add("film.film.directed_by")

        merged = first.merge(second)

        assert merged is first
        assert first.counter == {"success": 2, "Unsupported": 1}
        assert first.missing_entity_mappings == {"a", "b"}
        assert first.missing_property_mappings == {"film.film.directed_by"}

    def test_to_dict(self):
        stats = ConversionStats()
        stats.count(ErrorCode.UNKNOWN)
        stats.missing_property_mappings.add("x.y")
        assert stats.to_dict() == {
            "counter": {"Unknown": 1},
            "total": 1,
            "missing_entity_mappings": 0,
            "missing_property_mappings": 1,
        }


class TestConversionError:
    def test_str(self):
        error = ConversionError(ErrorCode.UNKNOWN_ENTITY, "Not recognized IRI: http://example.org/x")
        assert str(error) == "UnknownEntity: Not recognized IRI: http://example.org/x"
        assert str(ConversionError(ErrorCode.UNSUPPORTED)) == "Unsupported"
