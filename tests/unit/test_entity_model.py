"""
Unit tests for the Entity value object and EntityType enum.
"""
import dataclasses

import pytest

from azner.models.entity import Entity, EntityType


class TestEntityOverlaps:
    """Tests for Entity.overlaps() method."""

    def test_no_overlap(self):
        e1 = Entity("a", 0, 5, EntityType.FIN)
        e2 = Entity("b", 10, 15, EntityType.FIN)
        assert not e1.overlaps(e2)
        assert not e2.overlaps(e1)

    def test_overlap(self):
        e1 = Entity("a", 0, 10, EntityType.VOEN)
        e2 = Entity("b", 5, 15, EntityType.PHONE)
        assert e1.overlaps(e2)
        assert e2.overlaps(e1)

    def test_contained(self):
        e1 = Entity("a", 0, 20, EntityType.IBAN)
        e2 = Entity("b", 5, 10, EntityType.FIN)
        assert e1.overlaps(e2)
        assert e2.overlaps(e1)

    def test_adjacent_no_overlap(self):
        e1 = Entity("a", 0, 5, EntityType.URL)
        e2 = Entity("b", 5, 10, EntityType.EMAIL)
        assert not e1.overlaps(e2)


class TestEntityInvariants:

    def test_zero_length_rejected(self):
        with pytest.raises(ValueError):
            Entity("", 3, 3, EntityType.PHONE)

    def test_inverted_span_rejected(self):
        with pytest.raises(ValueError):
            Entity("x", 5, 2, EntityType.PHONE)

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            Entity("x", -1, 2, EntityType.PHONE)

    def test_immutable(self):
        e = Entity("5ARPXK2", 0, 7, EntityType.FIN)
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.start = 1

    def test_equality_by_value(self):
        assert Entity("5ARPXK2", 0, 7, EntityType.FIN, True) == Entity(
            "5ARPXK2", 0, 7, EntityType.FIN, True
        )
        assert Entity("5ARPXK2", 0, 7, EntityType.FIN, True) != Entity(
            "5ARPXK2", 0, 7, EntityType.FIN, False
        )

    def test_labeled_defaults_to_false(self):
        assert Entity("info@gov.az", 0, 11, EntityType.EMAIL).labeled is False


class TestEntityOffsets:

    def test_span_length_is_byte_length(self):
        e = Entity("abc", 4, 7, EntityType.FIN)
        assert e.span_length() == 3

    def test_char_span_after_multibyte_prefix(self):
        source = "Əlaqə: +994 50 123 45 67"
        e = Entity("+994 50 123 45 67", 9, 26, EntityType.PHONE)
        assert source.encode("utf-8")[e.start:e.end].decode("utf-8") == e.text

        cs, ce = e.char_span(source)
        assert (cs, ce) == (7, 24)
        assert source[cs:ce] == e.text

    def test_char_span_ascii_matches_byte_span(self):
        source = "FIN: 5ARPXK2"
        e = Entity("5ARPXK2", 5, 12, EntityType.FIN, True)
        assert e.char_span(source) == (5, 12)


class TestEntitySerialization:

    def test_to_dict(self):
        e = Entity("10-AB-123", 2, 11, EntityType.LICENSE_PLATE)
        assert e.to_dict() == {
            "text": "10-AB-123",
            "start": 2,
            "end": 11,
            "type": "LicensePlate",
            "labeled": False,
        }

    def test_to_dict_escapes_lone_surrogates(self):
        e = Entity("https://gov.az/\udcff", 4, 20, EntityType.URL)
        assert e.text == "https://gov.az/\udcff"
        assert e.to_dict()["text"] == "https://gov.az/\\udcff"
        e.to_dict()["text"].encode("utf-8")

    def test_report_text_keeps_valid_text(self):
        e = Entity("VÖEN", 0, 5, EntityType.VOEN)
        assert e.report_text() == "VÖEN"

    def test_repr_marks_labeled(self):
        e = Entity("1402345678", 5, 15, EntityType.VOEN, True)
        assert "labeled" in repr(e)
        assert "VOEN" in repr(e)


class TestEntityType:

    def test_closed_set(self):
        assert {t.value for t in EntityType} == {
            "Phone", "Email", "URL", "IBAN", "LicensePlate", "FIN", "VOEN",
        }

    def test_str_is_name(self):
        assert str(EntityType.LICENSE_PLATE) == "LicensePlate"

    def test_lookup_by_value(self):
        assert EntityType("VOEN") is EntityType.VOEN
