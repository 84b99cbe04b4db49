#!/usr/bin/env python3

import pytest

from parsexsd.services.domain.schema.classifier import classify_type, occurrence_labels


class TestClassifyType:
    """Test suite for primitive type categories"""

    @pytest.mark.parametrize("type_ref,expected", [
        ("xs:int", "INTEGER"),
        ("xs:integer", "INTEGER"),
        ("xs:double", "DOUBLE"),
        ("xs:base64Binary", "BASE64"),
        ("xs:date", "DATE"),
        ("xs:dateTime", "DATE+TIME"),
        ("xs:string", "STRING"),
    ])
    def test_known_categories(self, type_ref, expected):
        assert classify_type(type_ref, "xs") == expected

    def test_prefix_must_match_document(self):
        """Only the document's XMLSchema prefix is recognised"""
        assert classify_type("xs:int", "xsd") == "xs:int"
        assert classify_type("xsd:int", "xsd") == "INTEGER"

    def test_unknown_type_is_returned_unchanged(self):
        assert classify_type("xs:boolean", "xs") == "xs:boolean"
        assert classify_type("tns:CodeType", "xs") == "tns:CodeType"

    def test_missing_type(self):
        assert classify_type(None, "xs") == ""

    def test_unprefixed_schema(self):
        """Documents without an XMLSchema prefix use bare names"""
        assert classify_type("date", "") == "DATE"


class TestOccurrenceLabels:
    """Test suite for mandatory/multiplicity labels"""

    @pytest.mark.parametrize("min_occurs,max_occurs,expected", [
        ("1", "1", ("Y", "1")),
        ("0", "1", ("O", "0..1")),
        ("0", "unbounded", ("O", "0..N")),
        ("1", "unbounded", ("Y", "1..N")),
    ])
    def test_table(self, min_occurs, max_occurs, expected):
        assert occurrence_labels(min_occurs, max_occurs) == expected

    def test_absent_bounds_default_to_one(self):
        assert occurrence_labels(None, None) == ("Y", "1")
        assert occurrence_labels("0", None) == ("O", "0..1")
        assert occurrence_labels(None, "unbounded") == ("Y", "1..N")

    def test_other_combinations_are_blank(self):
        assert occurrence_labels("2", "5") == ("", "")
        assert occurrence_labels("0", "3") == ("", "")
