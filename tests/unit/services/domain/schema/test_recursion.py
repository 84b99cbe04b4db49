#!/usr/bin/env python3

from xml.etree.ElementTree import Element

import pytest

from parsexsd.services.domain.schema.records import Direction, ElementRecord, FlattenResult
from parsexsd.services.domain.schema.recursion import EMPTY_PATH, would_cycle


def _complex_type(name: str = None) -> Element:
    return Element("complexType", {"name": name} if name else {})


class TestRecursionPath:
    """Test suite for per-branch type paths"""

    def test_extend_does_not_mutate(self):
        """Sibling branches never see each other's entries"""
        a, b, c = _complex_type("A"), _complex_type("B"), _complex_type("C")
        parent = EMPTY_PATH.extend(a)
        left = parent.extend(b)
        right = parent.extend(c)

        assert b in left and b not in right
        assert len(parent) == 1
        assert str(left) == "A;B"

    def test_would_cycle(self):
        person, company = _complex_type("PersonType"), _complex_type("CompanyType")
        path = EMPTY_PATH.extend(person).extend(company)

        assert would_cycle(path, person)
        assert not would_cycle(path, _complex_type("AddressType"))
        assert not would_cycle(EMPTY_PATH, person)

    def test_definitions_compare_by_identity(self):
        """Anonymous definitions are distinct even when they look alike"""
        outer, inner = _complex_type(), _complex_type()
        path = EMPTY_PATH.extend(outer)

        assert would_cycle(path, outer)
        assert not would_cycle(path, inner)
        assert str(path) == "(anonymous)"


class TestElementRecord:
    """Test suite for flattened element records"""

    def test_complex_and_simple_are_exclusive(self):
        with pytest.raises(ValueError):
            ElementRecord(sequence=0, name="X", type="T", is_complex=True, is_simple=True)

    def test_mark_recursive_once(self):
        record = ElementRecord(sequence=3, name="Child", type="NodeType", is_complex=True,
                               description="Child node")
        record.mark_recursive("NodeType")
        record.mark_recursive("Other")

        assert record.is_recursive
        assert record.description == 'Recursion of complex type "NodeType"...'

    def test_key_and_defaults(self):
        record = ElementRecord(sequence=7, name="Field", type="xs:string")

        assert record.key == (7, "Field", "xs:string", None)
        assert record.direction == Direction.IN
        assert record.effective_min_occurs == "1"
        assert record.effective_max_occurs == "1"
        assert not record.is_foreign

    def test_result_sequence_counter(self):
        """Each result numbers its own records from zero"""
        result = FlattenResult()
        first = result.add_element(name="A", type=None)
        second = result.add_element(name="B", type=None)

        assert (first.sequence, second.sequence) == (0, 1)
        assert FlattenResult().add_element(name="C", type=None).sequence == 0
