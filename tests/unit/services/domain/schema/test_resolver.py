#!/usr/bin/env python3

import pytest

from parsexsd.services.domain.schema.registry import XS, load_from_bytes
from parsexsd.services.domain.schema.resolver import (
    NodeKind,
    extension_base,
    is_complex_type,
    is_simple_type,
    member_nodes,
    resolve,
    split_qname,
)
from tests.fixtures.xsd_fixtures import (
    IMPORTING_XSD,
    INLINE_XSD,
    NESTED_INLINE_EXTENSION_XSD,
    ORDER_XSD,
)

ORDER_NS = "http://example.com/order"


class TestResolve:
    """Test suite for node classification"""

    @pytest.fixture
    def order_doc(self):
        return load_from_bytes(ORDER_XSD, "order.xsd")

    def test_named_complex_type(self, order_doc):
        """Elements typed with a named complexType are COMPLEX"""
        node = order_doc.top_level_element("OrderRequest")
        resolved = resolve(order_doc, node, ORDER_NS)

        assert resolved.kind == NodeKind.COMPLEX
        assert resolved.type_name == "tns:OrderType"
        assert resolved.definition is order_doc.complex_type("OrderType")
        assert is_complex_type(order_doc, node, ORDER_NS)
        assert not is_simple_type(order_doc, node, ORDER_NS)

    def test_named_simple_type(self, order_doc):
        """Elements typed with a named simpleType are SIMPLE"""
        status = member_nodes(order_doc.complex_type("OrderType"))[1]
        resolved = resolve(order_doc, status, ORDER_NS)

        assert resolved.kind == NodeKind.SIMPLE
        assert is_simple_type(order_doc, status, ORDER_NS)
        assert not is_complex_type(order_doc, status, ORDER_NS)

    def test_builtin_type_is_primitive(self, order_doc):
        """Built-in XSD types resolve to PRIMITIVE"""
        order_id = member_nodes(order_doc.complex_type("OrderType"))[0]
        assert resolve(order_doc, order_id, ORDER_NS).kind == NodeKind.PRIMITIVE

    def test_group_reference(self, order_doc):
        """xs:group ref resolves to the group definition"""
        group_ref = member_nodes(order_doc.complex_type("OrderType"))[3]
        resolved = resolve(order_doc, group_ref, ORDER_NS)

        assert resolved.kind == NodeKind.GROUP_REF
        assert resolved.definition is order_doc.group("AuditGroup")

    def test_inline_types(self):
        """Anonymous types get a synthesized name"""
        doc = load_from_bytes(INLINE_XSD, "inline.xsd")
        envelope = doc.top_level_element("Envelope")
        resolved = resolve(doc, envelope, "")

        assert resolved.kind == NodeKind.COMPLEX
        assert resolved.type_name == "Envelope_anonymous"

        priority = member_nodes(resolved.definition)[0]
        assert resolve(doc, priority, "").kind == NodeKind.SIMPLE

    def test_inline_type_of_top_level_declaration(self):
        """An untyped local element uses the inline type of a top-level namesake"""
        content = b"""<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
          <xs:element name="Holder">
            <xs:complexType><xs:sequence><xs:element name="Address"/></xs:sequence></xs:complexType>
          </xs:element>
          <xs:element name="Address">
            <xs:complexType><xs:sequence><xs:element name="Street" type="xs:string"/></xs:sequence></xs:complexType>
          </xs:element>
        </xs:schema>"""
        doc = load_from_bytes(content, "holder.xsd")
        holder_type = resolve(doc, doc.top_level_element("Holder"), "").definition
        local_address = member_nodes(holder_type)[0]

        resolved = resolve(doc, local_address, "")

        assert resolved.kind == NodeKind.COMPLEX
        assert resolved.type_name == "Address_anonymous"

    def test_foreign_type_is_primitive(self):
        """Types qualified with an imported prefix are not looked up locally"""
        content = b"""<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"
                       xmlns:ext="urn:ext" xmlns:tns="urn:app" targetNamespace="urn:app">
          <xs:element name="A" type="ext:SharedType"/>
          <xs:complexType name="SharedType"/>
        </xs:schema>"""
        doc = load_from_bytes(content, "a.xsd")

        assert resolve(doc, doc.top_level_element("A"), "urn:app").kind == NodeKind.PRIMITIVE


class TestMembersAndBases:
    """Test suite for member collection and extension bases"""

    def test_member_nodes_in_document_order(self):
        doc = load_from_bytes(ORDER_XSD, "order.xsd")
        members = member_nodes(doc.complex_type("OrderType"))

        assert [m.attrib.get("name") or m.attrib.get("ref") for m in members] == [
            "OrderId", "Status", "Item", "tns:AuditGroup"
        ]

    def test_member_nodes_skip_nested_declarations(self):
        """Members of inline types belong to the member, not the parent"""
        doc = load_from_bytes(INLINE_XSD, "inline.xsd")
        envelope_type = doc.top_level_element("Envelope").find(f"./{XS}complexType")

        assert [m.attrib["name"] for m in member_nodes(envelope_type)] == ["Priority", "Body"]

    def test_member_nodes_of_none(self):
        assert member_nodes(None) == []

    def test_extension_base(self):
        doc = load_from_bytes(IMPORTING_XSD, "app.xsd")

        assert extension_base(doc.complex_type("CustomerType")) == "ext:BaseType"
        assert extension_base(None) is None

    def test_extension_base_ignores_member_inline_types(self):
        """Extensions inside a member's inline type are not the outer type's base"""
        doc = load_from_bytes(NESTED_INLINE_EXTENSION_XSD, "nested.xsd")
        order_type = doc.complex_type("OrderType")
        line_type = member_nodes(order_type)[0].find(f"./{XS}complexType")

        assert extension_base(order_type) is None
        assert extension_base(line_type) == "BaseType"

    def test_simple_content_extension_base(self):
        content = b"""<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
          <xs:complexType name="AmountType">
            <xs:simpleContent>
              <xs:extension base="xs:decimal">
                <xs:attribute name="currency" type="xs:string"/>
              </xs:extension>
            </xs:simpleContent>
          </xs:complexType>
        </xs:schema>"""
        doc = load_from_bytes(content, "amount.xsd")

        assert extension_base(doc.complex_type("AmountType")) == "xs:decimal"

    @pytest.mark.parametrize("value,expected", [
        ("tns:Foo", ("tns", "Foo")),
        ("Foo", ("", "Foo")),
    ])
    def test_split_qname(self, value, expected):
        assert split_qname(value) == expected
