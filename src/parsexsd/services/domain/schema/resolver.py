#!/usr/bin/env python3
"""Classification of schema nodes for the flattening walker.

Every element or group node is resolved exactly once into a ``ResolvedNode``
whose ``kind`` tells the walker how to handle it:

* COMPLEX   - named or inline xs:complexType
* SIMPLE    - named or inline xs:simpleType
* GROUP_REF - reference to a top-level xs:group of the same document
* PRIMITIVE - built-in types, element references and anything unresolvable
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from xml.etree.ElementTree import Element

from .registry import XS, SchemaDocument

logger = logging.getLogger(__name__)

ANONYMOUS_TYPE_SUFFIX = "_anonymous"

# Nodes whose children may declare members of a type or group
_CONTAINER_TAGS = {
    "sequence", "choice", "all",
    "complexContent", "simpleContent",
    "extension", "restriction",
}
_MEMBER_TAGS = {"element", "group"}


class NodeKind(str, Enum):
    """Kind of a resolved schema node."""
    COMPLEX = "complex"
    SIMPLE = "simple"
    GROUP_REF = "group_ref"
    PRIMITIVE = "primitive"


@dataclass(frozen=True)
class ResolvedNode:
    kind: NodeKind
    type_name: Optional[str] = None          # Declared or synthesized type name
    definition: Optional[Element] = None     # complexType / simpleType / group node


PRIMITIVE = ResolvedNode(NodeKind.PRIMITIVE)


def local_tag(node: Element) -> str:
    tag = node.tag if isinstance(node.tag, str) else ""
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def split_qname(value: str) -> tuple[str, str]:
    """Split 'prefix:local' into (prefix, local); unqualified names get ''."""
    if ":" in value:
        prefix, local = value.split(":", 1)
        return prefix, local
    return "", value


def is_local_reference(doc: SchemaDocument, qname: str, namespace_uri: str) -> bool:
    """Check if a qualified name points into doc itself.

    Unqualified names, names with an unbound prefix and names whose prefix is
    bound to the governing namespace all resolve within the document.
    """
    prefix, _ = split_qname(qname)
    if not prefix:
        return True
    bound = doc.namespace_for(prefix)
    return bound is None or bound == namespace_uri


def _inline_type(node: Element, tag: str) -> Optional[Element]:
    return node.find(f"./{XS}{tag}")


def resolve(doc: SchemaDocument, node: Element, namespace_uri: str) -> ResolvedNode:
    """Resolve an element or group node against its owning document.

    Args:
        doc: Document the node belongs to
        node: xs:element or xs:group node
        namespace_uri: Namespace governing the document (its targetNamespace)

    Returns:
        ResolvedNode describing how the node is to be flattened
    """
    type_attr = node.attrib.get("type")
    name = node.attrib.get("name")
    ref = node.attrib.get("ref")

    if type_attr:
        if not is_local_reference(doc, type_attr, namespace_uri):
            return PRIMITIVE
        _, local = split_qname(type_attr)
        # Complex is always tried first
        complex_type = doc.complex_type(local)
        if complex_type is not None:
            return ResolvedNode(NodeKind.COMPLEX, type_attr, complex_type)
        simple_type = doc.simple_type(local)
        if simple_type is not None:
            return ResolvedNode(NodeKind.SIMPLE, type_attr, simple_type)
        return PRIMITIVE

    if name:
        holders = [node]
        declaration = doc.top_level_element(name)
        if declaration is not None and declaration is not node:
            holders.append(declaration)
        for holder in holders:
            complex_type = _inline_type(holder, "complexType")
            if complex_type is not None:
                return ResolvedNode(NodeKind.COMPLEX, f"{name}{ANONYMOUS_TYPE_SUFFIX}", complex_type)
            simple_type = _inline_type(holder, "simpleType")
            if simple_type is not None:
                return ResolvedNode(NodeKind.SIMPLE, f"{name}{ANONYMOUS_TYPE_SUFFIX}", simple_type)

    if ref and is_local_reference(doc, ref, namespace_uri):
        _, local = split_qname(ref)
        group = doc.group(local)
        if group is not None:
            return ResolvedNode(NodeKind.GROUP_REF, None, group)
        logger.debug(f"Reference '{ref}' does not name a group in {doc.location or 'schema'}")

    return PRIMITIVE


def is_complex_type(doc: SchemaDocument, node: Element, namespace_uri: str) -> bool:
    return resolve(doc, node, namespace_uri).kind == NodeKind.COMPLEX


def is_simple_type(doc: SchemaDocument, node: Element, namespace_uri: str) -> bool:
    return resolve(doc, node, namespace_uri).kind == NodeKind.SIMPLE


def member_nodes(definition: Optional[Element]) -> list[Element]:
    """Element and group members of a type or group definition, in document order.

    Members are collected through compositors and content models; the members'
    own nested declarations are not included.
    """
    members = []
    if definition is None:
        return members

    def collect(parent: Element):
        for child in parent:
            tag = local_tag(child)
            if tag in _MEMBER_TAGS:
                members.append(child)
            elif tag in _CONTAINER_TAGS:
                collect(child)

    collect(definition)
    return members


def extension_base(definition: Optional[Element]) -> Optional[str]:
    """Return the base of the type definition's own xs:extension.

    Only complexContent/simpleContent directly under the definition count;
    extensions inside the inline types of members belong to those members.
    """
    if definition is None:
        return None
    for content in ("complexContent", "simpleContent"):
        extension = definition.find(f"./{XS}{content}/{XS}extension")
        if extension is not None:
            return extension.attrib.get("base") or None
    return None
