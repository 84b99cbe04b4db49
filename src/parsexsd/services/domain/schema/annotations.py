#!/usr/bin/env python3
"""Documentation text and description directives.

Descriptions may embed ``$length(N)`` or ``$format(S)`` directives meant for
the LENGTH/PRECISION column of the report. They are pulled out of the text
shown in the DESCRIPTION column.
"""

import re
from typing import Optional
from xml.etree.ElementTree import Element

from .registry import XS

_DIRECTIVE = re.compile(r'\$length\((\d+)\)|\$format\((\S+)\)')


def documentation(node: Optional[Element]) -> str:
    """Return the text of the first xs:annotation/xs:documentation of node, or ''."""
    if node is None:
        return ""
    doc_elem = node.find(f"./{XS}annotation/{XS}documentation")
    if doc_elem is None:
        return ""
    # itertext() also picks up text inside embedded markup
    return "".join(doc_elem.itertext())


def enumeration_values(simple_type: Optional[Element]) -> list[tuple[str, str]]:
    """Collect (value, documentation) for each xs:enumeration facet under simple_type."""
    if simple_type is None:
        return []
    return [
        (facet.attrib.get("value", ""), documentation(facet))
        for facet in simple_type.iter(f"{XS}enumeration")
    ]


def strip_directives(description: Optional[str]) -> tuple[str, str]:
    """Split a description into display text and its length/precision value.

    Only the first directive supplies the value; all of them are removed from
    the text.

    Returns:
        (description without directives, length or format value or '')

    Example:
        >>> strip_directives("Customer id $length(10) more text")
        ('Customer id  more text', '10')
    """
    if not description:
        return "", ""

    match = _DIRECTIVE.search(description)
    if match is None:
        return description.strip(), ""

    value = match.group(1) if match.group(1) is not None else match.group(2)
    text = _DIRECTIVE.sub("", description).strip()
    return text, value
