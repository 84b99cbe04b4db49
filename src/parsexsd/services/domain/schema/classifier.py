#!/usr/bin/env python3
"""Type categories and occurrence labels for report rows."""

from typing import Optional

from .records import DEFAULT_OCCURS, UNBOUNDED

# Built-in XSD types with a report category, by local name
XSD_TYPE_CATEGORIES = {
    "int": "INTEGER",
    "integer": "INTEGER",
    "double": "DOUBLE",
    "base64Binary": "BASE64",
    "date": "DATE",
    "dateTime": "DATE+TIME",
    "string": "STRING",
}

# (minOccurs, maxOccurs) -> (mandatory, multiplicity)
OCCURRENCE_LABELS = {
    ("1", "1"): ("Y", "1"),
    ("0", "1"): ("O", "0..1"),
    ("0", UNBOUNDED): ("O", "0..N"),
    ("1", UNBOUNDED): ("Y", "1..N"),
}


def classify_type(type_ref: Optional[str], xsd_prefix: str) -> str:
    """Classify a declared primitive type into a report category.

    The type must be qualified with the schema's XMLSchema prefix
    (e.g. "xs:int" when xmlns:xs is the XMLSchema namespace). Unknown types
    are returned unchanged.

    Args:
        type_ref: Declared type string (e.g., "xs:dateTime", "tns:CodeType")
        xsd_prefix: Prefix bound to the XMLSchema namespace in the document

    Returns:
        Category label, or the raw type string ('' when type_ref is None)
    """
    if not type_ref:
        return ""

    for local_name, category in XSD_TYPE_CATEGORIES.items():
        qualified = f"{xsd_prefix}:{local_name}" if xsd_prefix else local_name
        if type_ref == qualified:
            return category

    return type_ref


def occurrence_labels(min_occurs: Optional[str], max_occurs: Optional[str]) -> tuple[str, str]:
    """Derive (mandatory, multiplicity) from occurrence bounds.

    Absent bounds default to "1". Combinations outside the known table give
    empty labels.
    """
    min_occurs = min_occurs if min_occurs is not None else DEFAULT_OCCURS
    max_occurs = max_occurs if max_occurs is not None else DEFAULT_OCCURS
    return OCCURRENCE_LABELS.get((min_occurs, max_occurs), ("", ""))
