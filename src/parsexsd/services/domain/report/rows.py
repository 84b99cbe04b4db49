#!/usr/bin/env python3
"""Turn flattened element records into report rows.

This is where the derived columns are computed: type categories, occurrence
labels, enumeration text and the LENGTH/PRECISION value taken out of the
description.
"""

import logging
from typing import Optional

from ....core.config import ConversionConfig
from ....models.models import ReportRow, RowStyle
from ..schema.annotations import strip_directives
from ..schema.classifier import classify_type, occurrence_labels
from ..schema.records import ElementRecord, FlattenResult

logger = logging.getLogger(__name__)

INDENT = "  "

# Column key -> header text, in report order
COLUMNS = {
    "name": "NAME",
    "schematype": "XMLSCHEMA\nTYPE",
    "type": "TYPE",
    "length": "LENGTH/\nPRECISION",
    "multi": "MULTIPL.",
    "enum": "ENUM.\nVALUES",
    "kind": "KIND",
    "desc": "DESCRIPTION",
    "mandatory": "MANDATORY",
    "complex": "COMPLEX\nTYPE",
    "simple": "SIMPLE\nTYPE",
    "minoccurs": "MIN\nOCCURS",
    "maxoccurs": "MAX\nOCCURS",
    "nill": "NILLABLE",
}


def select_columns(requested: Optional[list[str]]) -> list[str]:
    """Return the requested column keys in report order.

    None or an empty list selects every column. Unknown keys are dropped with a
    warning.
    """
    if not requested:
        return list(COLUMNS)

    wanted = {column.strip() for column in requested if column.strip()}
    unknown = sorted(wanted - set(COLUMNS))
    if unknown:
        logger.warning(f"Ignoring unknown report columns: {', '.join(unknown)}")

    return [column for column in COLUMNS if column in wanted]


def header_row(columns: list[str]) -> list[str]:
    return [COLUMNS[column] for column in columns]


def _row_style(record: ElementRecord, marked: bool) -> RowStyle:
    # Later checks take precedence
    style = RowStyle.NORMAL
    if record.ref is not None:
        style = RowStyle.REFERENCE
    if record.is_foreign:
        style = RowStyle.FOREIGN
    if record.is_complex:
        style = RowStyle.COMPLEX
    if record.is_simple:
        style = RowStyle.ENUM
    if record.is_recursive:
        style = RowStyle.RECURSION
    if marked:
        style = RowStyle.MARKED
    return style


def build_row(record: ElementRecord, result: FlattenResult, config: ConversionConfig) -> ReportRow:
    """Build the report row of one element record."""
    name = record.name or ""
    type_name = record.type or ""
    enum_text = ""

    if record.is_complex:
        schematype = f"ComplexType\n({type_name})"
        category = f"STRUCT\n({type_name})"
    elif record.is_simple:
        enum_text = result.enum_values.get(type_name, "")
        schematype = f"SimpleType\n({type_name})"
        category = f"ENUM\n({type_name})"
    elif record.ref:
        name = record.ref
        schematype = f"Reference\n({record.ref})"
        category = "GROUP"
    else:
        schematype = type_name
        category = classify_type(record.type, result.xsd_prefix)

    is_request = config.is_request(name)
    is_response = config.is_response(name)

    display_name = f"{record.foreign_prefix}:{name}" if record.is_foreign and name else name
    if config.indent_output:
        display_name = f"{INDENT * record.depth}{display_name}"

    description, length = strip_directives(record.description)
    mandatory, multiplicity = occurrence_labels(record.min_occurs, record.max_occurs)

    return ReportRow(
        name=display_name,
        schematype=schematype,
        type=category,
        length=length,
        multi=multiplicity,
        enum=enum_text,
        kind=record.direction.value,
        desc=description,
        mandatory=mandatory,
        complex="Y" if record.is_complex else "",
        simple="Y" if record.is_simple else "",
        minoccurs=record.effective_min_occurs,
        maxoccurs=record.effective_max_occurs,
        nill=record.nillable or "",
        style=_row_style(record, is_request or is_response),
        depth=record.depth,
        is_request=is_request,
        is_response=is_response,
    )


def build_rows(result: FlattenResult, config: Optional[ConversionConfig] = None) -> list[ReportRow]:
    """Build report rows for every element of a flatten result, in order."""
    config = config or ConversionConfig()
    return [build_row(record, result, config) for record in result.elements]
