#!/usr/bin/env python3

from enum import Enum

from pydantic import BaseModel

# Pydantic Models


class RowStyle(str, Enum):
    """Visual style of a report row."""
    NORMAL = "normal"
    REFERENCE = "reference"
    COMPLEX = "complex"
    ENUM = "enum"
    RECURSION = "recursion"
    MARKED = "marked"      # Request/response marker rows
    FOREIGN = "foreign"    # Rows pulled from an imported schema


class ReportRow(BaseModel):
    """One row of the tabular report, keyed by column."""

    name: str = ""
    schematype: str = ""
    type: str = ""
    length: str = ""
    multi: str = ""
    enum: str = ""
    kind: str = ""
    desc: str = ""
    mandatory: str = ""
    complex: str = ""
    simple: str = ""
    minoccurs: str = ""
    maxoccurs: str = ""
    nill: str = ""
    style: RowStyle = RowStyle.NORMAL
    depth: int = 0
    is_request: bool = False
    is_response: bool = False

    def values(self, columns: list[str]) -> list[str]:
        """Cell values for the given column keys, in that order."""
        return [getattr(self, column) for column in columns]


class NamespaceInfo(BaseModel):
    prefix: str
    namespace_uri: str


class ConversionSummary(BaseModel):
    """Totals of one conversion run."""

    source: str
    element_count: int
    enum_count: int
    recursive_count: int = 0
    foreign_count: int = 0
    xsd_prefix: str = ""
    schema_prefix: str = ""
    namespaces: list[NamespaceInfo] = []
    imported_prefixes: list[str] = []
