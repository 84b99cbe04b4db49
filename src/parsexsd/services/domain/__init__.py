"""
Domain Layer

This package contains the conversion logic organized by domain area.
Domain services implement the algorithms and should not parse command line
arguments or decide when to exit.

Domains:
- schema: XSD loading, import resolution and flattening into records
- report: report rows, XLSX workbook rendering and console preview
"""
