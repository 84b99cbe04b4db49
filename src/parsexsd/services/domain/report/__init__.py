"""
Report Rendering Domain

- rows: derived report columns for each flattened element
- workbook: XLSX output through openpyxl
- preview: colored console listing through rich
"""

from .preview import print_preview
from .rows import COLUMNS, build_rows, select_columns
from .workbook import render_workbook, save_workbook

__all__ = [
    "COLUMNS",
    "build_rows",
    "select_columns",
    "render_workbook",
    "save_workbook",
    "print_preview",
]
