#!/usr/bin/env python3
"""XLSX rendering of report rows."""

import logging
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ....core.config import ReportConfig
from ....models.models import ReportRow, RowStyle
from .rows import header_row, select_columns

logger = logging.getLogger(__name__)

SHEET_TITLE = "XSD"
MAX_COLUMN_WIDTH = 60
MIN_COLUMN_WIDTH = 6

# RowStyle -> (font options, fill colour)
ROW_STYLES = {
    RowStyle.NORMAL: ({}, None),
    RowStyle.REFERENCE: ({"italic": True, "bold": True}, None),
    RowStyle.COMPLEX: ({"bold": True}, None),
    RowStyle.ENUM: ({"bold": True, "color": "FF0000FF"}, None),
    RowStyle.RECURSION: ({"bold": True, "color": "FF0000FF"}, "FFFFFFCC"),
    RowStyle.MARKED: ({"bold": True, "color": "FF000000"}, "FFF0F0F0"),
    RowStyle.FOREIGN: ({"italic": True, "color": "FF006100"}, "FFEAF1DD"),
}
HEADER_FILL = "FFC0C0C0"

_ALIGNMENT = Alignment(horizontal="left", vertical="top", wrap_text=True)
_THIN = Side(style="thin")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)


def _fill(color: Optional[str]) -> PatternFill:
    if color is None:
        return PatternFill(fill_type=None)
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _style_row(sheet, row_number: int, width: int, font: Font, fill: PatternFill, border: bool):
    for column in range(1, width + 1):
        cell = sheet.cell(row=row_number, column=column)
        cell.font = font
        cell.fill = fill
        cell.alignment = _ALIGNMENT
        if border:
            cell.border = _BORDER


def _column_widths(sheet, width: int):
    for column in range(1, width + 1):
        longest = MIN_COLUMN_WIDTH
        for (cell,) in sheet.iter_rows(min_col=column, max_col=column):
            if cell.value:
                longest = max(longest, *(len(line) for line in str(cell.value).splitlines()))
        sheet.column_dimensions[get_column_letter(column)].width = min(longest + 2, MAX_COLUMN_WIDTH)


def render_workbook(rows: list[ReportRow], config: Optional[ReportConfig] = None) -> Workbook:
    """Render report rows into a single-sheet workbook.

    Args:
        rows: Report rows in output order
        config: Fonts, borders, column selection and header repetition

    Returns:
        openpyxl Workbook ready to be saved
    """
    config = config or ReportConfig()
    columns = select_columns(config.columns)
    header = header_row(columns)
    width = len(columns)

    header_font = Font(name=config.font_name, size=config.header_font_size, color="FF000000")
    fonts = {
        style: Font(name=config.font_name, size=config.font_size, **options)
        for style, (options, _) in ROW_STYLES.items()
    }
    fills = {style: _fill(color) for style, (_, color) in ROW_STYLES.items()}
    blank_font = Font(name=config.font_name, size=config.font_size)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE

    sheet.append(header)
    _style_row(sheet, 1, width, header_font, _fill(HEADER_FILL), config.border)

    for index, row in enumerate(rows):
        repeat_header = (
            (config.header_request and row.is_request) or
            (config.header_response and row.is_response)
        )
        if repeat_header and index > 0:
            sheet.append([""] * width)
            _style_row(sheet, sheet.max_row, width, blank_font, _fill(None), False)
            sheet.append(header)
            _style_row(sheet, sheet.max_row, width, header_font, _fill(HEADER_FILL), config.border)

        sheet.append(row.values(columns))
        _style_row(sheet, sheet.max_row, width, fonts[row.style], fills[row.style], config.border)

    if config.auto_filter and width:
        sheet.auto_filter.ref = f"A1:{get_column_letter(width)}1"

    _column_widths(sheet, width)
    return workbook


def save_workbook(rows: list[ReportRow], path: Union[str, Path], config: Optional[ReportConfig] = None) -> Path:
    """Render rows and write the workbook to path."""
    path = Path(path)
    workbook = render_workbook(rows, config)
    workbook.save(path)
    logger.info(f"Saved {len(rows)} rows to {path}")
    return path
