#!/usr/bin/env python3
"""
Configuration for XSD flattening and report rendering.

Every option has an environment variable fallback so that the same settings can
be shared between CLI runs. Explicit constructor arguments (coming from CLI
flags) always win over the environment.
"""

import logging
from typing import Optional

from .env_utils import getenv_bool, getenv_clean, getenv_int, getenv_list

logger = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "Tahoma"
DEFAULT_FONT_SIZE = 9


def _ends_with_marker(name: Optional[str], suffix: Optional[str]) -> bool:
    return bool(name) and bool(suffix) and name.endswith(suffix)


class ConversionConfig:
    """Options consumed by the flattening walker.

    Environment variables:
        PARSEXSD_INDENT: indent names in the report by nesting depth
        PARSEXSD_IMPORTS: follow xs:import declarations (default: true)
        PARSEXSD_RESPONSE_SUFFIX: element name suffix that switches direction to "out"
        PARSEXSD_REQUEST_SUFFIX: element name suffix that marks request elements
    """

    def __init__(
        self,
        indent_output: Optional[bool] = None,
        imports_enabled: Optional[bool] = None,
        response_marker_suffix: Optional[str] = None,
        request_marker_suffix: Optional[str] = None,
    ):
        self.indent_output = (
            indent_output if indent_output is not None
            else getenv_bool("PARSEXSD_INDENT", False)
        )
        self.imports_enabled = (
            imports_enabled if imports_enabled is not None
            else getenv_bool("PARSEXSD_IMPORTS", True)
        )
        # Empty strings disable the marker
        self.response_marker_suffix = (
            response_marker_suffix if response_marker_suffix is not None
            else getenv_clean("PARSEXSD_RESPONSE_SUFFIX")
        ) or None
        self.request_marker_suffix = (
            request_marker_suffix if request_marker_suffix is not None
            else getenv_clean("PARSEXSD_REQUEST_SUFFIX")
        ) or None

    def is_response(self, name: Optional[str]) -> bool:
        """Check if an element name carries the response marker."""
        return _ends_with_marker(name, self.response_marker_suffix)

    def is_request(self, name: Optional[str]) -> bool:
        """Check if an element name carries the request marker."""
        return _ends_with_marker(name, self.request_marker_suffix)

    def __repr__(self) -> str:
        return (
            f"ConversionConfig(indent_output={self.indent_output}, "
            f"imports_enabled={self.imports_enabled}, "
            f"response_marker_suffix={self.response_marker_suffix!r}, "
            f"request_marker_suffix={self.request_marker_suffix!r})"
        )


class ReportConfig:
    """Workbook rendering options.

    Environment variables:
        PARSEXSD_COLUMNS: comma separated column keys (default: all columns)
        PARSEXSD_BORDER: draw thin borders around cells
        PARSEXSD_AUTO_FILTER: enable auto filter on the header row
        PARSEXSD_HEADER_REQUEST / PARSEXSD_HEADER_RESPONSE: repeat the header
            row before each request/response element
        PARSEXSD_FONT_NAME, PARSEXSD_FONT_SIZE, PARSEXSD_HEADER_FONT_SIZE
    """

    def __init__(
        self,
        columns: Optional[list[str]] = None,
        border: Optional[bool] = None,
        auto_filter: Optional[bool] = None,
        header_request: Optional[bool] = None,
        header_response: Optional[bool] = None,
        font_name: Optional[str] = None,
        font_size: Optional[int] = None,
        header_font_size: Optional[int] = None,
    ):
        # None means "all columns"
        self.columns = columns if columns is not None else (getenv_list("PARSEXSD_COLUMNS") or None)
        self.border = border if border is not None else getenv_bool("PARSEXSD_BORDER", False)
        self.auto_filter = (
            auto_filter if auto_filter is not None
            else getenv_bool("PARSEXSD_AUTO_FILTER", False)
        )
        self.header_request = (
            header_request if header_request is not None
            else getenv_bool("PARSEXSD_HEADER_REQUEST", False)
        )
        self.header_response = (
            header_response if header_response is not None
            else getenv_bool("PARSEXSD_HEADER_RESPONSE", False)
        )
        self.font_name = font_name or getenv_clean("PARSEXSD_FONT_NAME") or DEFAULT_FONT_NAME
        self.font_size = (
            font_size if font_size is not None
            else getenv_int("PARSEXSD_FONT_SIZE", DEFAULT_FONT_SIZE)
        )
        self.header_font_size = (
            header_font_size if header_font_size is not None
            else getenv_int("PARSEXSD_HEADER_FONT_SIZE", DEFAULT_FONT_SIZE)
        )
