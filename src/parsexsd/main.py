#!/usr/bin/env python3
"""
parsexsd command line interface.

Usage:
    parsexsd --xsd schema.xsd --xlsx schema.xlsx --indent --border
    parsexsd --xsd schema.xsd --stdout --response-end-with Response

Run `parsexsd --help` for all options.
"""

import argparse
import logging
import sys
from typing import Optional

from . import __version__
from .core.config import ConversionConfig, ReportConfig
from .core.logging import setup_logging
from .services.converter import SchemaNotFoundError, build_summary, convert
from .services.domain.report.preview import print_preview
from .services.domain.report.rows import COLUMNS, build_rows
from .services.domain.report.workbook import save_workbook

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="parsexsd",
        description="Flatten an XSD into an XLSX report and/or a console preview.",
    )
    ap.add_argument("--version", action="version", version=f"parsexsd {__version__}")
    ap.add_argument("--xsd", required=True, help="name of the input XSD file")
    ap.add_argument("--xlsx", help="name of the output XLSX file")
    ap.add_argument("--stdout", action="store_true", help="write the XSD structure on the screen")
    ap.add_argument("--indent", action="store_true", default=None,
                    help="indent element names in the XLSX by nesting depth")
    ap.add_argument("--border", action="store_true", default=None, help="draw cell borders in the XLSX")
    ap.add_argument("--columns",
                    help=f"comma separated list of XLSX columns ({','.join(COLUMNS)})")
    ap.add_argument("--request-end-with", help="mark elements whose name ends with this suffix as requests")
    ap.add_argument("--response-end-with", help="mark elements whose name ends with this suffix as responses")
    ap.add_argument("--header-request", action="store_true", default=None,
                    help="repeat the header row before each request element")
    ap.add_argument("--header-response", action="store_true", default=None,
                    help="repeat the header row before each response element")
    ap.add_argument("--auto-filter", action="store_true", default=None,
                    help="turn on the auto filter on the first row")
    ap.add_argument("--font-name", help="default font (Tahoma)")
    ap.add_argument("--font-size", type=int, help="default font size (9)")
    ap.add_argument("--header-font-size", type=int, help="header font size (9)")
    ap.add_argument("--no-imports", action="store_true", help="do not follow xs:import declarations")
    ap.add_argument("--log-level", help="logging level (default: PARSEXSD_LOG_LEVEL or INFO)")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    config = ConversionConfig(
        indent_output=args.indent,
        imports_enabled=False if args.no_imports else None,
        response_marker_suffix=args.response_end_with,
        request_marker_suffix=args.request_end_with,
    )
    report_config = ReportConfig(
        columns=args.columns.split(",") if args.columns else None,
        border=args.border,
        auto_filter=args.auto_filter,
        header_request=args.header_request,
        header_response=args.header_response,
        font_name=args.font_name,
        font_size=args.font_size,
        header_font_size=args.header_font_size,
    )

    try:
        result = convert(args.xsd, config)
    except SchemaNotFoundError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.stdout:
        print_preview(result)

    if args.xlsx:
        rows = build_rows(result, config)
        try:
            save_workbook(rows, args.xlsx, report_config)
        except OSError as e:
            logger.error(f"Failed to write {args.xlsx}: {e}")
            print(f"Error: cannot write {args.xlsx}: {e}", file=sys.stderr)
            return 1

    summary = build_summary(result)
    logger.info(
        f"Converted {summary.source}: {summary.element_count} elements, "
        f"{summary.enum_count} enumeration values, {summary.recursive_count} recursive, "
        f"{summary.foreign_count} from imported schemas"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
