#!/usr/bin/env python3
"""Colored console preview of a flattened schema."""

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..schema.records import ElementRecord, FlattenResult

PADDING = "    "


def _occurs(record: ElementRecord) -> str:
    bounds = [b for b in (record.min_occurs, record.max_occurs) if b is not None]
    return f" ({' - '.join(bounds)})" if bounds else ""


def _record_line(record: ElementRecord) -> Text:
    line = Text(PADDING * record.depth)

    if record.is_foreign:
        line.append(f"{record.foreign_prefix}:", style="green")

    if record.is_complex:
        line.append(record.name or "")
        line.append(" ")
        line.append(record.type or "", style="yellow")
        kind = "@complexType"
    elif record.is_simple:
        line.append(record.name or "")
        line.append(" ")
        line.append(record.type or "", style="black on magenta")
        kind = "@simpleType"
    elif record.ref:
        line.append(record.ref, style="italic")
        kind = "@group"
    else:
        line.append(record.name or "")
        line.append(" [")
        line.append(record.type or "", style="green")
        line.append("]")
        kind = "@element"

    line.append(_occurs(record), style="cyan")

    if record.nillable == "true":
        line.append(" ")
        line.append(f"nillable({record.nillable})", style="black on green")
    elif record.nillable == "false":
        line.append(" ")
        line.append(f"nillable({record.nillable})", style="white on red")

    line.append(" ")
    line.append(kind, style="white on blue")
    line.append(f" {{depth: {record.depth}, kind: {record.direction.value}}}", style="dim")
    return line


def print_preview(result: FlattenResult, console: Optional[Console] = None) -> None:
    """Print the flattened structure, enumeration values and namespace table."""
    console = console or Console()
    enums_by_type = {}
    for enum in result.enum_list:
        enums_by_type.setdefault((enum.name, enum.type), []).append(enum.value)

    for record in result.elements:
        description = (record.description or "").strip()
        if description:
            style = "bold red" if record.is_recursive else "magenta"
            console.print(Text(f"{PADDING * record.depth}# {description}", style=style))

        console.print(_record_line(record))

        if record.is_simple:
            for value in enums_by_type.get((record.name, record.type), []):
                console.print(Text(f"{PADDING * (record.depth + 1)} * {value}"))

    console.print()
    console.print(f"Default XMLSchema prefix is '{result.xsd_prefix}'")
    table = Table(title="Namespaces", box=box.SIMPLE)
    table.add_column("Prefix")
    table.add_column("Namespace URI")
    for prefix, uri in result.namespaces.items():
        table.add_row(prefix or "(default)", uri)
    console.print(table)
    console.print(f"Count of elements: {len(result.elements)}")
