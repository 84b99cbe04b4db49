#!/usr/bin/env python3
"""Flattened records produced by the schema walker.

An ``ElementRecord`` is one row-to-be of the final report; an ``EnumValue`` is
one permitted value of a simple type. ``FlattenResult`` is the accumulator the
walker writes into: it owns the output collections and the sequence counter for
one conversion run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DEFAULT_OCCURS = "1"
UNBOUNDED = "unbounded"
RECURSION_NOTICE = 'Recursion of complex type "{type_name}"...'


class Direction(str, Enum):
    """Message direction of an element."""
    IN = "in"
    OUT = "out"


@dataclass
class ElementRecord:
    """One flattened element, complex type, simple type or group reference."""
    sequence: int                           # Creation order, never reused
    name: Optional[str]                     # Absent for group references
    type: Optional[str]                     # Declared or synthesized type name
    ref: Optional[str] = None               # Group/element reference name
    is_complex: bool = False
    is_simple: bool = False
    min_occurs: Optional[str] = None        # Raw attribute, None when absent
    max_occurs: Optional[str] = None
    nillable: Optional[str] = None          # None / "true" / "false"
    description: str = ""
    depth: int = 0
    direction: Direction = Direction.IN
    is_recursive: bool = False
    foreign_prefix: str = ""                # Prefix of the imported schema, or ""

    def __post_init__(self):
        if self.is_complex and self.is_simple:
            raise ValueError(f"Element '{self.name}' cannot be both complex and simple")

    @property
    def key(self) -> tuple:
        return (self.sequence, self.name, self.type, self.ref)

    @property
    def effective_min_occurs(self) -> str:
        return self.min_occurs if self.min_occurs is not None else DEFAULT_OCCURS

    @property
    def effective_max_occurs(self) -> str:
        return self.max_occurs if self.max_occurs is not None else DEFAULT_OCCURS

    @property
    def is_foreign(self) -> bool:
        return bool(self.foreign_prefix)

    def mark_recursive(self, type_name: str, notice: str = RECURSION_NOTICE) -> None:
        """Flag this node as the point where a type cycle was cut."""
        if self.is_recursive:
            return
        self.is_recursive = True
        self.description = notice.format(type_name=type_name)


@dataclass
class EnumValue:
    """One enumeration value of a simple type."""
    name: Optional[str]     # Owning element name
    type: str               # Owning simple type name
    value: str
    description: str = ""

    @property
    def key(self) -> tuple:
        return (self.name, self.type, self.value)


@dataclass
class FlattenResult:
    """Output of one flattening run."""
    elements: list[ElementRecord] = field(default_factory=list)
    enums: dict[tuple, EnumValue] = field(default_factory=dict)
    enum_values: dict[str, str] = field(default_factory=dict)  # simple type -> "A\nB"
    namespaces: dict[str, str] = field(default_factory=dict)   # prefix -> URI
    xsd_prefix: str = ""
    schema_prefix: str = ""
    source: str = ""                                           # Location of the primary schema
    imported_prefixes: list[str] = field(default_factory=list)
    _next_sequence: int = 0

    def add_element(self, **fields) -> ElementRecord:
        """Create an element with the next sequence number and append it."""
        record = ElementRecord(sequence=self._next_sequence, **fields)
        self._next_sequence += 1
        self.elements.append(record)
        return record

    def add_enum_values(self, element_name: Optional[str], type_name: str,
                        values: list[tuple[str, str]]) -> None:
        """Register the enumeration of a simple type used by an element.

        Args:
            element_name: Name of the element that uses the simple type
            type_name: Simple type name
            values: (value, documentation) pairs in document order
        """
        for value, description in values:
            enum = EnumValue(name=element_name, type=type_name, value=value, description=description)
            self.enums[enum.key] = enum
        self.enum_values[type_name] = "\n".join(value for value, _ in values).strip()

    @property
    def enum_list(self) -> list[EnumValue]:
        return list(self.enums.values())

    @property
    def recursive_count(self) -> int:
        return sum(1 for e in self.elements if e.is_recursive)

    @property
    def foreign_count(self) -> int:
        return sum(1 for e in self.elements if e.is_foreign)
