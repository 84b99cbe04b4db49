#!/usr/bin/env python3
"""Per-branch cycle detection for complex type and group descent."""

from dataclasses import dataclass
from xml.etree.ElementTree import Element


def _label(definition: Element) -> str:
    return definition.attrib.get("name") or "(anonymous)"


@dataclass(frozen=True)
class RecursionPath:
    """Type and group definitions entered along one traversal branch, root first.

    Definitions are compared by identity, so two anonymous types that only
    share a synthesized name are different entries. Paths are immutable;
    ``extend`` returns a new path for the child branch so siblings never see
    each other's entries.
    """
    definitions: tuple[Element, ...] = ()

    def extend(self, definition: Element) -> "RecursionPath":
        return RecursionPath(self.definitions + (definition,))

    def __contains__(self, definition: Element) -> bool:
        return any(entry is definition for entry in self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)

    def __str__(self) -> str:
        return ";".join(_label(entry) for entry in self.definitions)


EMPTY_PATH = RecursionPath()


def would_cycle(path: RecursionPath, definition: Element) -> bool:
    """Check if descending into definition would re-enter it on this branch."""
    return definition in path
