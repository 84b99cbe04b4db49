#!/usr/bin/env python3
"""
Conversion Service

Loads the primary schema (and its imports when enabled), flattens it and
summarizes the result. This is the only place where a missing input schema is
turned into an error.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.config import ConversionConfig
from ..models.models import ConversionSummary, NamespaceInfo
from .domain.schema.records import FlattenResult
from .domain.schema.registry import SchemaRegistry
from .domain.schema.walker import flatten_schema

logger = logging.getLogger(__name__)


class SchemaNotFoundError(Exception):
    """Raised when the primary XSD cannot be loaded."""
    pass


def load_registry(xsd_path: Union[str, Path], config: Optional[ConversionConfig] = None) -> SchemaRegistry:
    """Load the primary schema and, if enabled, the schemas it imports.

    Raises:
        SchemaNotFoundError: If the file does not exist or is not a valid schema
    """
    config = config or ConversionConfig()
    registry = SchemaRegistry.from_path(xsd_path, imports_enabled=config.imports_enabled)
    if registry is None:
        raise SchemaNotFoundError(f"XSD file '{xsd_path}' does not exist or is not a valid XML Schema")

    if config.imports_enabled:
        logger.info(f"Resolved {len(registry.imports)} imported schemas for {xsd_path}")
    return registry


def convert(xsd_path: Union[str, Path], config: Optional[ConversionConfig] = None) -> FlattenResult:
    """Load and flatten an XSD file.

    Args:
        xsd_path: Path to the primary schema
        config: Conversion options (defaults read from the environment)

    Returns:
        FlattenResult with element records, enumerations and namespaces

    Raises:
        SchemaNotFoundError: If the primary schema cannot be loaded
    """
    config = config or ConversionConfig()
    registry = load_registry(xsd_path, config)
    return flatten_schema(registry, config)


def build_summary(result: FlattenResult) -> ConversionSummary:
    return ConversionSummary(
        source=result.source,
        element_count=len(result.elements),
        enum_count=len(result.enums),
        recursive_count=result.recursive_count,
        foreign_count=result.foreign_count,
        xsd_prefix=result.xsd_prefix,
        schema_prefix=result.schema_prefix,
        namespaces=[
            NamespaceInfo(prefix=prefix, namespace_uri=uri)
            for prefix, uri in result.namespaces.items()
        ],
        imported_prefixes=list(result.imported_prefixes),
    )
