"""
XSD Schema Flattening Domain

Handles schema operations:
- Schema loading and import resolution (registry)
- Node classification (resolver)
- Depth-first flattening into element records (walker)
- Type categories, occurrence labels and description directives
"""

from .records import Direction, ElementRecord, EnumValue, FlattenResult
from .registry import SchemaDocument, SchemaRegistry, load, resolve_imports
from .walker import SchemaFlattener, flatten_schema

__all__ = [
    # Records
    "Direction",
    "ElementRecord",
    "EnumValue",
    "FlattenResult",
    # Registry
    "SchemaDocument",
    "SchemaRegistry",
    "load",
    "resolve_imports",
    # Walker
    "SchemaFlattener",
    "flatten_schema",
]
