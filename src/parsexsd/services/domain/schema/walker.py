#!/usr/bin/env python3
"""Flattening of an XSD type graph into ordered element records.

The walker descends depth-first from the top-level elements of the primary
schema. Complex types are expanded (extension base members first, then the
type's own members), simple types contribute their enumeration values, and
group references are expanded in place. Type cycles are cut per branch and the
offending node is marked recursive.

Output order is pre-order, left to right, and every record gets the next
sequence number of the run.
"""

import logging
from typing import Optional
from xml.etree.ElementTree import Element

from ....core.config import ConversionConfig
from .annotations import documentation, enumeration_values
from .records import Direction, ElementRecord, FlattenResult
from .recursion import EMPTY_PATH, RecursionPath, would_cycle
from .registry import SchemaDocument, SchemaRegistry
from .resolver import (
    NodeKind,
    extension_base,
    is_local_reference,
    member_nodes,
    resolve,
    split_qname,
)

logger = logging.getLogger(__name__)

GROUP_RECURSION_NOTICE = 'Recursion of group "{type_name}"...'


class SchemaFlattener:
    """Walks one schema registry into a FlattenResult."""

    def __init__(self, registry: SchemaRegistry, config: Optional[ConversionConfig] = None,
                 result: Optional[FlattenResult] = None):
        self.registry = registry
        self.config = config or ConversionConfig()
        self.result = result or FlattenResult()

    def flatten(
        self,
        doc: SchemaDocument,
        nodes: list[Element],
        namespace_uri: str,
        depth: int,
        direction: Direction,
        path: RecursionPath,
        foreign_prefix: str,
    ) -> None:
        """Flatten a sequence of element/group nodes of doc into the result.

        Args:
            doc: Document the nodes belong to
            nodes: Element and group nodes, in document order
            namespace_uri: Namespace governing doc
            depth: Nesting level of the nodes
            direction: Direction inherited from the parent
            path: Type and group definitions entered on this branch
            foreign_prefix: Import prefix when walking an imported schema, else ''
        """
        for node in nodes:
            self._flatten_node(doc, node, namespace_uri, depth, direction, path, foreign_prefix)

    def _flatten_node(self, doc, node, namespace_uri, depth, direction, path, foreign_prefix):
        name = node.attrib.get("name")
        if self.config.is_response(name):
            direction = Direction.OUT

        resolved = resolve(doc, node, namespace_uri)
        record = self.result.add_element(
            name=name,
            type=resolved.type_name if resolved.kind in (NodeKind.COMPLEX, NodeKind.SIMPLE)
            else node.attrib.get("type"),
            ref=node.attrib.get("ref"),
            is_complex=resolved.kind == NodeKind.COMPLEX,
            is_simple=resolved.kind == NodeKind.SIMPLE,
            min_occurs=node.attrib.get("minOccurs"),
            max_occurs=node.attrib.get("maxOccurs"),
            nillable=node.attrib.get("nillable"),
            description=documentation(node),
            depth=depth,
            direction=direction,
            foreign_prefix=foreign_prefix,
        )

        if resolved.kind == NodeKind.COMPLEX:
            if would_cycle(path, resolved.definition):
                logger.debug(f"Recursion of '{resolved.type_name}' cut at depth {depth} (path: {path})")
                record.mark_recursive(resolved.type_name)
                return
            self._flatten_type_body(
                doc, resolved.definition, namespace_uri, depth + 1, direction,
                path.extend(resolved.definition), foreign_prefix,
            )

        elif resolved.kind == NodeKind.SIMPLE:
            self.result.add_enum_values(name, resolved.type_name, enumeration_values(resolved.definition))

        elif resolved.kind == NodeKind.GROUP_REF:
            self._flatten_group(doc, node, record, resolved.definition, namespace_uri,
                                depth, direction, path, foreign_prefix)

    def _flatten_group(self, doc, node, record: ElementRecord, group: Element, namespace_uri,
                       depth, direction, path, foreign_prefix):
        _, group_name = split_qname(node.attrib.get("ref", ""))
        if would_cycle(path, group):
            logger.debug(f"Recursion of group '{group_name}' cut at depth {depth}")
            record.mark_recursive(group_name, notice=GROUP_RECURSION_NOTICE)
            return
        self.flatten(doc, member_nodes(group), namespace_uri, depth + 1, direction,
                     path.extend(group), foreign_prefix)

    def _flatten_type_body(self, doc, definition, namespace_uri, depth, direction, path, foreign_prefix):
        """Flatten extension base members, then the type's own members, at depth."""
        base = self._resolve_extension_base(doc, definition, namespace_uri, foreign_prefix)
        if base is not None:
            base_name, base_doc, base_definition, base_namespace, base_prefix = base
            if would_cycle(path, base_definition):
                logger.debug(f"Extension base '{base_name}' already on path {path}, skipping")
            else:
                self._flatten_type_body(base_doc, base_definition, base_namespace, depth, direction,
                                        path.extend(base_definition), base_prefix)

        self.flatten(doc, member_nodes(definition), namespace_uri, depth, direction, path, foreign_prefix)

    def _resolve_extension_base(self, doc: SchemaDocument, definition: Element,
                                namespace_uri: str, foreign_prefix: str):
        """Find the definition of a type's extension base.

        Returns:
            (base name, document, definition, namespace, foreign prefix) or None
            when there is no base or it cannot be resolved
        """
        base = extension_base(definition)
        if not base:
            return None

        prefix, local = split_qname(base)

        if is_local_reference(doc, base, namespace_uri):
            base_definition = doc.complex_type(local)
            if base_definition is None:
                logger.debug(f"Extension base '{base}' not found in {doc.location or 'schema'}")
                return None
            return base, doc, base_definition, namespace_uri, foreign_prefix

        if not self.config.imports_enabled:
            logger.debug(f"Imports disabled, skipping foreign extension base '{base}'")
            return None

        imported = self.registry.imported_by_namespace(doc.namespace_for(prefix))
        if imported is None:
            logger.debug(f"No imported schema for extension base '{base}'")
            return None

        base_definition = imported.document.complex_type(local)
        if base_definition is None:
            logger.warning(f"Extension base '{base}' not found in imported schema '{imported.location}'")
            return None

        return base, imported.document, base_definition, imported.document.target_namespace, imported.prefix


def flatten_schema(registry: SchemaRegistry, config: Optional[ConversionConfig] = None) -> FlattenResult:
    """Flatten the top-level elements of the registry's primary schema.

    The walk starts at depth 0, direction "in", with an empty recursion path and
    no foreign prefix.
    """
    config = config or ConversionConfig()
    root = registry.root
    result = FlattenResult(
        namespaces=dict(root.namespaces),
        xsd_prefix=root.xsd_prefix,
        schema_prefix=root.own_prefix,
        source=root.location,
        imported_prefixes=list(registry.imports),
    )

    flattener = SchemaFlattener(registry, config, result)
    flattener.flatten(
        root,
        root.top_level_elements(),
        root.target_namespace,
        depth=0,
        direction=Direction.IN,
        path=EMPTY_PATH,
        foreign_prefix="",
    )

    logger.info(
        f"Flattened {len(result.elements)} elements and {len(result.enums)} enumeration values "
        f"from {root.location or 'schema'}"
    )
    return result
