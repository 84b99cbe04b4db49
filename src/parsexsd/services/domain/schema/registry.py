#!/usr/bin/env python3
"""Loading of XSD documents and the schemas they import.

ElementTree does not keep xmlns declarations, so the prefix table of every
document is read from the raw XML. Imports are resolved only against local
files (or an in-memory file map); remote schema locations are never fetched.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union
from xml.etree.ElementTree import Element

# Use defusedxml for secure XML parsing (prevents XXE attacks)
import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

logger = logging.getLogger(__name__)

# XSD namespace
XS_NS = "http://www.w3.org/2001/XMLSchema"
XS = f"{{{XS_NS}}}"

_XMLNS_PATTERN = re.compile(r'xmlns(?::([A-Za-z_][\w.-]*))?\s*=\s*["\']([^"\']*)["\']')
_REMOTE_LOCATION = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*://')


def extract_namespace_map(xml_content: bytes) -> dict[str, str]:
    """Extract namespace prefix mappings from raw XML content.

    The default namespace is returned under the empty prefix. When a prefix is
    declared more than once, the first declaration wins.
    """
    namespaces = {}
    xml_str = xml_content.decode("utf-8", errors="replace")

    for prefix, uri in _XMLNS_PATTERN.findall(xml_str):
        namespaces.setdefault(prefix or "", uri)

    return namespaces


@dataclass(frozen=True)
class SchemaDocument:
    """A parsed XSD file and its namespace prefix table."""
    root: Element
    namespaces: dict[str, str]
    location: str = ""

    @property
    def target_namespace(self) -> str:
        return self.root.attrib.get("targetNamespace", "")

    def prefix_for(self, namespace_uri: Optional[str]) -> Optional[str]:
        """Return the first non-empty prefix bound to namespace_uri."""
        if not namespace_uri:
            return None
        for prefix, uri in self.namespaces.items():
            if prefix and uri == namespace_uri:
                return prefix
        return None

    def namespace_for(self, prefix: str) -> Optional[str]:
        return self.namespaces.get(prefix)

    @property
    def own_prefix(self) -> str:
        """Prefix bound to this document's target namespace, or ''."""
        return self.prefix_for(self.target_namespace) or ""

    @property
    def xsd_prefix(self) -> str:
        """Prefix bound to the XMLSchema namespace, or ''."""
        return self.prefix_for(XS_NS) or ""

    def top_level_elements(self) -> list[Element]:
        return self.root.findall(f"./{XS}element")

    def top_level_element(self, name: str) -> Optional[Element]:
        return self._find_named("element", name)

    def complex_type(self, name: str) -> Optional[Element]:
        return self._find_named("complexType", name)

    def simple_type(self, name: str) -> Optional[Element]:
        return self._find_named("simpleType", name)

    def group(self, name: str) -> Optional[Element]:
        return self._find_named("group", name)

    def imports(self) -> list[Element]:
        return self.root.findall(f"./{XS}import")

    def _find_named(self, tag: str, name: Optional[str]) -> Optional[Element]:
        if not name:
            return None
        for node in self.root.findall(f"./{XS}{tag}"):
            if node.attrib.get("name") == name:
                return node
        return None


@dataclass(frozen=True)
class ImportedSchema:
    """A schema reached through xs:import, keyed by its prefix in the root document."""
    prefix: str
    namespace: str
    location: str
    document: SchemaDocument


def load_from_bytes(content: bytes, location: str = "") -> Optional[SchemaDocument]:
    """Parse XSD content. Returns None if it is not a well-formed schema."""
    try:
        root = ET.fromstring(content)
    except (ET.ParseError, DefusedXmlException) as e:
        logger.warning(f"Failed to parse {location or 'XSD content'}: {e}")
        return None

    if root.tag != f"{XS}schema":
        logger.warning(f"{location or 'XSD content'} is not an XML Schema (root is {root.tag})")
        return None

    return SchemaDocument(root=root, namespaces=extract_namespace_map(content), location=location)


def load(path: Union[str, Path]) -> Optional[SchemaDocument]:
    """Load an XSD file. Returns None when the file is missing or unparseable."""
    path = Path(path)
    if not path.is_file():
        logger.warning(f"Schema file not found: {path}")
        return None

    document = load_from_bytes(path.read_bytes(), str(path))
    if document is not None:
        logger.info(f"Loaded schema {path} (targetNamespace '{document.target_namespace}')")
    return document


def resolve_imports(
    root_doc: SchemaDocument,
    base_dir: Optional[Union[str, Path]] = None,
    xsd_files: Optional[dict[str, bytes]] = None,
) -> dict[str, ImportedSchema]:
    """Load every schema imported by root_doc.

    Args:
        root_doc: The primary schema
        base_dir: Directory relative schema locations are resolved against
            (default: the directory of root_doc)
        xsd_files: Optional in-memory map of schema location -> content, used
            instead of the file system when given

    Returns:
        Dictionary mapping the root document's prefix for each imported
        namespace to the loaded ImportedSchema
    """
    imported = {}
    if base_dir is None:
        base_dir = Path(root_doc.location).parent if root_doc.location else Path(".")

    for import_node in root_doc.imports():
        namespace = import_node.attrib.get("namespace", "")
        location = import_node.attrib.get("schemaLocation")

        prefix = root_doc.prefix_for(namespace)
        if not prefix:
            logger.debug(f"Skipping import of '{namespace}': no prefix bound in root schema")
            continue

        if not location:
            logger.debug(f"Skipping import of '{namespace}': no schemaLocation")
            continue

        if _REMOTE_LOCATION.match(location):
            logger.warning(f"Skipping remote import '{location}' for prefix '{prefix}'")
            continue

        if xsd_files is not None:
            content = xsd_files.get(location)
            if content is None:
                logger.warning(f"Imported schema '{location}' not provided for prefix '{prefix}'")
                continue
            document = load_from_bytes(content, location)
        else:
            document = load(Path(base_dir) / location)

        if document is None:
            logger.warning(f"Could not load imported schema '{location}' for prefix '{prefix}'")
            continue

        imported[prefix] = ImportedSchema(
            prefix=prefix,
            namespace=namespace,
            location=location,
            document=document,
        )
        logger.info(f"Registered import '{location}' under prefix '{prefix}'")

    return imported


@dataclass
class SchemaRegistry:
    """The primary schema plus the schemas it imports."""
    root: SchemaDocument
    imports: dict[str, ImportedSchema] = field(default_factory=dict)

    def imported_by_namespace(self, namespace_uri: Optional[str]) -> Optional[ImportedSchema]:
        if not namespace_uri:
            return None
        for imported in self.imports.values():
            if imported.namespace == namespace_uri:
                return imported
        return None

    @classmethod
    def from_path(cls, path: Union[str, Path], imports_enabled: bool = True) -> Optional["SchemaRegistry"]:
        """Load a schema file and, optionally, its imports.

        Returns None if the root schema cannot be loaded.
        """
        root = load(path)
        if root is None:
            return None
        imports = resolve_imports(root) if imports_enabled else {}
        return cls(root=root, imports=imports)

    @classmethod
    def from_files(
        cls,
        primary_filename: str,
        xsd_files: dict[str, bytes],
        imports_enabled: bool = True,
    ) -> Optional["SchemaRegistry"]:
        """Build a registry from in-memory XSD files."""
        content = xsd_files.get(primary_filename)
        if content is None:
            logger.warning(f"Primary schema '{primary_filename}' not in provided files")
            return None
        root = load_from_bytes(content, primary_filename)
        if root is None:
            return None
        imports = resolve_imports(root, xsd_files=xsd_files) if imports_enabled else {}
        return cls(root=root, imports=imports)
