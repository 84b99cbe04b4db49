#!/usr/bin/env python3

import pytest

from parsexsd.core.config import ConversionConfig
from parsexsd.services.converter import (
    SchemaNotFoundError,
    build_summary,
    convert,
    load_registry,
)
from tests.fixtures.xsd_fixtures import IMPORTED_XSD, IMPORTING_XSD, ORDER_XSD


@pytest.fixture
def schema_dir(tmp_path):
    (tmp_path / "order.xsd").write_bytes(ORDER_XSD)
    (tmp_path / "app.xsd").write_bytes(IMPORTING_XSD)
    (tmp_path / "common.xsd").write_bytes(IMPORTED_XSD)
    return tmp_path


class TestConverter:
    """Test suite for the conversion service"""

    def test_missing_schema_raises(self, tmp_path):
        with pytest.raises(SchemaNotFoundError, match="does not exist"):
            convert(tmp_path / "missing.xsd", ConversionConfig())

    def test_invalid_schema_raises(self, tmp_path):
        path = tmp_path / "bad.xsd"
        path.write_text("this is not xml")
        with pytest.raises(SchemaNotFoundError):
            load_registry(path, ConversionConfig())

    def test_convert(self, schema_dir):
        result = convert(schema_dir / "order.xsd", ConversionConfig(response_marker_suffix=""))

        assert len(result.elements) == 12
        assert len(result.enums) == 2

    def test_convert_follows_imports(self, schema_dir):
        result = convert(schema_dir / "app.xsd", ConversionConfig(imports_enabled=True))
        assert result.foreign_count == 2

    def test_summary(self, schema_dir):
        config = ConversionConfig(imports_enabled=True, response_marker_suffix="")
        result = convert(schema_dir / "app.xsd", config)

        summary = build_summary(result)

        assert summary.source == str(schema_dir / "app.xsd")
        assert summary.element_count == 4
        assert summary.enum_count == 0
        assert summary.foreign_count == 2
        assert summary.recursive_count == 0
        assert summary.xsd_prefix == "xs"
        assert summary.schema_prefix == "tns"
        assert summary.imported_prefixes == ["ext"]
        assert {ns.prefix for ns in summary.namespaces} == {"xs", "tns", "ext"}

    def test_summary_without_imports(self, schema_dir):
        """The summary needs only the flatten result"""
        result = convert(schema_dir / "app.xsd", ConversionConfig(imports_enabled=False))

        summary = build_summary(result)

        assert summary.source == str(schema_dir / "app.xsd")
        assert summary.imported_prefixes == []
        assert summary.foreign_count == 0
