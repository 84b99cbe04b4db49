"""Convert XML Schema (XSD) documents into flattened tabular reports."""

__version__ = "0.1.0"
