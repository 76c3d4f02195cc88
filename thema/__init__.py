"""Versioned schemas: version numbers, schema validation, readable errors, bind options and version multiplexing."""

__version__ = "0.1.0"
__all__ = ["version", "options", "validate", "schema", "vmux"]