"""Parsing and representation of HTTP request-target URIs and HTTP versions."""

__version__ = "1.3.1"

__all__ = ["authority", "builder", "errors", "path", "port", "scheme", "tables", "uri", "version"]