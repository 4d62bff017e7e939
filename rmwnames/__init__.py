"""Validation of topic names, node names and namespaces, with security and init option records."""

__version__ = "0.1.0"