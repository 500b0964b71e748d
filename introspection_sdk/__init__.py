"""Configuration types for clients of the Introspection REST API."""

__version__ = "0.1.0"
__all__ = ["types"]