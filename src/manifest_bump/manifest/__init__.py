"""Format-preserving JSON manifest walker."""

from .walker import JsonWalker, parse_json

__all__ = ["JsonWalker", "parse_json"]
