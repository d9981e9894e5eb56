"""Bump the version field of a JSON manifest while preserving its formatting."""

from .core.models import BumpKind, BumpRequest, BumpResult, ParsedDocument, Version
from .manifest import parse_json

__version__ = "0.1.0"

__all__ = ["BumpKind", "BumpRequest", "BumpResult", "ParsedDocument", "Version", "parse_json"]
