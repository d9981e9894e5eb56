"""Recursive-descent walker that copies a JSON document verbatim.

The walker never builds a tree. Every character it consumes is appended to
the output as-is, except the value of the top-level ``"version"`` key, which
is swapped for a quoted placeholder so the document can be re-emitted later
with a different version.
"""

import uuid

import structlog

from ..core.constants import NUMBER_LIKE_CHARS, VERSION_KEY, WHITESPACE
from ..core.exceptions import (
    DuplicateVersionError,
    InvalidVersionError,
    UnexpectedCharacterError,
    UnexpectedEndError,
)
from ..core.models import ParsedDocument, Version
from .lexers import CharStream, lex_number_like, lex_string

logger = structlog.get_logger(__name__)


def _new_placeholder(text: str) -> str:
    placeholder = uuid.uuid4().hex
    while placeholder in text:
        placeholder = uuid.uuid4().hex
    return placeholder


class JsonWalker:
    """Walks one document. Instances are single use."""

    def __init__(self, text: str) -> None:
        self._stream = CharStream(text)
        self._placeholder = _new_placeholder(text)
        self._version: Version | None = None
        self._depth = 0

    def walk(self) -> ParsedDocument:
        parts = [self._value(), self._stream.take_whitespace()]

        char = self._stream.peek()
        if char is not None:
            raise UnexpectedCharacterError(char, self._stream.position)

        document = ParsedDocument(
            template="".join(parts),
            placeholder=self._placeholder,
            version=self._version,
        )
        logger.debug("Document walked", length=self._stream.position, has_version=document.has_version)
        return document

    def _value(self) -> str:
        leading = self._stream.take_whitespace()
        char = self._stream.peek()

        if char is None:
            raise UnexpectedEndError("json", self._stream.position)
        if char == "{":
            return leading + self._object()
        if char == "[":
            return leading + self._array()
        if char == '"':
            return leading + lex_string(self._stream)
        if char in NUMBER_LIKE_CHARS:
            return leading + lex_number_like(self._stream)
        raise UnexpectedCharacterError(char, self._stream.position)

    def _object(self) -> str:
        self._stream.next()
        self._depth += 1
        parts = ["{", self._stream.take_whitespace()]

        if self._stream.peek() == "}":
            self._stream.next()
            self._depth -= 1
            parts.append("}")
            return "".join(parts)

        parts.append(self._entry())
        while True:
            char = self._stream.peek()
            if char is None:
                raise UnexpectedEndError("object", self._stream.position)
            if char == "}":
                self._stream.next()
                parts.append(char)
                break
            if char == ",":
                self._stream.next()
                parts.append(char)
                parts.append(self._entry())
            elif char in WHITESPACE:
                parts.append(self._stream.take_whitespace())
            else:
                raise UnexpectedCharacterError(char, self._stream.position)

        self._depth -= 1
        return "".join(parts)

    def _entry(self) -> str:
        parts = [self._stream.take_whitespace()]

        if self._stream.peek() is None:
            raise UnexpectedEndError("object", self._stream.position)
        key = lex_string(self._stream)
        parts.append(key)
        parts.append(self._stream.take_whitespace())

        char = self._stream.next()
        if char is None:
            raise UnexpectedEndError("object", self._stream.position)
        if char != ":":
            raise UnexpectedCharacterError(char, self._stream.position - 1)
        parts.append(char)
        parts.append(self._stream.take_whitespace())

        value = self._value()
        if self._depth == 1 and key[1:-1] == VERSION_KEY:
            self._capture_version(value)
            parts.append(f'"{self._placeholder}"')
        else:
            parts.append(value)
        return "".join(parts)

    def _capture_version(self, literal: str) -> None:
        if len(literal) < 2 or not (literal.startswith('"') and literal.endswith('"')):
            raise InvalidVersionError(literal)
        try:
            version = Version.parse(literal[1:-1])
        except InvalidVersionError:
            raise InvalidVersionError(literal) from None

        if self._version is not None:
            raise DuplicateVersionError()
        self._version = version
        logger.debug("Top-level version found", version=str(version))

    def _array(self) -> str:
        self._stream.next()
        self._depth += 1
        parts = ["["]
        expecting_value = True
        after_comma = False

        while True:
            char = self._stream.peek()
            if char is None:
                raise UnexpectedEndError("array", self._stream.position)
            if char == "]":
                if after_comma:
                    raise UnexpectedCharacterError(char, self._stream.position)
                self._stream.next()
                parts.append(char)
                break
            if char == ",":
                if expecting_value:
                    raise UnexpectedCharacterError(char, self._stream.position)
                self._stream.next()
                parts.append(char)
                expecting_value = after_comma = True
            elif char in WHITESPACE:
                parts.append(self._stream.take_whitespace())
            else:
                if not expecting_value:
                    raise UnexpectedCharacterError(char, self._stream.position)
                parts.append(self._value())
                expecting_value = after_comma = False

        self._depth -= 1
        return "".join(parts)


def parse_json(text: str) -> ParsedDocument:
    """Walk ``text`` and lift out its top-level version."""
    return JsonWalker(text).walk()
