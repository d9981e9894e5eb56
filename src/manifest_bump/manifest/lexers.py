"""Scalar lexers that reproduce JSON tokens exactly as written."""

from ..core.constants import NUMBER_LIKE_CHARS, VALUE_TERMINATORS, WHITESPACE
from ..core.exceptions import UnexpectedCharacterError, UnexpectedEndError


class CharStream:
    """Forward-only cursor over document text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self.position = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self._text)

    def peek(self) -> str | None:
        if self.at_end:
            return None
        return self._text[self.position]

    def next(self) -> str | None:
        char = self.peek()
        if char is not None:
            self.position += 1
        return char

    def take_whitespace(self) -> str:
        """Consume a run of JSON whitespace and return it unchanged."""
        start = self.position
        while self.peek() in WHITESPACE:
            self.position += 1
        return self._text[start : self.position]


def lex_string(stream: CharStream) -> str:
    """Consume a string literal, quotes and escapes included.

    A backslash escapes exactly the following character, so ``\\\\`` leaves
    no pending escape and ``\\"`` does not terminate the literal.
    """
    opening = stream.next()
    if opening is None:
        raise UnexpectedEndError("json", stream.position)
    if opening != '"':
        raise UnexpectedCharacterError(opening, stream.position - 1)

    chars = [opening]
    escaped = False
    while True:
        char = stream.next()
        if char is None:
            raise UnexpectedEndError("string", stream.position)
        chars.append(char)
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            return "".join(chars)


def lex_number_like(stream: CharStream) -> str:
    """Consume a number, ``true``, ``false`` or ``null`` token.

    All of them are matched by one character class, so scientific notation,
    signs and fractions come through without interpretation.
    """
    chars: list[str] = []
    while True:
        char = stream.peek()
        if char is None or char in VALUE_TERMINATORS or char in WHITESPACE:
            return "".join(chars)
        if char not in NUMBER_LIKE_CHARS:
            raise UnexpectedCharacterError(char, stream.position)
        chars.append(char)
        stream.next()
