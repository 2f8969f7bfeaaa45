"""Tokeniser for the textual shape description format."""

from __future__ import annotations

import string

_TOKENS = ("Circle", "Rectangle", "Triangle", "CompoundShape", "Vector", "(", ")", ",")
_DIGITS = frozenset(string.digits)
_SIGNIFICANT = frozenset(string.ascii_letters + string.digits + "(),-\0")


class ScanError(Exception):
    """Raised when the input does not hold the expected token or number."""


class Scanner:
    """Reads keywords, punctuation and numbers, skipping anything else."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._pos = 0

    def _skip_other_characters(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] not in _SIGNIFICANT:
            self._pos += 1

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def next(self) -> str:
        """Return the next keyword or punctuation token."""
        self._skip_other_characters()
        for token in _TOKENS:
            if self._text.startswith(token, self._pos):
                self._pos += len(token)
                return token
        raise ScanError("Invalid Input")

    def next_double(self) -> float:
        """Return the next number, with an optional sign and fraction."""
        self._skip_other_characters()
        chars: list[str] = []
        if self._peek() == "-":
            chars.append("-")
            self._pos += 1
        if self._peek() not in _DIGITS:
            raise ScanError("Invalid Input")
        self._take_digits(chars)
        if self._peek() == ".":
            chars.append(".")
            self._pos += 1
        self._take_digits(chars)
        return float("".join(chars))

    def _take_digits(self, chars: list[str]) -> None:
        while self._peek() in _DIGITS:
            chars.append(self._text[self._pos])
            self._pos += 1

    def is_done(self) -> bool:
        self._skip_other_characters()
        return self._pos == len(self._text)