"""Loading of language word lists stored as big-endian UTF-32 text."""

from __future__ import annotations

from typing import BinaryIO

_UNIT = 4
_SEPARATORS = frozenset({0, ord("\n"), ord("\r")})


class LanguageLoadError(Exception):
    """Raised when a language file cannot be read or decoded."""


def _code_units(data: bytes):
    for start in range(0, len(data), _UNIT):
        yield int.from_bytes(data[start:start + _UNIT], "big")


def _to_text(units: list[int]) -> str:
    try:
        return "".join(map(chr, units))
    except (ValueError, OverflowError) as error:
        raise LanguageLoadError("Invalid code point in language file") from error


def parse_words(data: bytes) -> list[str]:
    """Split big-endian UTF-32 ``data`` into non-empty lines.

    The first code unit (the byte order mark) is skipped; NUL, LF and CR
    separate words, and empty words are dropped.
    """
    if len(data) % _UNIT:
        raise LanguageLoadError("Language file is not made of whole code units")
    units = _code_units(data)
    next(units, None)
    words: list[str] = []
    current: list[int] = []
    for unit in units:
        if unit in _SEPARATORS:
            if current:
                words.append(_to_text(current))
            current = []
        else:
            current.append(unit)
    if current:
        words.append(_to_text(current))
    return words


def load_language(stream: BinaryIO) -> list[str]:
    """Read a whole binary stream and return its words."""
    try:
        data = stream.read()
    except OSError as error:
        raise LanguageLoadError("Language file reading failure") from error
    if not isinstance(data, (bytes, bytearray)):
        raise LanguageLoadError("Language file reading failure")
    return parse_words(bytes(data))