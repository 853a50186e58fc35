"""
Quoting rules for values stored in environment files.

Values may be written bare, wrapped in single quotes (everything literal) or
wrapped in double quotes (backslash escapes). Quoted and bare segments can be
mixed inside a single value, so ``a'b c'd`` reads back as ``ab cd``.
"""

from __future__ import annotations

from typing import Dict, Iterator, Tuple


class UnescapeError(ValueError):
    """Raised when a quoted value cannot be decoded."""

    def __init__(self, message: str, index: int):
        super().__init__(f"{message} at index {index}")
        self.index = index


SAFE_PUNCTUATION = frozenset("-_.,:/=+@%^")

_ESCAPES: Dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
    "e": "\x1b",
    "E": "\x1b",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "$": "$",
    "`": "`",
    " ": " ",
}

# Preferred spelling when writing; \e wins over \E.
_REVERSE_ESCAPES: Dict[str, str] = {
    "\a": "a",
    "\b": "b",
    "\t": "t",
    "\n": "n",
    "\v": "v",
    "\f": "f",
    "\r": "r",
    "\x1b": "e",
    "\\": "\\",
    '"': '"',
    "$": "$",
    "`": "`",
}


def _read_unicode(chars: Iterator[Tuple[int, str]], start: int) -> str:
    index, opening = next(chars, (start, ""))
    if opening != "{":
        raise UnescapeError("expected '{' after \\u", index)

    digits = ""
    for index, char in chars:
        if char == "}":
            break
        if char not in "0123456789abcdefABCDEF" or len(digits) == 6:
            raise UnescapeError(f"invalid unicode escape character {char!r}", index)
        digits += char
    else:
        raise UnescapeError("unterminated unicode escape", start)

    if not digits:
        raise UnescapeError("empty unicode escape", start)
    codepoint = int(digits, 16)
    if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        raise UnescapeError(f"invalid unicode code point {digits}", start)
    return chr(codepoint)


def unescape(text: str) -> str:
    """
    Decode a possibly quoted value into its literal content.

    Raises :class:`UnescapeError` for an unknown escape sequence, a dangling
    backslash inside double quotes, or a quote that is never closed.
    """

    result = []
    quote = ""
    quote_start = 0
    chars = iter(enumerate(text))
    for index, char in chars:
        if quote == "'":
            if char == "'":
                quote = ""
                continue
        elif quote == '"':
            if char == '"':
                quote = ""
                continue
            if char == "\\":
                escape_index, code = next(chars, (index, ""))
                if not code:
                    raise UnescapeError("dangling backslash", index)
                if code == "u":
                    result.append(_read_unicode(chars, escape_index))
                    continue
                if code not in _ESCAPES:
                    raise UnescapeError(f"unknown escape sequence \\{code}", index)
                result.append(_ESCAPES[code])
                continue
        elif char in "'\"":
            quote = char
            quote_start = index
            continue
        result.append(char)

    if quote:
        raise UnescapeError("unterminated quote", quote_start)
    return "".join(result)


def _is_safe(char: str) -> bool:
    return char.isalnum() or char in SAFE_PUNCTUATION


def escape(value: str) -> str:
    """
    Return ``value`` quoted only as much as needed to read it back unchanged.

    Lone surrogates have no UTF-8 encoding and raise :class:`ValueError`.
    """

    if all(_is_safe(char) for char in value):
        return value
    if "'" not in value and value.isprintable():
        return f"'{value}'"

    parts = ['"']
    for char in value:
        if char in _REVERSE_ESCAPES:
            parts.append("\\" + _REVERSE_ESCAPES[char])
        elif 0xD800 <= ord(char) <= 0xDFFF:
            raise ValueError(f"cannot escape lone surrogate U+{ord(char):04X}")
        elif not char.isprintable():
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


__all__ = ["UnescapeError", "escape", "unescape"]
