"""Simple text ciphers: Atbash, rotation and run-length encoding."""

from __future__ import annotations

import unicodedata
from itertools import groupby

_REPLACEMENT = "\ufffd"


def _to_char(code: int) -> str:
    """Turn a code point into a character, replacing values that are not valid."""
    if code < 0 or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        return _REPLACEMENT
    return chr(code)


def _is_number(char: str) -> bool:
    return unicodedata.category(char).startswith("N")


def atbash(text: str) -> str:
    """Encode ``text`` with the Atbash cipher, in groups of five characters."""
    encoded = []
    for char in text:
        if _is_number(char):
            encoded.append(char)
        elif char.isalpha():
            code = ord(char.lower()[0])
            encoded.append(_to_char(ord("z") - (code - ord("a"))))
    groups = ("".join(encoded[start:start + 5]) for start in range(0, len(encoded), 5))
    return " ".join(groups).rstrip()


def _rotate_letter(char: str, key: int) -> str:
    code = ord(char)
    upper = code < ord("a")
    code += key
    if code > ord("z") or (upper and code > ord("Z")):
        code -= 26
    return _to_char(code)


def rotate(text: str, key: int) -> str:
    """Shift every letter of ``text`` by ``key`` places through the alphabet."""
    if key in (0, 26):
        return text
    return "".join(_rotate_letter(char, key) if char.isalpha() else char for char in text)


def rle_encode(text: str) -> str:
    """Run-length encode ``text``; runs of one character carry no count."""
    parts = []
    for char, run in groupby(text):
        count = sum(1 for _ in run)
        parts.append(f"{count}{char}" if count > 1 else char)
    return "".join(parts)


def _run_length(digits: str) -> int:
    if not digits:
        return 1
    if digits.isascii() and digits.isdigit():
        return int(digits)
    return 0


def rle_decode(text: str) -> str:
    """Decode run-length encoded ``text``; trailing counts are dropped."""
    decoded = []
    digits = ""
    for char in text:
        if _is_number(char):
            digits += char
            continue
        decoded.append(char * _run_length(digits))
        digits = ""
    return "".join(decoded)