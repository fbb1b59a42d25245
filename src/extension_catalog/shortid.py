"""Short, shareable codes derived from extension identifiers.

Codes are drawn from a 62 symbol alphabet and are deliberately tiny, so
distinct identifiers may collide. They are a display convenience rather
than an identity scheme and no collision resolution is attempted.
"""

from __future__ import annotations
import re


HASH_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
HASH_CHAR_ENCODE_LENGTH = len(HASH_ALPHABET)
HASH_MAX_LENGTH = 3
MAX_HASH_CODE = sum(HASH_CHAR_ENCODE_LENGTH**i for i in range(1, HASH_MAX_LENGTH + 1))

_SHORT_ID_PREFIX = re.compile(r"^(io\.quarkus:)?(quarkus-)?")


def string_hash(value: str) -> int:
    """Return the signed 32-bit polynomial hash of ``value``.

    The hash walks UTF-16 code units with ``h = 31 * h + unit`` so results are
    stable across interpreter runs, unlike the salted built-in ``hash``.
    """
    h = 0
    encoded = value.encode("utf-16-be", "surrogatepass")
    for index in range(0, len(encoded), 2):
        unit = (encoded[index] << 8) | encoded[index + 1]
        h = (31 * h + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def shorten(value: str) -> str:
    """Shorten ``value`` into a code of at most a few alphabet symbols."""
    res = abs(string_hash(value)) % MAX_HASH_CODE
    code = ""
    while True:
        code = HASH_ALPHABET[res % HASH_CHAR_ENCODE_LENGTH] + code
        res //= HASH_CHAR_ENCODE_LENGTH
        if res == 0:
            return code


def normalize_short_id_source(extension_id: str) -> str:
    """Strip the well-known group qualifier and artifact prefix from an id."""
    return _SHORT_ID_PREFIX.sub("", extension_id, count=1)


def create_short_id(extension_id: str) -> str:
    """Return the short id for an extension management key."""
    return shorten(normalize_short_id_source(extension_id))


__all__ = [
    "HASH_ALPHABET",
    "HASH_CHAR_ENCODE_LENGTH",
    "HASH_MAX_LENGTH",
    "MAX_HASH_CODE",
    "create_short_id",
    "normalize_short_id_source",
    "shorten",
    "string_hash",
]
