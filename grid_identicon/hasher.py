"""Identifier hashing.

The digest is computed over the ASCII bytes of the identifier's canonical
decimal string, not over its binary encoding, so ``7``, ``"7"`` and
``"007"`` all map to the same identicon.
"""

import hashlib
import re
from typing import Union

from grid_identicon.errors import InvalidInput
from grid_identicon.types import Digest, Identifier

DIGEST_SIZE = 16

# CPython refuses int<->str conversions past 4300 digits by default
MAX_IDENTIFIER_DIGITS = 4300
_IDENTIFIER_LIMIT = 10**MAX_IDENTIFIER_DIGITS

_DECIMAL_RE = re.compile(r"[0-9]+")


def parse_identifier(value: Union[int, str]) -> Identifier:
    """Validate ``value`` and return it as a non-negative ``int``.

    Strings must consist of ASCII decimal digits (surrounding whitespace is
    ignored). Booleans are rejected even though they subclass ``int``.
    Identifiers are limited to ``MAX_IDENTIFIER_DIGITS`` significant digits.

    Raises:
        InvalidInput: If the value is negative, non-numeric or of another type.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"Identifier must be an integer, got bool: {value!r}")
    if isinstance(value, int):
        if abs(value) >= _IDENTIFIER_LIMIT:
            raise InvalidInput(
                f"Identifier must have at most {MAX_IDENTIFIER_DIGITS} digits"
            )
        if value < 0:
            raise InvalidInput(f"Identifier must be non-negative, got {value}")
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidInput(
                f"Identifier must be a non-negative decimal integer, got {value!r}"
            )
        digits = text.lstrip("0") or "0"
        if len(digits) > MAX_IDENTIFIER_DIGITS:
            raise InvalidInput(
                f"Identifier must have at most {MAX_IDENTIFIER_DIGITS} digits, "
                f"got {len(digits)}"
            )
        return int(digits)
    raise InvalidInput(
        f"Identifier must be an int or str, got {type(value).__name__}"
    )


def canonical_form(identifier: Union[int, str]) -> str:
    """Return the decimal string that gets hashed for ``identifier``."""
    return str(parse_identifier(identifier))


def hash_identifier(identifier: Union[int, str]) -> Digest:
    """Return the 16-byte MD5 digest of the identifier's canonical form."""
    data = canonical_form(identifier).encode("ascii")
    return hashlib.md5(data, usedforsecurity=False).digest()


__all__ = [
    "DIGEST_SIZE",
    "MAX_IDENTIFIER_DIGITS",
    "parse_identifier", "canonical_form", "hash_identifier"]
