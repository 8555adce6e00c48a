"""Base-32 codecs used by identifiers and owner keys.

Both alphabets follow RFC 4648 bit grouping (5 bits per character, most
significant first) without padding; only the symbol table differs:

- Crockford: ``0123456789ABCDEFGHJKMNPQRSTVWXYZ`` (object identifiers).
  Decoding is case-insensitive and accepts ``O`` for ``0`` and ``I``/``L``
  for ``1``.
- z-base-32: ``ybndrfg8ejkmcpqxot1uwisza345h769`` (owner public keys).
  Decoding is case-insensitive.
"""

from __future__ import annotations

import base64
import binascii
from enum import StrEnum

_RFC4648 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ZBASE32_ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"


class Alphabet(StrEnum):
    """Supported base-32 symbol tables."""

    CROCKFORD = "crockford"
    ZBASE32 = "zbase32"


_SYMBOLS: dict[Alphabet, str] = {
    Alphabet.CROCKFORD: CROCKFORD_ALPHABET,
    Alphabet.ZBASE32: ZBASE32_ALPHABET,
}

_TO_ALPHABET: dict[Alphabet, dict[int, str]] = {
    name: str.maketrans(_RFC4648, symbols) for name, symbols in _SYMBOLS.items()
}
_FROM_ALPHABET: dict[Alphabet, dict[int, str]] = {
    name: str.maketrans(symbols, _RFC4648) for name, symbols in _SYMBOLS.items()
}

# Crockford decoding aliases for visually ambiguous characters.
_CROCKFORD_ALIASES = str.maketrans({"O": "0", "I": "1", "L": "1"})


def encode(data: bytes, alphabet: Alphabet = Alphabet.CROCKFORD) -> str:
    """Encode *data* as unpadded base-32 text in *alphabet*."""
    rfc = base64.b32encode(data).decode("ascii").rstrip("=")
    return rfc.translate(_TO_ALPHABET[alphabet])


def decode(text: str, alphabet: Alphabet = Alphabet.CROCKFORD) -> bytes:
    """Decode unpadded base-32 *text* in *alphabet*.

    Trailing bits that do not fill a whole byte are discarded, as an encoder
    would have produced them from zero padding.

    Raises:
        ValueError: If *text* contains a symbol outside the alphabet or has a
            length no encoder can produce.
    """
    if not text.isascii():
        msg = "base-32 text must be ASCII"
        raise ValueError(msg)

    if alphabet is Alphabet.CROCKFORD:
        normalized = text.upper().translate(_CROCKFORD_ALIASES)
    else:
        normalized = text.lower()

    symbols = _SYMBOLS[alphabet]
    for char in normalized:
        if char not in symbols:
            msg = f"invalid {alphabet} symbol: {char!r}"
            raise ValueError(msg)

    rfc = normalized.translate(_FROM_ALPHABET[alphabet])
    padded = rfc + "=" * (-len(rfc) % 8)
    try:
        return base64.b32decode(padded)
    except binascii.Error as exc:
        msg = f"invalid {alphabet} length: {len(text)}"
        raise ValueError(msg) from exc
