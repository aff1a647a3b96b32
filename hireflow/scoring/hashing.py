"""
Text hashing for seed derivation.

Every synthesizer turns its input text into an integer seed with
:func:`hash_text`.  The hash is the classic ``h * 31 + c`` rolling
hash computed over UTF-16 code units with 32-bit signed wraparound, so
the same text yields the same seed on every platform and in every
process (unlike the built-in :func:`hash`, which is salted per
process).
"""

from __future__ import annotations

_MASK_32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - 0x100000000 if value & _SIGN_BIT else value


def hash_text(text: str) -> int:
    """Hash text into a non-negative integer below or equal to 2**31.

    Characters outside the Basic Multilingual Plane contribute two
    code units (a surrogate pair).  The empty string hashes to 0.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + unit)
    return abs(h)
