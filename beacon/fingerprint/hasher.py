"""Streaming 64-bit fingerprint hash used for every entity identifier.

Modelled on FxHash: each chunk is mixed in with a rotate, xor and multiply by
a large odd constant. It is fast and order sensitive, but it is not a
cryptographic hash and must not be relied on for untrusted collision
resistance.
"""
from __future__ import annotations

MASK64 = (1 << 64) - 1

# Fixed odd multiplier. Changing it changes every stored identifier.
C = 587178100656400245

_CHUNK = 8


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (64 - bits))) & MASK64


def to_signed(value: int) -> int:
    """Reinterpret an unsigned 64-bit value as a signed 64-bit integer."""
    value &= MASK64
    return value - (1 << 64) if value >= 1 << 63 else value


class Hasher:
    """Single-use accumulator: ``write``/``write_bytes`` any number of times,
    then ``finalize`` exactly once."""

    __slots__ = ("_state", "_done")

    def __init__(self) -> None:
        self._state = 0
        self._done = False

    def _check(self) -> None:
        if self._done:
            raise RuntimeError("Hasher already finalized")

    def write(self, chunk: int) -> None:
        # Negative ints are taken as their two's-complement u64 (i32/i64 -> u64 casts).
        self._check()
        self._state = ((_rotl(self._state, 5) ^ (chunk & MASK64)) * C) & MASK64

    def write_bytes(self, data: bytes) -> None:
        self._check()
        view = memoryview(data)
        while len(view) > _CHUNK:
            self.write(int.from_bytes(view[:_CHUNK], "little"))
            view = view[_CHUNK:]
        # Tail (possibly empty) is zero-padded to a full chunk.
        self.write(int.from_bytes(bytes(view).ljust(_CHUNK, b"\0"), "little"))

    def write_str(self, text: str) -> None:
        self.write_bytes(text.encode("utf-8"))

    def finalize(self) -> int:
        self._check()
        self._done = True
        return self._state


def hash_bytes(data: bytes) -> int:
    hasher = Hasher()
    hasher.write_bytes(data)
    return hasher.finalize()
