"""
Bit-level parsers over bytes-like input.

The state index counts bits; bits are read most-significant first within
each byte. Everything here is built on `bit()`.
"""
from typing import List

from .Parsec import Parser, State
from .Prim import expect
from .Combinators import count, sequence_of

BITS_PER_BYTE = 8
MAX_WIDTH = 32


def bit() -> Parser[int]:
    """Reads a single bit as 0 or 1."""
    def parse(state: State) -> State:
        byte_offset = state.index // BITS_PER_BYTE
        if byte_offset >= len(state.input):
            return state.with_error("Bit: Unexpected end of input")
        byte = state.input[byte_offset]
        bit_offset = BITS_PER_BYTE - 1 - (state.index % BITS_PER_BYTE)
        return state.advance(state.index + 1, (byte >> bit_offset) & 1)
    return Parser(parse)

def zero() -> Parser[int]:
    return bit().chain(expect(0, lambda value, index: f"Zero: Expected 0, but got {value} at index {index}"))

def one() -> Parser[int]:
    return bit().chain(expect(1, lambda value, index: f"One: Expected 1, but got {value} at index {index}"))

def _check_width(name: str, n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"{name}: n must be an integer, but got {n!r}")
    if n < 1:
        raise ValueError(f"{name}: n must be larger than 0, but got {n}")
    if n > MAX_WIDTH:
        raise ValueError(f"{name}: n must be at most {MAX_WIDTH}, but got {n}")

def _fold_bits(bits: List[int]) -> int:
    value = 0
    for b in bits:
        value = (value << 1) | b
    return value

def uint(n: int) -> Parser[int]:
    """Unsigned big-endian integer of n bits (1 <= n <= 32)."""
    _check_width("Uint", n)
    return count(n, bit()).map(_fold_bits)

def sint(n: int) -> Parser[int]:
    """Two's-complement signed integer of n bits (1 <= n <= 32)."""
    _check_width("Int", n)

    # i.e. 0b1100 as 4 bits: low bits 0b100 == 4, sign bit worth 8, so 4 - 8 == -4
    def to_signed(bits: List[int]) -> int:
        return _fold_bits(bits[1:]) - (bits[0] << (n - 1))
    return count(n, bit()).map(to_signed)

def raw_string(s: str) -> Parser[str]:
    """Matches the bytes of a one-byte-per-character literal and returns the literal."""
    if not s:
        raise ValueError("RawString: s must be at least 1 character")
    for c in s:
        if ord(c) > 0xFF:
            raise ValueError(f"RawString: {c!r} does not fit in a single byte")

    def byte_of(c: str) -> Parser[int]:
        return uint(BITS_PER_BYTE).chain(
            expect(ord(c), lambda value, _: f"RawString: Expected {c!r}, but got {chr(value)!r}")
        )

    return sequence_of(*[byte_of(c) for c in s]).map(lambda _: s)
