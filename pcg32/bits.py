"""Fixed-width integer helpers and IEEE-754 construct-from-bits routines."""

import struct

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1

# Bit patterns of 1.0 with an all-zero mantissa.
F32_ONE_BITS = 0x3F800000
F64_ONE_BITS = 0x3FF0000000000000


def to_uint64(value: int) -> int:
    """Clip an integer so that it occupies 64 bits."""
    return value & MASK64


def to_uint32(value: int) -> int:
    """Clip an integer so that it occupies 32 bits."""
    return value & MASK32


def rotr32(value: int, rot: int) -> int:
    """Rotate a 32-bit value right by ``rot`` positions."""
    value = to_uint32(value)
    rot &= 31
    # (-rot) & 31 keeps the left shift in range when rot == 0
    return to_uint32((value >> rot) | (value << ((-rot) & 31)))


def f32_from_bits(bits: int) -> float:
    """Reinterpret a 32-bit pattern as an IEEE-754 single-precision float."""
    return struct.unpack("<f", struct.pack("<I", to_uint32(bits)))[0]


def f64_from_bits(bits: int) -> float:
    """Reinterpret a 64-bit pattern as an IEEE-754 double-precision float."""
    return struct.unpack("<d", struct.pack("<Q", to_uint64(bits)))[0]
