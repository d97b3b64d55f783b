# PCG32 PRNG for deterministic draws (no external deps)
# Source: O'Neill's pcg32 reference (pcg_basic.c), 64-bit state, 32-bit output
import copy
from dataclasses import dataclass, field

from .bits import (
    F32_ONE_BITS,
    F64_ONE_BITS,
    MASK32,
    f32_from_bits,
    f64_from_bits,
    rotr32,
    to_uint32,
    to_uint64,
)
from .models import GeneratorState

PCG32_MULTIPLIER = 0x5851F42D4C957F2D
PCG32_DEFAULT_STATE = 0x853C49E6748FEA9B
PCG32_DEFAULT_STREAM = 0xDA3E39CB94B95BDB


@dataclass
class PCG32:
    """PCG32 generator: 64-bit LCG state permuted down to 32-bit outputs.

    ``PCG32()`` starts from the classic default ``(state, stream)`` pair as-is.
    Use :meth:`with_seed` or :meth:`with_seed_and_sequence` for seeded streams.
    Instances are single-owner and mutated in place by every draw.
    """

    _state: int = field(default=PCG32_DEFAULT_STATE, init=False)
    _stream: int = field(default=PCG32_DEFAULT_STREAM, init=False)

    @classmethod
    def with_seed_and_sequence(cls, initial_state: int, sequence: int) -> "PCG32":
        rng = cls()
        rng._state = 0
        # shifting out the top bit of sequence keeps the increment odd
        rng._stream = to_uint64((sequence << 1) | 1)
        rng.next_u32()
        rng._state = to_uint64(rng._state + initial_state)
        rng.next_u32()
        return rng

    @classmethod
    def with_seed(cls, initial_state: int) -> "PCG32":
        return cls.with_seed_and_sequence(initial_state, 1)

    @classmethod
    def restore(cls, snapshot: GeneratorState) -> "PCG32":
        """Resume a generator from a :class:`GeneratorState` captured earlier."""
        rng = cls()
        rng._state = snapshot.state
        rng._stream = snapshot.stream
        return rng

    @property
    def state(self) -> int:
        return self._state

    @property
    def stream(self) -> int:
        return self._stream

    def __repr__(self) -> str:
        return f"PCG32(state={self._state:#018x}, stream={self._stream:#018x})"

    def next_u32(self) -> int:
        oldstate = self._state
        self._state = to_uint64(oldstate * PCG32_MULTIPLIER + self._stream)
        xorshifted = to_uint32(((oldstate >> 18) ^ oldstate) >> 27)
        rot = oldstate >> 59
        return rotr32(xorshifted, rot)

    def next_f32(self) -> float:
        """Single-precision draw in [0, 1) carrying 23 random mantissa bits."""
        return f32_from_bits((self.next_u32() >> 9) | F32_ONE_BITS) - 1.0

    def next_f64(self) -> float:
        """Double-precision draw in [0, 1) from a single ``next_u32`` call.

        Only the upper 32 of the 52 mantissa bits are random; the rest stay
        zero. Build a [1, 2) double from bits and subtract 1.
        """
        return f64_from_bits((self.next_u32() << 20) | F64_ONE_BITS) - 1.0

    def random(self) -> float:
        return self.next_f64()

    def next_bounded(self, bound: int) -> int:
        """Uniform integer in ``[0, bound)`` without modulo bias."""
        if not 1 <= bound <= MASK32 + 1:
            raise ValueError(f"bound must be within 1..2**32, received {bound}")
        # rejecting the lowest 2**32 % bound outputs leaves an exact multiple of bound
        threshold = (MASK32 + 1 - bound) % bound
        while True:
            r = self.next_u32()
            if r >= threshold:
                return r % bound

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b
        if b < a:
            raise ValueError(f"empty range for randint({a}, {b})")
        return a + self.next_bounded(b - a + 1)

    def advance(self, delta: int) -> None:
        """Jump ahead ``delta`` steps in O(log delta); negative values step back."""
        delta = to_uint64(delta)
        cur_mult = PCG32_MULTIPLIER
        cur_plus = self._stream
        acc_mult = 1
        acc_plus = 0
        while delta > 0:
            if delta & 1:
                acc_mult = to_uint64(acc_mult * cur_mult)
                acc_plus = to_uint64(acc_plus * cur_mult + cur_plus)
            cur_plus = to_uint64((cur_mult + 1) * cur_plus)
            cur_mult = to_uint64(cur_mult * cur_mult)
            delta >>= 1
        self._state = to_uint64(acc_mult * self._state + acc_plus)

    def clone(self) -> "PCG32":
        return copy.copy(self)

    def snapshot(self) -> GeneratorState:
        return GeneratorState(state=self._state, stream=self._stream)
