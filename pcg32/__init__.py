"""Public package surface for the PCG32 generator."""

from .models import GeneratorState
from .prng import PCG32
from .sampling import SampleConfig, draw_samples

__all__ = [
    "GeneratorState",
    "PCG32",
    "SampleConfig",
    "draw_samples",
]
