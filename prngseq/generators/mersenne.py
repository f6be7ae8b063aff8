"""
MT19937 backed by numpy's legacy Mersenne Twister engine.

``numpy.random.RandomState`` seeds an integer with the reference
``init_genrand`` routine, so its raw 32-bit stream is the one C++
``std::mt19937(seed)`` produces. Doubles follow GNU libstdc++'s
``uniform_real_distribution<double>``: two draws combined as
``(lo + hi * 2**32) / 2**64``, clamped below 1.0.
"""

import math

import numpy as np

from ..core.generator import BaseGenerator, UINT32_MASK
from ..core.registry import register_generator

_TWO_32 = 4294967296.0
_TWO_64 = 18446744073709551616.0
_BELOW_ONE = math.nextafter(1.0, 0.0)


@register_generator("mt19937")
class MT19937Generator(BaseGenerator):
    """32-bit Mersenne Twister seeded from the low 32 bits of the seed."""

    def _reset(self, seed: int) -> None:
        self._engine = np.random.RandomState(seed & UINT32_MASK)

    def next_u32(self) -> int:
        # A full-range uint32 draw returns the engine output unchanged.
        return int(self._engine.randint(0, 1 << 32, dtype=np.uint32))

    def next_double(self) -> float:
        lo = float(self.next_u32())
        hi = float(self.next_u32())
        value = (lo + hi * _TWO_32) / _TWO_64
        if value >= 1.0:
            return _BELOW_ONE
        return value
