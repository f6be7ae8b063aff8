from ..core.generator import BaseGenerator, UINT32_MASK
from ..core.registry import register_generator

# Zero is a fixed point of the xorshift recurrence.
ZERO_SEED_FALLBACK = 1


@register_generator("xorshift32")
class Xorshift32Generator(BaseGenerator):
    """Marsaglia's 32-bit xorshift with the 13/17/5 triple.

    ``next_double`` divides by 2**32 - 1, so 1.0 itself is reachable.
    """

    def _reset(self, seed: int) -> None:
        self.state = (seed & UINT32_MASK) or ZERO_SEED_FALLBACK

    def next_u32(self) -> int:
        x = self.state
        x ^= (x << 13) & UINT32_MASK
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MASK
        self.state = x
        return x

    def next_double(self) -> float:
        return self.next_u32() / float(UINT32_MASK)
