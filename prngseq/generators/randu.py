from ..core.generator import BaseGenerator, UINT32_MASK
from ..core.registry import register_generator

RANDU_MULTIPLIER = 65539
RANDU_MODULUS = 1 << 31


@register_generator("randu")
class RANDUGenerator(BaseGenerator):
    """IBM's RANDU: x_{n+1} = 65539 * x_n mod 2**31."""

    def _reset(self, seed: int) -> None:
        self.state = seed & UINT32_MASK

    def next_u32(self) -> int:
        self.state = (RANDU_MULTIPLIER * self.state) % RANDU_MODULUS
        return self.state

    def next_double(self) -> float:
        return self.next_u32() / float(RANDU_MODULUS)
