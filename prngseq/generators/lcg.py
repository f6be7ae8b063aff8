from pydantic import Field

from ..core.generator import BaseGenerator, GeneratorConfig, UINT32_MASK, UINT64_MASK
from ..core.registry import register_generator


class LCGConfig(GeneratorConfig):
    """Configuration for the linear congruential generator."""

    # x_{n+1} = (a * x_n + c) mod m
    multiplier: int = Field(default=1664525, ge=0, le=UINT64_MASK, strict=True)
    increment: int = Field(default=1013904223, ge=0, le=UINT64_MASK, strict=True)
    modulus: int = Field(default=1 << 32, ge=1, le=UINT64_MASK, strict=True)


@register_generator("lcg")
class LCGGenerator(BaseGenerator):
    """Linear congruential generator, Numerical Recipes constants by default.

    The product ``a * x + c`` wraps at 64 bits before the modulus is
    taken. For the default modulus of 2**32 that is the exact result.
    """

    config_class = LCGConfig

    def __init__(self, config: LCGConfig):
        self.a = config.multiplier
        self.c = config.increment
        self.m = config.modulus
        super().__init__(config)

    def _reset(self, seed: int) -> None:
        # Raw 64-bit seed; the first draw reduces it mod m.
        self.state = seed

    def next_u32(self) -> int:
        self.state = ((self.a * self.state + self.c) & UINT64_MASK) % self.m
        return self.state & UINT32_MASK

    def next_double(self) -> float:
        return self.next_u32() / float(self.m)
