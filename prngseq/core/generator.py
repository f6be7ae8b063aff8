from abc import ABC, abstractmethod
from typing import ClassVar, Iterator, Optional, Type

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator


UINT32_MASK = 0xFFFFFFFF
UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Seeding
    seed: int = Field(default=0, ge=0, le=UINT64_MASK, strict=True, description="Seed, any unsigned 64-bit value")

    # Sequence length and rendering
    count: int = Field(default=0, ge=0, strict=True, description="Number of values to draw")
    float_format: Optional[str] = Field(
        default=None,
        description="Python format spec for values (e.g. '.6g'); shortest round-trip repr when unset",
    )

    @field_validator("float_format")
    @classmethod
    def validate_float_format(cls, v):
        """Reject format specs that cannot render a float."""
        if v is not None:
            try:
                format(0.5, v)
            except (ValueError, TypeError) as exc:
                raise ValueError(f"invalid float format {v!r}: {exc}") from exc
        return v


class BaseGenerator(ABC):
    """Shared contract for every sequence generator.

    Subclasses keep only the integer state their recurrence needs, set it
    up in ``_reset`` and advance it in ``next_u32``.
    """

    config_class: ClassVar[Type[GeneratorConfig]] = GeneratorConfig

    def __init__(self, config: GeneratorConfig):
        self.config = config
        self._records_generated = 0
        self._reset(config.seed)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def seed(self) -> int:
        return self.config.seed

    @property
    def records_generated(self) -> int:
        return self._records_generated

    def reset(self) -> None:
        """Return to the state right after construction."""
        self._records_generated = 0
        self._reset(self.config.seed)

    @abstractmethod
    def _reset(self, seed: int) -> None:
        pass

    @abstractmethod
    def next_u32(self) -> int:
        pass

    @abstractmethod
    def next_double(self) -> float:
        pass

    def stream(self) -> Iterator[float]:
        """Yield ``config.count`` values in generation order."""
        for _ in range(self.config.count):
            value = self.next_double()
            self._records_generated += 1
            yield value

    def sample(self, n: int) -> np.ndarray:
        """Draw ``n`` values into a float64 array."""
        if n < 0:
            raise ValueError("sample size must be non-negative")
        out = np.empty(n, dtype=np.float64)
        for i in range(n):
            out[i] = self.next_double()
        self._records_generated += n
        return out
