"""prngseq - deterministic pseudo-random sequences written as CSV."""

__version__ = "0.1.0"
__description__ = "Deterministic pseudo-random number sequences from classic generators"

from .core.generator import BaseGenerator, GeneratorConfig
from .core.registry import PluginRegistry, register_generator
from .errors import OutputUnopenableError, OutputWriteError, PrngSeqError, UnknownGeneratorError
from . import generators  # noqa: F401  (registers the built-in generators)


def create(name: str, seed: int = 0, **fields) -> BaseGenerator:
    """Build the generator registered as ``name`` with its own config class."""
    config = PluginRegistry.config_class(name)(seed=seed, **fields)
    return PluginRegistry.create_generator(name, config)


__all__ = [
    "BaseGenerator",
    "GeneratorConfig",
    "OutputUnopenableError",
    "OutputWriteError",
    "PluginRegistry",
    "PrngSeqError",
    "UnknownGeneratorError",
    "create",
    "register_generator",
]
