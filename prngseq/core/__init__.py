"""Core prngseq components - stable abstractions."""

from .generator import BaseGenerator, GeneratorConfig
from .registry import PluginRegistry, register_generator

__all__ = ["BaseGenerator", "GeneratorConfig", "PluginRegistry", "register_generator"]
