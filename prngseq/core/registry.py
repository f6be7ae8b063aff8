from typing import Dict, Type, List, Optional
import importlib
import logging
import pkgutil
from pathlib import Path

from .generator import BaseGenerator, GeneratorConfig
from ..errors import UnknownGeneratorError

logger = logging.getLogger(__name__)


class PluginRegistry:
    _instance: Optional["PluginRegistry"] = None
    _generators: Dict[str, Type[BaseGenerator]] = {}

    def __new__(cls) -> "PluginRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def register(cls, name: str, generator_class: Type[BaseGenerator]) -> None:
        if not (isinstance(generator_class, type) and issubclass(generator_class, BaseGenerator)):
            raise ValueError(f"Generator {generator_class} must inherit from BaseGenerator")
        cls._generators[name] = generator_class

    @classmethod
    def get_generator(cls, name: str) -> Optional[Type[BaseGenerator]]:
        return cls._generators.get(name)

    @classmethod
    def list_generators(cls) -> List[str]:
        return list(cls._generators.keys())

    @classmethod
    def config_class(cls, name: str) -> Type[GeneratorConfig]:
        generator_class = cls.get_generator(name)
        if generator_class is None:
            raise UnknownGeneratorError(name)
        return generator_class.config_class

    @classmethod
    def create_generator(cls, name: str, config: GeneratorConfig) -> BaseGenerator:
        generator_class = cls.get_generator(name)
        if generator_class is None:
            raise UnknownGeneratorError(name)
        return generator_class(config)

    @classmethod
    def discover_generators(cls, package_path: str = "prngseq.generators") -> None:
        try:
            package = importlib.import_module(package_path)
        except ImportError:
            logger.warning("Generator package %s not importable", package_path)
            return

        package_dir = Path(package.__file__).parent

        # Walk through all Python modules in the generators package
        for _, module_name, _ in pkgutil.iter_modules([str(package_dir)]):
            module_path = f"{package_path}.{module_name}"
            try:
                importlib.import_module(module_path)
            except ImportError as e:
                logger.warning("Skipping generator module %s: %s", module_path, e)
                continue
        logger.debug("Registered generators: %s", ", ".join(cls.list_generators()))


def register_generator(name: str):
    def decorator(cls: Type[BaseGenerator]) -> Type[BaseGenerator]:
        PluginRegistry.register(name, cls)
        return cls
    return decorator
