"""Scaffolding strategies and the single point that selects one."""

from scaffold_bridge.config import BridgeConfig
from scaffold_bridge.errors import ValidationError

from .base import ScaffoldingStrategy
from .external import ExternalProcessStrategy, GeneratorVersionWarning
from .inprocess import InProcessStrategy, ScaffoldingGenerator, load_generator


def select_strategy(config: BridgeConfig) -> ScaffoldingStrategy:
    """Build the one strategy a bridge will use for its whole lifetime."""
    if config.strategy == "external":
        return ExternalProcessStrategy(
            executable=config.executable,
            timeout=config.timeout,
            required_version=config.required_version,
            version_policy=config.version_policy,
        )
    if config.strategy == "inprocess":
        return InProcessStrategy(generator_ref=config.generator)
    raise ValidationError(f"Unsupported strategy value: {config.strategy}")


__all__ = [
    "ExternalProcessStrategy",
    "GeneratorVersionWarning",
    "InProcessStrategy",
    "ScaffoldingGenerator",
    "ScaffoldingStrategy",
    "load_generator",
    "select_strategy",
]
