"""Configuration package."""

from .generator_config import GeneratorConfig, get_config, reset_config

__all__ = ["GeneratorConfig", "get_config", "reset_config"]
