"""Utility functions for SepsisWatch."""

from .config import Config, get_config, load_env_config, reset_config
from .cache import cached_parse_payload, cached_load_sample_file, clear_cache

__all__ = [
    "Config",
    "get_config",
    "load_env_config",
    "reset_config",
    "cached_parse_payload",
    "cached_load_sample_file",
    "clear_cache",
]
