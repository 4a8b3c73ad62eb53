from .loader import ConfigError, build_mapping, load_config

__all__ = [
    "ConfigError",
    "build_mapping",
    "load_config",
]
