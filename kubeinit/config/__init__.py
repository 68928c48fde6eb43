"""
Config Module - Black Box Interface

Purpose: Supply the init step with connection values, debug flag and paths
Interface: EnvConfigProvider, FileConfigProvider, get_step_config()
Hidden: Environment variable aliases, settings file parsing
"""

from .provider import (
    ConfigProvider,
    EnvConfigProvider,
    FileConfigProvider,
    StepConfig,
    StepSettings,
)

__all__ = [
    "ConfigProvider",
    "EnvConfigProvider",
    "FileConfigProvider",
    "StepConfig",
    "StepSettings",
]
