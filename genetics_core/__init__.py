"""
genetics_core - settings, logging and command line support for genetics.
"""

from genetics_core.config import (
    Config,
    EvolutionSettings,
    LoggingSettings,
    build_evolver_configuration,
    get_config,
)
from genetics_core.logging_config import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "Config",
    "EvolutionSettings",
    "LoggingSettings",
    "build_evolver_configuration",
    "get_config",
    "configure_logging",
    "get_logger",
]
