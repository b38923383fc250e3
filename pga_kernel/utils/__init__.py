"""
Utility functions for the PGA kernel.

Includes configuration management and the package logger.
"""

from .config import HarnessConfig, load_config, save_config
from .log import get_logger, set_level

__all__ = [
    # Config
    "HarnessConfig",
    "load_config",
    "save_config",
    # Logging
    "get_logger",
    "set_level",
]
