"""rtbench utilities - environment and logging helpers."""

from rtbench.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from rtbench.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]
