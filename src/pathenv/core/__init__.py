"""Core infrastructure modules."""

from .env import Env, Environment, MemoryEnvironment, ProcessEnvironment
from .platform import PATH_VAR_NAME, PLATFORM, POSIX, WINDOWS, PathPlatform

__all__ = [
    "Env",
    "Environment",
    "MemoryEnvironment",
    "PATH_VAR_NAME",
    "PLATFORM",
    "POSIX",
    "PathPlatform",
    "ProcessEnvironment",
    "WINDOWS",
]
