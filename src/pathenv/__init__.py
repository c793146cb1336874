"""pathenv - read, edit and rebuild search-path environment variables.

    from pathenv import read_path, write_path

    current = read_path()
    if current is not None:
        result = current.split().remove("/opt/old/bin").prefix_entry("/opt/tool/bin").join()
        if result.ok:
            write_path(result.value)
"""

from .core.env import Env, Environment, MemoryEnvironment, ProcessEnvironment
from .core.platform import PATH_VAR_NAME, PLATFORM, POSIX, WINDOWS, PathPlatform
from .errors import (
    JoinPathsError,
    JoinResult,
    PathEnvError,
    SettingsError,
    TextResult,
    VarEncodingError,
    format_error,
)
from .settings import Settings, load_settings
from .splitter import PathSplitter, join_paths, split_paths
from .var import Var, read, read_path, write_path

__version__ = "0.1.0"

__all__ = [
    "Env",
    "Environment",
    "JoinPathsError",
    "JoinResult",
    "MemoryEnvironment",
    "PATH_VAR_NAME",
    "PLATFORM",
    "POSIX",
    "PathEnvError",
    "PathPlatform",
    "PathSplitter",
    "ProcessEnvironment",
    "Settings",
    "SettingsError",
    "TextResult",
    "Var",
    "VarEncodingError",
    "WINDOWS",
    "format_error",
    "join_paths",
    "load_settings",
    "read",
    "read_path",
    "split_paths",
    "write_path",
]
