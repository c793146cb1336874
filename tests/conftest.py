from collections.abc import Iterator
from pathlib import Path

import pytest

from pathenv.core.env import Env, MemoryEnvironment
from pathenv.settings import CONFIG_DIR_VAR
from pathenv.util.log import Log


@pytest.fixture(autouse=True)
def memory_env(tmp_path: Path) -> Iterator[MemoryEnvironment]:
    """Route all environment access to an isolated in-memory provider.

    The settings directory points into tmp_path, so no user settings
    leak in, and the log sink starts from defaults.
    """
    env = MemoryEnvironment({CONFIG_DIR_VAR: str(tmp_path / "config")})
    token = Env.provide(env)
    Log.reset()
    try:
        yield env
    finally:
        Log.reset()
        Env.restore(token)


@pytest.fixture
def settings_dir(tmp_path: Path) -> Path:
    path = tmp_path / "config"
    path.mkdir()
    return path
