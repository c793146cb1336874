from __future__ import annotations

import os
from pathlib import PurePosixPath

import pytest

from pathenv import PATH_VAR_NAME, MemoryEnvironment, Var, VarEncodingError, read, read_path, write_path


def test_var_keeps_literal_contents() -> None:
    var = Var.from_text("/usr/bin:/usr/local/bin")

    assert var.as_os_str() == "/usr/bin:/usr/local/bin"
    assert str(var) == "/usr/bin:/usr/local/bin"


def test_var_is_ordered_and_hashable() -> None:
    a = Var("/a")
    b = Var("/b")

    assert a < b
    assert sorted([b, a]) == [a, b]
    assert {a: 1}[Var("/a")] == 1
    assert a == Var.from_text("/a")


def test_var_is_immutable() -> None:
    var = Var("/bin")

    with pytest.raises(AttributeError):
        var.payload = "/usr/bin"  # type: ignore[misc]


def test_var_rejects_non_string_payload() -> None:
    with pytest.raises(TypeError):
        Var(b"/bin")  # type: ignore[arg-type]


def test_to_text_on_valid_value() -> None:
    result = Var("/bin:/usr/bin").to_text()

    assert result.ok
    assert result.text == "/bin:/usr/bin"
    assert result.raw is None
    assert result.unwrap() == "/bin:/usr/bin"


def test_to_text_on_undecodable_value_keeps_raw() -> None:
    var = Var("/opt/caf\udce9/bin")

    result = var.to_text()

    assert not result.ok
    assert result.text is None
    assert result.raw == var
    with pytest.raises(VarEncodingError):
        result.unwrap()


@pytest.mark.skipif(os.name == "nt", reason="byte-level environment values are POSIX only")
def test_from_bytes_round_trips_raw_bytes() -> None:
    data = b"/opt/caf\xe9/bin:/bin"

    var = Var.from_bytes(data)

    assert bytes(var) == data
    assert len(list(var.split())) == 2


def test_read_missing_variable_is_none(memory_env: MemoryEnvironment) -> None:
    assert read("PATHENV_DOES_NOT_EXIST") is None


def test_read_existing_variable(memory_env: MemoryEnvironment) -> None:
    memory_env.set("GREETING", "hello")

    assert read("GREETING") == Var("hello")


def test_read_from_explicit_provider() -> None:
    env = MemoryEnvironment({"X": "1"})

    assert read("X", env) == Var("1")
    assert read("X") is None


def test_read_path_uses_platform_name(memory_env: MemoryEnvironment) -> None:
    text = os.pathsep.join(["/bin", "/usr/bin"])
    memory_env.set(PATH_VAR_NAME, text)

    path = read_path()

    assert path == Var(text)
    assert path is not None
    assert len(list(path.split())) == 2


def test_write_path_accepts_native_values(memory_env: MemoryEnvironment) -> None:
    write_path(Var("/a"))
    assert memory_env.get(PATH_VAR_NAME) == "/a"

    write_path("/b")
    assert memory_env.get(PATH_VAR_NAME) == "/b"

    write_path(os.fsencode("/c"))
    assert memory_env.get(PATH_VAR_NAME) == "/c"

    write_path(PurePosixPath("/d"))
    assert memory_env.get(PATH_VAR_NAME) == "/d"


def test_write_path_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        write_path(42)  # type: ignore[arg-type]


def test_edit_and_write_back(memory_env: MemoryEnvironment) -> None:
    sep = os.pathsep
    memory_env.set(PATH_VAR_NAME, sep.join(["/usr/bin", "/opt/old"]))

    path = read_path()
    assert path is not None
    write_path(path.split().remove("/opt/old").prefix_entry("/opt/new").join().unwrap())

    assert memory_env.get(PATH_VAR_NAME) == sep.join(["/opt/new", "/usr/bin"])
