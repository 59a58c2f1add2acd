import os

import pytest

from minishell.pathfind import CommandNotFound, resolve, search_path


def _make_program(directory, name, executable=True):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755 if executable else 0o644)
    return path


def test_search_path_appends_slash_and_skips_empty():
    assert search_path({"PATH": "/a::/b"}) == ["/a/", "/b/"]


def test_search_path_without_path_variable():
    assert search_path({}) == []


def test_resolve_finds_program_in_path(tmp_path):
    _make_program(tmp_path, "tool")
    env = {"PATH": str(tmp_path)}
    assert resolve(["tool", "-x"], env) == [str(tmp_path) + "/tool", "-x"]


def test_resolve_prefers_first_directory(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_program(first, "tool")
    _make_program(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    assert resolve(["tool"], env)[0] == str(first) + "/tool"


def test_resolve_skips_non_executable(tmp_path):
    _make_program(tmp_path, "tool", executable=False)
    with pytest.raises(CommandNotFound) as info:
        resolve(["tool"], {"PATH": str(tmp_path)})
    assert info.value.name == "tool"
    assert str(info.value) == "command not found: tool"


def test_resolve_without_path_variable():
    with pytest.raises(CommandNotFound):
        resolve(["tool"], {})


def test_resolve_name_with_slash_kept(tmp_path):
    program = _make_program(tmp_path, "tool")
    args = [str(program), "arg"]
    assert resolve(args, {}) == args


def test_resolve_name_with_slash_not_executable(tmp_path):
    missing = os.path.join(str(tmp_path), "absent")
    with pytest.raises(CommandNotFound):
        resolve([missing], {"PATH": str(tmp_path)})


def test_resolve_empty_args():
    with pytest.raises(CommandNotFound):
        resolve([], {"PATH": "/bin"})


def test_resolve_does_not_modify_input(tmp_path):
    _make_program(tmp_path, "tool")
    args = ["tool"]
    resolve(args, {"PATH": str(tmp_path)})
    assert args == ["tool"]