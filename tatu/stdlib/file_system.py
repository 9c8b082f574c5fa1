"""`fs:` natives. I/O failures surface as TatuRuntimeError with the OS reason."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from pathlib import Path

from tatu import Value
from tatu.builtin.expects import expect_args, expect_string
from tatu.errors import TatuRuntimeError
from tatu.types.native import native_table
from tatu.types.nil import Nil


def _path(name: str, index: int, arg: Value) -> Path:
    return Path(expect_string(name, index, arg))


def fs_read(*args: Value) -> str:
    """(fs:read path) whole file as a string"""
    expect_args("fs:read", 1, args)
    path = _path("fs:read", 0, args[0])
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TatuRuntimeError(f"`fs:read` failed to read file: {e}")


def fs_read_lines(*args: Value) -> list[Value]:
    """(fs:read-lines path) vector of lines split on newline"""
    expect_args("fs:read-lines", 1, args)
    path = _path("fs:read-lines", 0, args[0])
    try:
        return path.read_text(encoding="utf-8").split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise TatuRuntimeError(f"`fs:read-lines` failed to read file: {e}")


def fs_write(*args: Value) -> Value:
    """(fs:write path content) creates or truncates"""
    expect_args("fs:write", 2, args)
    path = _path("fs:write", 0, args[0])
    content = expect_string("fs:write", 1, args[1])
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise TatuRuntimeError(f"`fs:write` failed to write file: {e}")
    return Nil


def fs_append(*args: Value) -> Value:
    """(fs:append path content) creates the file if needed"""
    expect_args("fs:append", 2, args)
    path = _path("fs:append", 0, args[0])
    content = expect_string("fs:append", 1, args[1])
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise TatuRuntimeError(f"`fs:append` failed to append to file: {e}")
    return Nil


def fs_exists(*args: Value) -> bool:
    """(fs:exists path)"""
    expect_args("fs:exists", 1, args)
    return _path("fs:exists", 0, args[0]).exists()


def fs_list(*args: Value) -> list[Value]:
    """(fs:list dir) entry names, sorted"""
    expect_args("fs:list", 1, args)
    path = _path("fs:list", 0, args[0])
    try:
        return sorted(entry.name for entry in path.iterdir())
    except OSError as e:
        raise TatuRuntimeError(f"`fs:list` failed to list directory: {e}")


def fs_mkdir(*args: Value) -> Value:
    """(fs:mkdir path) with parents; an existing directory is fine"""
    expect_args("fs:mkdir", 1, args)
    path = _path("fs:mkdir", 0, args[0])
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise TatuRuntimeError(f"`fs:mkdir` failed to create directory: {e}")
    return Nil


def fs_move(*args: Value) -> Value:
    """(fs:move from to)"""
    expect_args("fs:move", 2, args)
    src = _path("fs:move", 0, args[0])
    dst = _path("fs:move", 1, args[1])
    try:
        src.rename(dst)
    except OSError as e:
        raise TatuRuntimeError(f"`fs:move` failed to move file: {e}")
    return Nil


def fs_delete(*args: Value) -> Value:
    """(fs:delete path) removes files and whole directory trees; missing paths are ignored"""
    expect_args("fs:delete", 1, args)
    path = _path("fs:delete", 0, args[0])
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
    except OSError as e:
        raise TatuRuntimeError(f"`fs:delete` failed to delete: {e}")
    return Nil


def fs_is_dir(*args: Value) -> bool:
    """(fs:is-dir path); the path must exist"""
    expect_args("fs:is-dir", 1, args)
    path = _path("fs:is-dir", 0, args[0])
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except OSError as e:
        raise TatuRuntimeError(f"`fs:is-dir` failed to check path: {e}")


def fs_size(*args: Value) -> float:
    """(fs:size path) in bytes"""
    expect_args("fs:size", 1, args)
    path = _path("fs:size", 0, args[0])
    try:
        return float(path.stat().st_size)
    except OSError as e:
        raise TatuRuntimeError(f"`fs:size` failed to get file info: {e}")


def fs_basename(*args: Value) -> str:
    """(fs:basename path) last element, ignoring trailing separators"""
    expect_args("fs:basename", 1, args)
    raw = expect_string("fs:basename", 0, args[0])
    if raw == "":
        return "."
    stripped = raw.rstrip(os.sep)
    if stripped == "":
        return os.sep
    return os.path.basename(stripped)


def fs_temp_dir(*args: Value) -> str:
    """(fs:temp-dir)"""
    expect_args("fs:temp-dir", 0, args)
    return tempfile.gettempdir()


def register(natives: dict) -> None:
    natives.update(
        native_table(
            {
                "fs:read": fs_read,
                "fs:read-lines": fs_read_lines,
                "fs:write": fs_write,
                "fs:append": fs_append,
                "fs:exists": fs_exists,
                "fs:list": fs_list,
                "fs:mkdir": fs_mkdir,
                "fs:move": fs_move,
                "fs:delete": fs_delete,
                "fs:is-dir": fs_is_dir,
                "fs:size": fs_size,
                "fs:basename": fs_basename,
                "fs:temp-dir": fs_temp_dir,
            }
        )
    )
