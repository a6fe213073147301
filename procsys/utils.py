"""Helpers for reading small sysfs attribute files and parsing their values."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_U64_MAX = (1 << 64) - 1

_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_DECIMAL = re.compile(r"\+?[0-9]+")
_UNSIGNED_HEX = re.compile(r"\+?[0-9a-fA-F]+")

_UNIT_MULTIPLIERS = {
    "B": 1,
    "KiB": 1024,
    "kiB": 1024,
    "kB": 1024,
    "KB": 1024,
    "MiB": 1024**2,
    "miB": 1024**2,
    "MB": 1024**2,
    "mB": 1024**2,
    "GiB": 1024**3,
    "giB": 1024**3,
    "GB": 1024**3,
    "gB": 1024**3,
}


class MetricError(Exception):
    """Base error for every failure while collecting metrics."""


class ParseError(MetricError):
    """A value could not be parsed as the expected number."""

    def __init__(self, value: str, reason: str = "invalid number") -> None:
        super().__init__(f"failed to parse {value!r}: {reason}")
        self.value = value
        self.reason = reason


class ByteConvertError(MetricError):
    """A size unit is not one of the known byte units."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"unknown byte unit: {unit!r}")
        self.unit = unit


class DmiSupportError(MetricError):
    """The system exposes no DMI information."""

    def __init__(self) -> None:
        super().__init__("DMI information is not supported on this system")


def _io_error(path: PathLike, err: Exception) -> MetricError:
    return MetricError(f"I/O error on {os.fspath(path)}: {err}")


def _parse_int(value: str, pattern: re.Pattern[str], low: int, high: int, label: str, base: int = 10) -> int:
    if not pattern.fullmatch(value):
        raise ParseError(label, "invalid digit found in string")
    number = int(value, base)
    if number < low or number > high:
        raise ParseError(label, "number out of range")
    return number


def _walk_names(path: PathLike) -> Iterator[str]:
    """Yield the name of *path* and of every entry below it, without following links."""
    root = Path(path)
    if not os.path.lexists(root):
        return
    yield root.name
    if not root.is_dir():
        return
    for _dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        yield from dirnames
        yield from sorted(filenames)


def collect_info_string(filename: str, dir_path: PathLike) -> str | None:
    """Read ``dir_path/filename`` and return its stripped content, or None if absent or empty."""
    if not filename:
        return None
    info_path = Path(dir_path) / filename
    if not info_path.exists():
        return None
    try:
        content = info_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise _io_error(info_path, err) from err
    value = content.strip()
    return value or None


def collect_info_i64(filename: str, dir_path: PathLike) -> int | None:
    """Read a signed 64-bit integer attribute."""
    content = collect_info_string(filename, dir_path)
    if content is None:
        return None
    return _parse_int(content, _SIGNED_DECIMAL, _I64_MIN, _I64_MAX, filename)


def collect_info_u64(filename: str, dir_path: PathLike) -> int | None:
    """Read an unsigned 64-bit integer attribute."""
    content = collect_info_string(filename, dir_path)
    if content is None:
        return None
    return _parse_int(content, _UNSIGNED_DECIMAL, 0, _U64_MAX, filename)


def list_dir_content(dir_path: PathLike, include_pattern: str, exclude_pattern: str) -> list[str]:
    """List the directory's own name and its direct entries.

    Names equal to *exclude_pattern* are dropped; when *include_pattern* is
    not empty only names starting with it are kept.
    """
    root = Path(dir_path)
    if not os.path.lexists(root):
        return []
    names = [root.name]
    if root.is_dir():
        try:
            names.extend(sorted(entry.name for entry in os.scandir(root)))
        except OSError:
            pass
    return [name for name in names if name != exclude_pattern and name.startswith(include_pattern)]


def read_file_lines(filename: PathLike) -> list[str]:
    """Return the lines of a text file without their line endings."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            lines = []
            for line in handle:
                if line.endswith("\n"):
                    line = line[:-1]
                    if line.endswith("\r"):
                        line = line[:-1]
                lines.append(line)
            return lines
    except (OSError, UnicodeDecodeError) as err:
        raise _io_error(filename, err) from err


def convert_to_bytes(num: int, unit: str) -> int:
    """Convert *num* expressed in *unit* to a number of bytes."""
    try:
        return num * _UNIT_MULTIPLIERS[unit]
    except KeyError:
        raise ByteConvertError(unit) from None


def convert_str_to_i64(value: str) -> int:
    """Parse a signed 64-bit decimal integer."""
    return _parse_int(value, _SIGNED_DECIMAL, _I64_MIN, _I64_MAX, value)


def convert_str_to_u64(value: str) -> int:
    """Parse an unsigned 64-bit decimal integer."""
    return _parse_int(value, _UNSIGNED_DECIMAL, 0, _U64_MAX, value)


def convert_hex_to_u64(value: str) -> int:
    """Parse an unsigned 64-bit integer written as ``0x``-prefixed hexadecimal."""
    digits = value[2:] if value.startswith("0x") else ""
    return _parse_int(digits, _UNSIGNED_HEX, 0, _U64_MAX, value, base=16)