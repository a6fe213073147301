"""Clock sources from /sys/devices/system/clocksource."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from procsys.utils import MetricError, PathLike, _walk_names

_CURRENT = "current_clocksource"
_AVAILABLE = "available_clocksource"


@dataclass
class Clocksource:
    """The available and current clock sources of one clocksource device."""

    name: str
    available_clocksource: list[str] = field(default_factory=list)
    current_clocksource: str = ""


def collect() -> list[Clocksource]:
    """Collect clock sources from the running system."""
    return collect_from("/sys/devices/system/clocksource")


def collect_from(base_path: PathLike) -> list[Clocksource]:
    """Collect clock sources below *base_path*."""
    sources = []
    for entry_name in _walk_names(base_path):
        if entry_name == "clocksource":
            continue
        name = entry_name.strip()
        if not name or not name.startswith("clocksource"):
            continue
        current = _read_info(base_path, name, _CURRENT)
        available = _read_info(base_path, name, _AVAILABLE).split(" ")
        sources.append(Clocksource(name, available, current))
    return sources


def _read_info(base_path: PathLike, name: str, info: str) -> str:
    info_path = Path(base_path) / name / info
    try:
        return info_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as err:
        raise MetricError(f"I/O error on {info_path}: {err}") from err