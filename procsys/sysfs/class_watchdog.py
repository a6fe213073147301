"""Watchdog devices from /sys/class/watchdog."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from procsys.utils import (
    PathLike,
    _walk_names,
    collect_info_i64,
    collect_info_string,
    list_dir_content,
)

_INT_FIELDS = {
    "bootstatus": "boot_status",
    "fw_version": "fw_version",
    "nowayout": "nowayout",
    "timeleft": "timeleft",
    "timeout": "timeout",
    "min_timeout": "min_timeout",
    "max_timeout": "max_timeout",
    "pretimeout": "pretimeout",
    "access_cs0": "access_cs0",
}

_STRING_FIELDS = {
    "options": "options",
    "identity": "identity",
    "state": "state",
    "status": "status",
    "pretimeout_governor": "pretimeout_governor",
}


@dataclass
class Watchdog:
    """Status information of a single watchdog device."""

    name: str = ""
    boot_status: int | None = None
    options: str | None = None
    fw_version: int | None = None
    identity: str | None = None
    nowayout: int | None = None
    state: str | None = None
    status: str | None = None
    timeleft: int | None = None
    timeout: int | None = None
    min_timeout: int | None = None
    max_timeout: int | None = None
    pretimeout: int | None = None
    pretimeout_governor: str | None = None
    access_cs0: int | None = None


def collect() -> list[Watchdog]:
    """Collect watchdog devices from the running system."""
    return collect_from("/sys/class/watchdog/")


def collect_from(base_path: PathLike) -> list[Watchdog]:
    """Collect watchdog devices below *base_path*."""
    devices = []
    for device_name in list_dir_content(base_path, "", "watchdog"):
        device = Watchdog(name=device_name)
        device_path = Path(base_path) / device_name
        for info_name in _walk_names(device_path):
            if info_name == device_name:
                continue
            if info_name in _INT_FIELDS:
                setattr(device, _INT_FIELDS[info_name], collect_info_i64(info_name, device_path))
            elif info_name in _STRING_FIELDS:
                setattr(device, _STRING_FIELDS[info_name], collect_info_string(info_name, device_path))
        devices.append(device)
    return devices