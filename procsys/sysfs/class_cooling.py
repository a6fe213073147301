"""Cooling devices from /sys/class/thermal/cooling_device*."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from procsys.utils import PathLike, _walk_names, collect_info_i64, collect_info_string


@dataclass
class Cooling:
    """A cooling device's type and its current and maximum state."""

    name: str = ""
    cooling_type: str = ""
    max_state: int = 0
    cur_state: int = 0


def collect() -> list[Cooling]:
    """Collect cooling devices from the running system."""
    return collect_from("/sys/class/thermal/")


def collect_from(base_path: PathLike) -> list[Cooling]:
    """Collect cooling devices below *base_path*."""
    devices = []
    for device_name in _list_devices(base_path):
        device = Cooling(name=device_name)
        device_path = Path(base_path) / device_name
        for info_name in _walk_names(device_path):
            if info_name == device_name:
                continue
            if info_name == "type":
                value = collect_info_string(info_name, device_path)
                if value is not None:
                    device.cooling_type = value
            elif info_name == "max_state":
                number = collect_info_i64(info_name, device_path)
                if number is not None:
                    device.max_state = number
            elif info_name == "cur_state":
                number = collect_info_i64(info_name, device_path)
                if number is not None:
                    device.cur_state = number
        devices.append(device)
    return devices


def _list_devices(base_path: PathLike) -> list[str]:
    from procsys.utils import list_dir_content

    return list_dir_content(base_path, "cooling_device", "thermal")