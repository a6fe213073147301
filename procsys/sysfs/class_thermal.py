"""Thermal zones from /sys/class/thermal/thermal_zone*."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from procsys.utils import (
    PathLike,
    _walk_names,
    collect_info_i64,
    collect_info_string,
    collect_info_u64,
    list_dir_content,
)


@dataclass
class ThermalZone:
    """Information about a single thermal zone."""

    name: str = ""
    zone_type: str = ""
    policy: str = ""
    temp: int = 0
    mode: bool | None = None
    passive: int | None = None


_MODES = {"enabled": True, "disabled": False}


def collect() -> list[ThermalZone]:
    """Collect thermal zones from the running system."""
    return collect_from("/sys/class/thermal/")


def collect_from(base_path: PathLike) -> list[ThermalZone]:
    """Collect thermal zones below *base_path*."""
    zones = []
    for zone_name in list_dir_content(base_path, "thermal_zone", "thermal"):
        zone = ThermalZone(name=zone_name)
        zone_path = Path(base_path) / zone_name
        for info_name in _walk_names(zone_path):
            if info_name == zone_name:
                continue
            if info_name == "mode":
                value = collect_info_string(info_name, zone_path)
                if value is not None:
                    zone.mode = _MODES.get(value)
            elif info_name == "temp":
                number = collect_info_i64(info_name, zone_path)
                if number is not None:
                    zone.temp = number
            elif info_name == "passive":
                zone.passive = collect_info_u64(info_name, zone_path)
            elif info_name == "policy":
                value = collect_info_string(info_name, zone_path)
                if value is not None:
                    zone.policy = value
            elif info_name == "type":
                value = collect_info_string(info_name, zone_path)
                if value is not None:
                    zone.zone_type = value
        zones.append(zone)
    return zones