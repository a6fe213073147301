"""SAS devices from /sys/class/sas_device."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from procsys.utils import PathLike, collect_info_string, list_dir_content

_PHY = re.compile(r"phy-[0-9:]+")
_PORT = re.compile(r"port-[0-9:]+")
_TARGET = re.compile(r"target[0-9:]+")
_SUBDEVICE = re.compile(r"[0-9]+:.*")


@dataclass
class SASDevice:
    """Address, phys, ports and block devices of a single SAS device."""

    sas_address: str = ""
    sas_phys: list[str] = field(default_factory=list)
    sas_ports: list[str] = field(default_factory=list)
    block_devices: list[str] = field(default_factory=list)


def collect() -> dict[str, SASDevice]:
    """Collect SAS devices from the running system."""
    return collect_from("/sys/class/sas_device/")


def collect_from(base_path: PathLike) -> dict[str, SASDevice]:
    """Collect SAS devices below *base_path*, keyed by device name."""
    devices = {}
    for name in list_dir_content(base_path, "", "sas_device"):
        device_dir = Path(base_path) / name
        device = SASDevice(sas_address=collect_info_string("sas_address", device_dir) or "")
        inner_path = device_dir / "device"
        for item in list_dir_content(inner_path, "", ""):
            if _PHY.fullmatch(item):
                device.sas_phys.append(item)
            elif _PORT.fullmatch(item):
                device.sas_ports.append(item)
            elif _TARGET.fullmatch(item):
                device.block_devices.extend(_target_blocks(inner_path / item, item))
        devices[name] = device
    return devices


def _target_blocks(target_path: Path, target_name: str) -> list[str]:
    blocks = []
    for sub_target in list_dir_content(target_path, "", target_name):
        if _SUBDEVICE.search(sub_target):
            blocks.extend(list_dir_content(target_path / sub_target / "block", "", "block"))
    return blocks