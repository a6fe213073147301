"""SAS ports from /sys/class/sas_port."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from procsys.utils import PathLike, list_dir_content

_PHY = re.compile(r"^phy-[0-9:]+$")
_EXPANDER = re.compile(r"expander-[0-9:]+$")
_END_DEVICE = re.compile(r"^end_device-[0-9:]+$")


@dataclass
class SASPort:
    """The phys, expanders and end devices listed under a SAS port's device directory."""

    sas_phys: list[str] = field(default_factory=list)
    expanders: list[str] = field(default_factory=list)
    end_devices: list[str] = field(default_factory=list)


def collect() -> dict[str, SASPort]:
    """Collect SAS ports from the running system."""
    return collect_from("/sys/class/sas_port/")


def collect_from(base_path: PathLike) -> dict[str, SASPort]:
    """Collect SAS ports below *base_path*, keyed by port name."""
    ports = {}
    for name in list_dir_content(base_path, "", "sas_port"):
        port = SASPort()
        for item in list_dir_content(Path(base_path) / name / "device", "", "device"):
            if _PHY.search(item):
                port.sas_phys.append(item)
            elif _EXPANDER.search(item):
                port.expanders.append(item)
            elif _END_DEVICE.search(item):
                port.end_devices.append(item)
        ports[name] = port
    return ports