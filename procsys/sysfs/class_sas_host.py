"""SAS hosts from /sys/class/sas_host."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from procsys.utils import PathLike, list_dir_content

_PHY = re.compile(r"^phy-[0-9:]+$")
_PORT = re.compile(r"^port-[0-9:]+$")


@dataclass
class SASHost:
    """The phys and ports listed under a SAS host's device directory."""

    sas_phys: list[str] = field(default_factory=list)
    sas_ports: list[str] = field(default_factory=list)


def collect() -> dict[str, SASHost]:
    """Collect SAS hosts from the running system."""
    return collect_from("/sys/class/sas_host/")


def collect_from(base_path: PathLike) -> dict[str, SASHost]:
    """Collect SAS hosts below *base_path*, keyed by host name."""
    hosts = {}
    for name in list_dir_content(base_path, "", "sas_host"):
        host = SASHost()
        device_path = Path(base_path) / name / "device"
        for item in list_dir_content(device_path, "", name):
            if _PHY.search(item):
                host.sas_phys.append(item)
            elif _PORT.search(item):
                host.sas_ports.append(item)
        hosts[name] = host
    return hosts