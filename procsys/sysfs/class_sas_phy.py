"""SAS phys from /sys/class/sas_phy."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from procsys.utils import (
    MetricError,
    ParseError,
    PathLike,
    collect_info_i64,
    collect_info_string,
    list_dir_content,
)

_PORT = re.compile(r"port-[0-9:]+")

_STRING_FILES = frozenset({"sas_address", "device_type", "phy_identifier"})
_INT_FILES = frozenset(
    {
        "invalid_dword_count",
        "loss_of_dword_sync_count",
        "phy_reset_problem_count",
        "running_disparity_error_count",
    }
)
_LINKRATE_FILES = frozenset(
    {
        "maximum_linkrate",
        "maximum_linkrate_hw",
        "minimum_linkrate",
        "minimum_linkrate_hw",
        "negotiated_linkrate",
    }
)
_PROTOCOL_FILES = frozenset({"initiator_port_protocols", "target_port_protocols"})


@dataclass
class SASPhy:
    """Attributes of a single SAS phy."""

    sas_address: str = ""
    sas_port: str = ""
    device_type: str = ""
    initiator_port_protocols: list[str] = field(default_factory=list)
    invalid_dword_count: int = 0
    loss_of_dword_sync_count: int = 0
    maximum_linkrate: float = 0.0
    maximum_linkrate_hw: float = 0.0
    minimum_linkrate: float = 0.0
    minimum_linkrate_hw: float = 0.0
    negotiated_linkrate: float = 0.0
    phy_identifier: str = ""
    phy_reset_problem_count: int = 0
    running_disparity_error_count: int = 0
    target_port_protocols: list[str] = field(default_factory=list)


def collect() -> dict[str, SASPhy]:
    """Collect SAS phys from the running system."""
    return collect_from("/sys/class/sas_phy/")


def collect_from(base_path: PathLike) -> dict[str, SASPhy]:
    """Collect SAS phys below *base_path*, keyed by phy name."""
    phys = {}
    for name in list_dir_content(base_path, "", "sas_phy"):
        phy_path = Path(base_path) / name
        phy = SASPhy()
        for info in list_dir_content(phy_path, "", name):
            if info == "device":
                phy.sas_port = _read_port(phy_path / "device" / "port")
            elif info in _STRING_FILES:
                setattr(phy, info, collect_info_string(info, phy_path) or "")
            elif info in _INT_FILES:
                setattr(phy, info, collect_info_i64(info, phy_path) or 0)
            elif info in _LINKRATE_FILES:
                setattr(phy, info, _read_linkrate(info, phy_path))
            elif info in _PROTOCOL_FILES:
                setattr(phy, info, _read_protocols(info, phy_path))
        phys[name] = phy
    return phys


def _read_port(port_link: Path) -> str:
    try:
        target = os.readlink(port_link)
    except OSError as err:
        raise MetricError(f"I/O error on {port_link}: {err}") from err
    port = Path(target).name
    return port if _PORT.fullmatch(port) else ""


def _read_protocols(filename: str, phy_path: Path) -> list[str]:
    content = collect_info_string(filename, phy_path) or ""
    return [item for item in content.strip().replace(", ", ",").split(",") if item]


def _read_linkrate(filename: str, phy_path: Path) -> float:
    content = collect_info_string(filename, phy_path) or ""
    items = [item for item in content.strip().split(" ") if item]
    if not items:
        return 0.0
    text = items[0]
    if "_" in text:
        raise ParseError(text, "invalid float literal")
    try:
        return float(text)
    except ValueError:
        raise ParseError(text, "invalid float literal") from None