"""NVMe controllers from /sys/class/nvme."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from procsys.utils import PathLike, collect_info_string, list_dir_content


@dataclass
class NVMeDevice:
    """Identity and state of a single NVMe controller."""

    serial: str = ""
    model: str = ""
    state: str = ""
    firmware_revision: str = ""


def collect() -> dict[str, NVMeDevice]:
    """Collect NVMe devices from the running system."""
    return collect_from("/sys/class/nvme/")


def collect_from(base_path: PathLike) -> dict[str, NVMeDevice]:
    """Collect NVMe devices below *base_path*, keyed by device name."""
    devices = {}
    for name in list_dir_content(base_path, "", "nvme"):
        device_path = Path(base_path) / name
        devices[name] = NVMeDevice(
            serial=collect_info_string("serial", device_path) or "",
            model=collect_info_string("model", device_path) or "",
            state=collect_info_string("state", device_path) or "",
            firmware_revision=collect_info_string("firmware_rev", device_path) or "",
        )
    return devices