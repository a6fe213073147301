"""Desktop Management Interface data from /sys/class/dmi/id."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from procsys.utils import DmiSupportError, PathLike, collect_info_string, list_dir_content

# Attribute file name -> DMI field name.
_DMI_FILES = {
    "bios_date": "bios_date",
    "bios_release": "bios_release",
    "bios_vendor": "bios_vendor",
    "bios_version": "bios_version",
    "board_asset_tag": "board_asset_tag",
    "board_name": "board_name",
    "board_serial": "board_serial",
    "board_vendor": "board_vendor",
    "board_version": "board_version",
    "chassis_asset_tag": "chassis_asset_tag",
    "chassis_serial": "chassis_serial",
    "chassis_type": "chassis_type",
    "chassis_vendor": "chassis_vendor",
    "chassis_version": "chassis_version",
    "product_family": "product_family",
    "product_name": "product_name",
    "product_serial": "product_serial",
    "product_sku": "product_sku",
    "product_uuid": "product_uuid",
    "sys_vendor": "system_vendor",
}


@dataclass
class DMI:
    """The content of the Desktop Management Interface attribute files."""

    bios_date: str | None = None
    bios_release: str | None = None
    bios_vendor: str | None = None
    bios_version: str | None = None
    board_asset_tag: str | None = None
    board_name: str | None = None
    board_serial: str | None = None
    board_vendor: str | None = None
    board_version: str | None = None
    chassis_asset_tag: str | None = None
    chassis_serial: str | None = None
    chassis_type: str | None = None
    chassis_vendor: str | None = None
    chassis_version: str | None = None
    product_family: str | None = None
    product_name: str | None = None
    product_serial: str | None = None
    product_sku: str | None = None
    product_uuid: str | None = None
    product_version: str | None = None
    system_vendor: str | None = None


def collect() -> DMI:
    """Collect DMI information from the running system."""
    return collect_from("/sys/class/dmi/id")


def collect_from(base_path: PathLike) -> DMI:
    """Collect DMI information from the attribute files in *base_path*.

    Raises DmiSupportError when *base_path* does not exist.
    """
    if not Path(base_path).exists():
        raise DmiSupportError()
    dmi = DMI()
    for name in list_dir_content(base_path, "", "id"):
        field_name = _DMI_FILES.get(name)
        if field_name is not None:
            setattr(dmi, field_name, collect_info_string(name, base_path))
    return dmi