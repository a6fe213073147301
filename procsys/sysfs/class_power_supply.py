"""Power supplies from /sys/class/power_supply."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

from procsys.utils import PathLike, collect_info_i64, collect_info_string, list_dir_content

_STRING_FIELDS = frozenset(
    {
        "capacity_level",
        "charge_type",
        "health",
        "manufacturer",
        "model_name",
        "scope",
        "serial_number",
        "status",
        "technology",
        "ps_type",
        "usb_type",
    }
)

# Field names whose attribute file has a different name.
_FILE_NAMES = {"ps_type": "type"}


@dataclass
class PowerSupply:
    """Attributes of a single power supply; missing or empty files are None."""

    authentic: int | None = None
    calibrate: int | None = None
    capacity: int | None = None
    capacity_alert_max: int | None = None
    capacity_alert_min: int | None = None
    capacity_level: str | None = None
    charge_avg: int | None = None
    charge_control_limit: int | None = None
    charge_control_limit_max: int | None = None
    charge_counter: int | None = None
    charge_empty: int | None = None
    charge_empty_design: int | None = None
    charge_start_threshold: int | None = None
    charge_stop_threshold: int | None = None
    charge_full: int | None = None
    charge_full_design: int | None = None
    charge_now: int | None = None
    charge_term_current: int | None = None
    charge_type: str | None = None
    constant_charge_current: int | None = None
    constant_charge_current_max: int | None = None
    constant_charge_voltage: int | None = None
    constant_charge_voltage_max: int | None = None
    current_avg: int | None = None
    current_boot: int | None = None
    current_max: int | None = None
    current_now: int | None = None
    cycle_count: int | None = None
    energy_avg: int | None = None
    energy_empty: int | None = None
    energy_empty_design: int | None = None
    energy_full: int | None = None
    energy_full_design: int | None = None
    energy_now: int | None = None
    health: str | None = None
    input_current_limit: int | None = None
    manufacturer: str | None = None
    model_name: str | None = None
    online: int | None = None
    power_avg: int | None = None
    power_now: int | None = None
    precharge_current: int | None = None
    present: int | None = None
    scope: str | None = None
    serial_number: str | None = None
    status: str | None = None
    technology: str | None = None
    temp: int | None = None
    temp_alert_max: int | None = None
    temp_alert_min: int | None = None
    temp_ambient: int | None = None
    temp_ambient_max: int | None = None
    temp_ambient_min: int | None = None
    temp_max: int | None = None
    temp_min: int | None = None
    time_to_empty_avg: int | None = None
    time_to_empty_now: int | None = None
    time_to_full_avg: int | None = None
    time_to_full_now: int | None = None
    ps_type: str | None = None
    usb_type: str | None = None
    voltage_avg: int | None = None
    voltage_boot: int | None = None
    voltage_max: int | None = None
    voltage_max_design: int | None = None
    voltage_min: int | None = None
    voltage_min_design: int | None = None
    voltage_now: int | None = None
    voltage_ocv: int | None = None


def collect() -> dict[str, PowerSupply]:
    """Collect power supplies from the running system."""
    return collect_from("/sys/class/power_supply/")


def collect_from(base_path: PathLike) -> dict[str, PowerSupply]:
    """Collect power supplies below *base_path*, keyed by supply name."""
    supplies = {}
    for name in list_dir_content(base_path, "", "power_supply"):
        supplies[name] = _read_supply(Path(base_path) / name)
    return supplies


def _read_supply(supply_path: Path) -> PowerSupply:
    values = {}
    for item in fields(PowerSupply):
        filename = _FILE_NAMES.get(item.name, item.name)
        reader = collect_info_string if item.name in _STRING_FIELDS else collect_info_i64
        values[item.name] = reader(filename, supply_path)
    return PowerSupply(**values)