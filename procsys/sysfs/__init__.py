"""Collectors for thermal, clocksource, DMI, power, NVMe, Fibre Channel, SCSI tape and SAS entries under /sys."""

__all__ = [
    "class_cooling",
    "class_dmi",
    "class_fibrechannel",
    "class_nvme",
    "class_power_supply",
    "class_sas_device",
    "class_sas_host",
    "class_sas_phy",
    "class_sas_port",
    "class_scsi_tape",
    "class_thermal",
    "class_watchdog",
    "clocksource",
]