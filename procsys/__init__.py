"""Read Linux sysfs device and class information into dataclasses."""

__version__ = "0.1.0"
__all__ = ["utils", "sysfs"]