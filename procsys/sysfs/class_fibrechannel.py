"""Fibre Channel hosts from /sys/class/fc_host."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

from procsys.utils import PathLike, collect_info_string, convert_hex_to_u64, list_dir_content


@dataclass
class FibreChannelHostCounters:
    """Statistics counters of a Fibre Channel host; missing or empty files are None."""

    dumped_frames: int | None = None
    error_frames: int | None = None
    invalid_crc_count: int | None = None
    rx_frames: int | None = None
    rx_words: int | None = None
    tx_frames: int | None = None
    tx_words: int | None = None
    seconds_since_last_reset: int | None = None
    invalid_tx_word_count: int | None = None
    link_failure_count: int | None = None
    loss_of_sync_count: int | None = None
    loss_of_signal_count: int | None = None
    nos_count: int | None = None
    fcp_packet_aborts: int | None = None


@dataclass
class FibreChannelHost:
    """Attributes and statistics of a single Fibre Channel host."""

    speed: str | None = None
    port_state: str | None = None
    port_type: str | None = None
    symbolic_name: str | None = None
    node_name: str | None = None
    port_id: str | None = None
    port_name: str | None = None
    fabric_name: str | None = None
    dev_loss_tmo: str | None = None
    supported_classes: str | None = None
    supported_speeds: str | None = None
    statistics: FibreChannelHostCounters = field(default_factory=FibreChannelHostCounters)


_HOST_ATTRIBUTES = tuple(item.name for item in fields(FibreChannelHost) if item.name != "statistics")
_COUNTER_ATTRIBUTES = tuple(item.name for item in fields(FibreChannelHostCounters))


def collect() -> dict[str, FibreChannelHost]:
    """Collect Fibre Channel hosts from the running system."""
    return collect_from("/sys/class/fc_host/")


def collect_from(base_path: PathLike) -> dict[str, FibreChannelHost]:
    """Collect Fibre Channel hosts below *base_path*, keyed by host name."""
    hosts = {}
    for name in list_dir_content(base_path, "", "fc_host"):
        hosts[name] = _read_host(Path(base_path) / name)
    return hosts


def _read_host(host_path: Path) -> FibreChannelHost:
    attributes = {name: collect_info_string(name, host_path) for name in _HOST_ATTRIBUTES}
    return FibreChannelHost(**attributes, statistics=_read_counters(host_path / "statistics"))


def _read_counters(stats_path: Path) -> FibreChannelHostCounters:
    counters = {}
    for name in _COUNTER_ATTRIBUTES:
        raw = collect_info_string(name, stats_path)
        counters[name] = convert_hex_to_u64(raw) if raw else None
    return FibreChannelHostCounters(**counters)