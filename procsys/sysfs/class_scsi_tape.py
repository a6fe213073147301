"""SCSI tape statistics from /sys/class/scsi_tape."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

from procsys.utils import PathLike, collect_info_u64, list_dir_content


@dataclass
class ScsiTapeCounters:
    """Statistics of a single SCSI tape; missing or empty files count as 0."""

    write_ns: int = 0
    read_byte_cnt: int = 0
    io_ns: int = 0
    write_cnt: int = 0
    resid_cnt: int = 0
    read_ns: int = 0
    in_flight: int = 0
    other_cnt: int = 0
    read_cnt: int = 0
    write_byte_cnt: int = 0


_COUNTERS = tuple(item.name for item in fields(ScsiTapeCounters))


def collect() -> dict[str, ScsiTapeCounters]:
    """Collect SCSI tape statistics from the running system."""
    return collect_from("/sys/class/scsi_tape/")


def collect_from(base_path: PathLike) -> dict[str, ScsiTapeCounters]:
    """Collect SCSI tape statistics below *base_path*, keyed by tape name."""
    tapes = {}
    for name in list_dir_content(base_path, "", "scsi_tape"):
        stats_path = Path(base_path) / name / "stats"
        tapes[name] = ScsiTapeCounters(
            **{counter: collect_info_u64(counter, stats_path) or 0 for counter in _COUNTERS}
        )
    return tapes