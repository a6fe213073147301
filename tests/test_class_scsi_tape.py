from pathlib import Path

import pytest

from procsys.sysfs.class_scsi_tape import ScsiTapeCounters, collect_from
from procsys.utils import ParseError

TAPE_NAMES = ["nst0", "nst0a", "nst0l", "nst0m", "st0", "st0a", "st0l", "st0m"]

STATS = {
    "write_ns": "5233597394395",
    "read_byte_cnt": "979383912",
    "io_ns": "9247011087720",
    "write_cnt": "53772916",
    "resid_cnt": "19",
    "read_ns": "33788355744",
    "in_flight": "1",
    "other_cnt": "1409",
    "read_cnt": "3741",
    "write_byte_cnt": "1496246784000",
}


def _write_stats(tape_dir: Path, values: dict) -> None:
    stats = tape_dir / "stats"
    stats.mkdir(parents=True)
    for name, content in values.items():
        (stats / name).write_text(content + "\n")


@pytest.fixture
def tape_root(tmp_path):
    root = tmp_path / "scsi_tape"
    for name in TAPE_NAMES:
        _write_stats(root / name, STATS)
    return root


def test_tape_names(tape_root):
    assert sorted(collect_from(tape_root)) == sorted(TAPE_NAMES)


def test_scsi_tape_counters(tape_root):
    expected = ScsiTapeCounters(
        write_ns=5233597394395,
        read_byte_cnt=979383912,
        io_ns=9247011087720,
        write_cnt=53772916,
        resid_cnt=19,
        read_ns=33788355744,
        in_flight=1,
        other_cnt=1409,
        read_cnt=3741,
        write_byte_cnt=1496246784000,
    )
    for name, stats in collect_from(tape_root).items():
        assert stats == expected, name


def test_missing_counters_default_to_zero(tmp_path):
    root = tmp_path / "scsi_tape"
    _write_stats(root / "st1", {"read_cnt": "7"})
    stats = collect_from(root)["st1"]
    assert stats.read_cnt == 7
    assert stats.write_ns == 0
    assert stats.write_byte_cnt == 0


def test_negative_counter_raises(tmp_path):
    root = tmp_path / "scsi_tape"
    _write_stats(root / "st1", {"in_flight": "-1"})
    with pytest.raises(ParseError):
        collect_from(root)