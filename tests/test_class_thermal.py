import pytest

from procsys.sysfs.class_thermal import collect_from
from procsys.utils import ParseError


def _write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.fixture
def thermal_dir(tmp_path):
    base = tmp_path / "thermal"
    _write(base / "thermal_zone0" / "type", "bcm2835_thermal\n")
    _write(base / "thermal_zone0" / "policy", "step_wise\n")
    _write(base / "thermal_zone0" / "temp", "49925\n")
    _write(base / "thermal_zone1" / "type", "acpitz\n")
    _write(base / "thermal_zone1" / "policy", "step_wise\n")
    _write(base / "thermal_zone1" / "mode", "enabled\n")
    _write(base / "thermal_zone1" / "temp", "-44000\n")
    _write(base / "thermal_zone1" / "passive", "0\n")
    _write(base / "cooling_device0" / "type", "Processor\n")
    return base


def test_thermal_devices(thermal_dir):
    zones = collect_from(thermal_dir)
    assert len(zones) == 2
    for thermal in zones:
        if thermal.name == "thermal_zone0":
            assert thermal.zone_type == "bcm2835_thermal"
            assert thermal.policy == "step_wise"
            assert thermal.mode is None
            assert thermal.temp == 49925
            assert thermal.passive is None
        elif thermal.name == "thermal_zone1":
            assert thermal.zone_type == "acpitz"
            assert thermal.policy == "step_wise"
            assert thermal.mode is True
            assert thermal.temp == -44000
            assert thermal.passive == 0
        else:
            pytest.fail(f"invalid thermal zone: {thermal.name}")


@pytest.mark.parametrize("text, expected", [("disabled", False), ("enabled", True), ("weird", None)])
def test_mode_values(tmp_path, text, expected):
    base = tmp_path / "thermal"
    _write(base / "thermal_zone3" / "mode", text + "\n")
    (zone,) = collect_from(base)
    assert zone.mode is expected


def test_negative_passive_raises(tmp_path):
    base = tmp_path / "thermal"
    _write(base / "thermal_zone0" / "passive", "-5\n")
    with pytest.raises(ParseError):
        collect_from(base)