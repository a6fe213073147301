from pathlib import Path

import pytest

from procsys.sysfs.class_dmi import DMI, collect_from
from procsys.utils import DmiSupportError, MetricError

FIXTURE = {
    "bios_date": "04/12/2021\n",
    "bios_release": "2.2\n",
    "bios_vendor": "Example Vendor\n",
    "bios_version": "2.2.4\n",
    "board_asset_tag": "\n",
    "board_name": "BOARD01\n",
    "board_serial": ".SERIAL0.BOARDSERIAL0001.\n",
    "board_vendor": "Example Vendor\n",
    "board_version": "A01\n",
    "chassis_asset_tag": "\n",
    "chassis_serial": "SERIAL0\n",
    "chassis_type": "23\n",
    "chassis_vendor": "Example Vendor\n",
    "chassis_version": "\n",
    "product_family": "ExampleFamily\n",
    "product_name": "ExampleFamily R100\n",
    "product_serial": "SERIAL0\n",
    "product_sku": "SKU=NotProvided;ModelName=ExampleFamily R100\n",
    "product_uuid": "00000000-0000-4000-8000-000000000000\n",
    "sys_vendor": "Example Vendor\n",
    "modalias": "dmi:bvnExample\n",
    "uevent": "\n",
}


@pytest.fixture
def dmi_dir(tmp_path: Path) -> Path:
    base = tmp_path / "sys" / "class" / "dmi" / "id"
    base.mkdir(parents=True)
    for name, content in FIXTURE.items():
        (base / name).write_text(content)
    (base / "power").mkdir()
    return base


def test_dmi_collect(dmi_dir):
    dmi = collect_from(dmi_dir)
    assert dmi.bios_date == "04/12/2021"
    assert dmi.bios_release == "2.2"
    assert dmi.bios_vendor == "Example Vendor"
    assert dmi.bios_version == "2.2.4"
    assert dmi.board_name == "BOARD01"
    assert dmi.board_serial == ".SERIAL0.BOARDSERIAL0001."
    assert dmi.board_vendor == "Example Vendor"
    assert dmi.board_version == "A01"
    assert dmi.chassis_asset_tag is None
    assert dmi.chassis_serial == "SERIAL0"
    assert dmi.chassis_type == "23"
    assert dmi.chassis_vendor == "Example Vendor"
    assert dmi.chassis_version is None
    assert dmi.product_family == "ExampleFamily"
    assert dmi.product_name == "ExampleFamily R100"
    assert dmi.product_serial == "SERIAL0"
    assert dmi.product_sku == "SKU=NotProvided;ModelName=ExampleFamily R100"
    assert dmi.product_uuid == "00000000-0000-4000-8000-000000000000"
    assert dmi.product_version is None
    assert dmi.system_vendor == "Example Vendor"


def test_empty_attribute_is_none(dmi_dir):
    assert collect_from(dmi_dir).board_asset_tag is None


def test_str_path_accepted(dmi_dir):
    assert collect_from(str(dmi_dir)).chassis_type == "23"


def test_missing_directory_raises(tmp_path):
    with pytest.raises(DmiSupportError):
        collect_from(tmp_path / "missing" / "id")


def test_dmi_support_error_is_metric_error(tmp_path):
    with pytest.raises(MetricError):
        collect_from(tmp_path / "nowhere")


def test_empty_directory_gives_defaults(tmp_path):
    base = tmp_path / "id"
    base.mkdir()
    assert collect_from(base) == DMI()