# procsys

Read hardware and kernel information from the Linux `/sys` filesystem and
get it back as Python dataclasses.

## Installation

```
pip install procsys
```

## Collectors

Each module under `procsys.sysfs` has two functions. `collect()` reads the
standard location under `/sys`. `collect_from(base_path)` reads the same
layout from any other directory, such as a saved snapshot or a test
fixture.

| Module | Directory read by `collect()` | Result |
| --- | --- | --- |
| `class_cooling` | `/sys/class/thermal/` (entries `cooling_device*`) | list of `Cooling` |
| `class_thermal` | `/sys/class/thermal/` (entries `thermal_zone*`) | list of `ThermalZone` |
| `clocksource` | `/sys/devices/system/clocksource` | list of `Clocksource` |
| `class_nvme` | `/sys/class/nvme/` | dict of `NVMeDevice` |
| `class_dmi` | `/sys/class/dmi/id` | `DMI` |
| `class_watchdog` | `/sys/class/watchdog/` | list of `Watchdog` |
| `class_sas_host` | `/sys/class/sas_host/` | dict of `SASHost` |
| `class_power_supply` | `/sys/class/power_supply/` | dict of `PowerSupply` |
| `class_fibrechannel` | `/sys/class/fc_host/` | dict of `FibreChannelHost` |
| `class_scsi_tape` | `/sys/class/scsi_tape/` | dict of `ScsiTapeCounters` |
| `class_sas_port` | `/sys/class/sas_port/` | dict of `SASPort` |
| `class_sas_phy` | `/sys/class/sas_phy/` | dict of `SASPhy` |
| `class_sas_device` | `/sys/class/sas_device/` | dict of `SASDevice` |

Dictionaries are keyed by the entry's directory name, for example
`"nvme0"` or `"BAT0"`. Lists carry that name in a `name` field.

## Usage

```python
from procsys.sysfs import class_thermal, class_power_supply

for zone in class_thermal.collect():
    print(zone.name, zone.zone_type, zone.temp)

for name, supply in class_power_supply.collect().items():
    print(name, supply.ps_type, supply.capacity)
```

## Missing and empty files

Attribute files are read with surrounding whitespace stripped. A file that
is missing, or empty after stripping, does not produce an error. What the
field then holds depends on the class:

- `None`: `DMI`, `Watchdog`, `PowerSupply`, the string fields of
  `FibreChannelHost` and its `statistics` counters
  (`FibreChannelHostCounters`), and `ThermalZone.passive`.
- `""` or `0`: `Cooling`, `NVMeDevice`, `ScsiTapeCounters`, `SASPhy`,
  `SASDevice.sas_address`, and `ThermalZone`'s `zone_type`, `policy` and
  `temp`.

A few details:

- `ThermalZone.mode` is `True` for `enabled`, `False` for `disabled`, and
  `None` for anything else or when the file is absent.
- `PowerSupply.ps_type` is read from the file named `type`.
- `DMI.system_vendor` is read from `sys_vendor`. `DMI.product_version` is
  never filled in and stays `None`.
- `FibreChannelHost.statistics` counters are read from the `statistics`
  subdirectory as `0x`-prefixed hexadecimal.
- `ScsiTapeCounters` fields are read from each tape's `stats`
  subdirectory.
- `SASPhy.sas_port` is the final part of the `device/port` link target,
  kept only when it looks like `port-N:N...`. The link rates are the first
  word of each file, read as a float. The port-protocol fields are
  comma-separated lists.
- `SASHost`, `SASPort` and `SASDevice` list the `phy-*`, `port-*`,
  `expander-*`, `end_device-*` and block-device entries they find under
  each entry's `device` directory.
- `Clocksource` needs both `current_clocksource` and
  `available_clocksource`. If either is missing, `MetricError` is raised.
  `available_clocksource` is split on single spaces.

## Errors

Every failure raises `procsys.utils.MetricError` or one of its subclasses:

- `ParseError`: a file holds text that is not a valid number of the
  expected kind. Decimal values must fit in a signed or unsigned 64-bit
  integer. Hexadecimal values must carry a `0x` prefix. Link rates must
  be floats.
- `DmiSupportError`: `class_dmi.collect_from` is given a directory that
  does not exist.
- `ByteConvertError`: `convert_to_bytes` is given an unknown unit.

A file or link that exists but cannot be read raises plain `MetricError`.

## Helpers

`procsys.utils` holds the readers the collectors are built on:

- `collect_info_string(filename, dir_path)`: stripped file content, or
  `None`.
- `collect_info_i64(filename, dir_path)` and
  `collect_info_u64(filename, dir_path)`: the same, parsed as a 64-bit
  integer.
- `list_dir_content(dir_path, include_pattern, exclude_pattern)`: the
  directory's own name followed by its direct entries in sorted order.
  Names equal to `exclude_pattern` are dropped. Only names starting with
  `include_pattern` are kept.
- `read_file_lines(filename)`: the file's lines without line endings.
- `convert_to_bytes(num, unit)`: the units are `B`, `KiB`/`kiB`/`kB`/`KB`,
  `MiB`/`miB`/`MB`/`mB` and `GiB`/`giB`/`GB`/`gB`, all powers of 1024.
- `convert_str_to_i64`, `convert_str_to_u64`, `convert_hex_to_u64`.

## What it does not do

procsys is a library only. It has no command-line program, and it does not
store, export or serve the values it reads. It covers only the `/sys`
directories listed above.

## Running the tests

```
pip install -e ".[test]"
pytest
```