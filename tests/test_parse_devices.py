"""Tests for USB device classification."""

import copy
from typing import Any

from usb_inspector.data_power_state import DataPowerState
from usb_inspector.milli_amps import MilliAmps
from usb_inspector.parse_devices import interface_count, is_device_node, parse_devices
from usb_inspector.transport import Transport
from usb_inspector.video_capability import VideoCapability


def _by_name(devices: list, name: str) -> Any:
    return next(d for d in devices if d.name == name)


def test_is_device_node() -> None:
    """Verify identifying keys under any alias qualify a node."""
    assert is_device_node({"idVendor": 1452})
    assert is_device_node({"spusb_device_speed": "high_speed"})
    assert not is_device_node({"_name": "USB31Bus", "host_controller": "X"})


def test_interface_count_explicit() -> None:
    """Verify an explicit count beats counting children."""
    node = {"num_interfaces": 3, "_items": [{"interface_number": 0}]}
    assert interface_count(node) == 3


def test_interface_count_from_children() -> None:
    """Verify interface-looking children are counted."""
    node = {
        "_items": [
            {"interface_number": 0},
            {"bInterfaceNumber": 1},
            {"_name": "Audio Interface"},
            {"_name": "Some Device", "vendor_id": "0x1"},
        ]
    }
    assert interface_count(node) == 3
    assert interface_count({}) == 0


def test_parse_devices_skips_non_device_nodes(profiler_payload: dict) -> None:
    """Verify bus roots are walked but not reported."""
    devices = parse_devices(profiler_payload["SPUSBDataType"])
    names = [d.name for d in devices]
    assert "USB31Bus" not in names
    assert "USB20Bus" not in names
    assert len(devices) == 5


def test_parse_devices_sorted_by_path(profiler_payload: dict) -> None:
    """Verify ordinal ordering by path."""
    devices = parse_devices(profiler_payload["SPUSBDataType"])
    paths = [d.path_description for d in devices]
    assert paths == sorted(paths)
    assert paths[0] == "USB20Bus > Charger"


def test_parse_devices_extracts_fields(profiler_payload: dict) -> None:
    """Verify aliased extraction and derived classifications for a drive."""
    devices = parse_devices(profiler_payload["SPUSBDataType"])
    ssd = _by_name(devices, "Extreme SSD")
    assert ssd.path_description == "USB31Bus > USB3.1 Hub > Extreme SSD"
    assert ssd.vendor == "SanDisk"
    assert ssd.vendor_id == "0x0781"
    assert ssd.serial_number == "3132333435"
    assert ssd.bsd_name == "disk4"
    assert ssd.current_required == MilliAmps(896)
    assert ssd.current_available == MilliAmps(900)
    assert ssd.extra_operating_current is None
    assert ssd.transport is Transport.USB3
    assert ssd.data_power_state is DataPowerState.DATA_AND_POWER
    assert ssd.video_capability is VideoCapability.UNKNOWN
    assert not ssd.is_built_in
    assert ssd.identity == "3132333435"


def test_parse_devices_vendor_falls_back_to_vendor_id(profiler_payload: dict) -> None:
    """Verify the vendor alias list ends with the vendor id."""
    devices = parse_devices(profiler_payload["SPUSBDataType"])
    mouse = _by_name(devices, "Logitech USB Mouse")
    assert mouse.vendor == "0x046d"
    assert mouse.transport is Transport.USB2
    assert mouse.interface_count == 1
    assert mouse.data_power_state is DataPowerState.DATA_AND_POWER
    assert not mouse.is_built_in


def test_parse_devices_built_in(profiler_payload: dict) -> None:
    """Verify internal hardware and shallow hubs are flagged built in."""
    devices = parse_devices(profiler_payload["SPUSBDataType"])
    assert _by_name(devices, "Apple Internal Keyboard / Trackpad").is_built_in
    assert _by_name(devices, "USB3.1 Hub").is_built_in


def test_parse_devices_power_only(profiler_payload: dict) -> None:
    """Verify a charger with only a current reading is power only."""
    devices = parse_devices(profiler_payload["SPUSBDataType"])
    charger = _by_name(devices, "Charger")
    assert charger.data_power_state is DataPowerState.POWER_ONLY
    assert charger.video_capability is VideoCapability.NOT_CAPABLE
    assert charger.transport is Transport.UNKNOWN
    assert charger.identity == "USB20Bus > Charger"


def test_identity_prefers_location_over_path(profiler_payload: dict) -> None:
    """Verify location id is the fallback identity."""
    devices = parse_devices(profiler_payload["SPUSBDataType"])
    assert _by_name(devices, "USB3.1 Hub").identity == "0x01100000 / 2"


def test_missing_optional_keys_are_absent() -> None:
    """Verify a bare node yields None fields, never empty strings."""
    devices = parse_devices([{"vendor_id": "", "product_id": "0x1"}])
    assert len(devices) == 1
    device = devices[0]
    assert device.name == "Unnamed device"
    assert device.path_description == ""
    assert device.vendor is None
    assert device.vendor_id is None
    assert device.serial_number is None
    assert device.current_required is None
    assert device.interface_count == 0
    assert device.transport is Transport.UNKNOWN
    assert device.data_power_state is DataPowerState.UNKNOWN


def test_malformed_values_do_not_raise() -> None:
    """Verify odd value types are tolerated."""
    node = {
        "_name": ["not", "a", "string"],
        "vendor_id": {"x": 1},
        "current_required": True,
        "num_interfaces": "many",
        "_items": "nope",
    }
    devices = parse_devices([node])
    assert devices[0].name == "Unnamed device"
    assert devices[0].current_required is None
    assert devices[0].interface_count == 0


def test_oversized_current_reading_does_not_raise() -> None:
    """Verify a huge current reading is dropped instead of failing the parse."""
    node = {"_name": "X", "vendor_id": "0x1", "current_required": "9" * 5000 + "mA"}
    devices = parse_devices([node])
    assert devices[0].current_required is None


def test_devices_are_not_deduplicated() -> None:
    """Verify devices sharing a serial are all reported."""
    roots = [
        {"_name": "A", "vendor_id": "0x1", "serial_num": "S1"},
        {"_name": "B", "vendor_id": "0x1", "serial_num": "S1"},
    ]
    devices = parse_devices(roots)
    assert [d.name for d in devices] == ["A", "B"]


def test_sort_is_stable_for_equal_paths() -> None:
    """Verify ties keep discovery order."""
    roots = [
        {"_name": "Same", "vendor_id": "0x1", "serial_num": "first"},
        {"_name": "Same", "vendor_id": "0x1", "serial_num": "second"},
    ]
    devices = parse_devices(roots)
    assert [d.serial_number for d in devices] == ["first", "second"]


def test_parse_devices_is_repeatable(profiler_payload: dict) -> None:
    """Verify two passes over the same input are identical and input untouched."""
    before = copy.deepcopy(profiler_payload)
    first = parse_devices(profiler_payload["SPUSBDataType"])
    second = parse_devices(profiler_payload["SPUSBDataType"])
    assert first == second
    assert profiler_payload == before
    assert sorted(first, key=lambda d: d.path_description) == first
