"""Machine-readable rendering of device and cable summaries."""

import time
from collections import Counter
from collections.abc import Sequence
from typing import Any

from usb_inspector.cable_summary import CableSummary
from usb_inspector.device_summary import DeviceSummary
from usb_inspector.milli_amps import MilliAmps


def _milli_amps(value: MilliAmps | None) -> int | None:
    return value.value if value is not None else None


def device_to_dict(device: DeviceSummary) -> dict[str, Any]:
    """Convert a device summary to JSON-ready primitives."""
    return {
        "id": device.identity,
        "path": device.path_description,
        "name": device.name,
        "vendor": device.vendor,
        "vendor_id": device.vendor_id,
        "product_id": device.product_id,
        "serial_number": device.serial_number,
        "location_id": device.location_id,
        "bsd_name": device.bsd_name,
        "usb_version": device.usb_version,
        "device_speed": device.device_speed,
        "current_required_ma": _milli_amps(device.current_required),
        "current_available_ma": _milli_amps(device.current_available),
        "extra_operating_current_ma": _milli_amps(device.extra_operating_current),
        "interface_count": device.interface_count,
        "device_class": device.device_class,
        "device_subclass": device.device_subclass,
        "device_protocol": device.device_protocol,
        "transport": device.transport.value,
        "data_power_state": device.data_power_state.value,
        "video_capability": device.video_capability.value,
        "is_built_in": device.is_built_in,
    }


def cable_to_dict(cable: CableSummary) -> dict[str, Any]:
    """Convert a cable summary to JSON-ready primitives."""
    return {
        "id": cable.identity,
        "name": cable.name,
        "vendor": cable.vendor,
        "product_id": cable.product_id,
        "serial_number": cable.serial_number,
        "cable_type": cable.cable_type,
        "max_speed": cable.max_speed,
        "supported_protocols": list(cable.supported_protocols),
        "video_capability": cable.video_capability.value,
    }


def _compute_stats(
    devices: Sequence[DeviceSummary], cables: Sequence[CableSummary]
) -> dict[str, Any]:
    built_in = sum(1 for d in devices if d.is_built_in)
    return {
        "transport_counts": dict(Counter(d.transport.value for d in devices)),
        "device_video_counts": dict(Counter(d.video_capability.value for d in devices)),
        "cable_video_counts": dict(Counter(c.video_capability.value for c in cables)),
        "built_in": built_in,
        "external": len(devices) - built_in,
    }


def build_json_report(
    devices: Sequence[DeviceSummary], cables: Sequence[CableSummary]
) -> dict[str, Any]:
    """Assemble the report: metadata, both record lists and summary stats."""
    return {
        "meta": {
            "timestamp": time.time(),
            "total_devices": len(devices),
            "total_cables": len(cables),
        },
        "devices": [device_to_dict(d) for d in devices],
        "cables": [cable_to_dict(c) for c in cables],
        "stats": _compute_stats(devices, cables),
    }
