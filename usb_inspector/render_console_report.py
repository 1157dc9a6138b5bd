"""Plain-text rendering of device and cable summaries for a terminal."""

from collections.abc import Sequence

from usb_inspector.cable_summary import CableSummary
from usb_inspector.device_summary import DeviceSummary

NO_DEVICES_MESSAGE = "No USB devices were reported by system_profiler."
NO_CABLES_MESSAGE = (
    "No smart USB-C / Thunderbolt cables detected "
    "(many passive cables lack firmware and will not appear)."
)


def _section_title(title: str) -> str:
    return f"\n=== {title} ==="


def _device_lines(device: DeviceSummary) -> list[str]:
    lines = [f"• {device.name}", f"  Path: {device.path_description}"]
    if device.vendor:
        lines.append(f"  Vendor: {device.vendor}")
    if device.vendor_id and device.product_id:
        lines.append(f"  VID:PID: {device.vendor_id}:{device.product_id}")
    optional = [
        ("Serial", device.serial_number),
        ("Location", device.location_id),
        ("BSD Name", device.bsd_name),
        ("USB Version", device.usb_version),
        ("Speed", device.device_speed),
        ("Current Available", device.current_available),
        ("Current Draw", device.current_required),
        ("Extra Operating Current", device.extra_operating_current),
    ]
    lines.extend(f"  {label}: {value}" for label, value in optional if value)
    if device.interface_count > 0:
        lines.append(f"  Interfaces: {device.interface_count}")
    if device.device_class:
        lines.append(
            "  Class/Subclass/Protocol: "
            f"{device.device_class}/{device.device_subclass or '?'}"
            f"/{device.device_protocol or '?'}"
        )
    lines.append(f"  Transport: {device.transport.value}")
    lines.append(f"  Data/Power: {device.data_power_state.value}")
    lines.append(f"  Video: {device.video_capability.value}")
    if device.is_built_in:
        lines.append("  Built-in: yes")
    return lines


def _cable_lines(cable: CableSummary) -> list[str]:
    lines = [f"• {cable.name}"]
    optional = [
        ("Vendor", cable.vendor),
        ("Product ID", cable.product_id),
        ("Serial", cable.serial_number),
        ("Type", cable.cable_type),
        ("Max Speed", cable.max_speed),
    ]
    lines.extend(f"  {label}: {value}" for label, value in optional if value)
    if cable.supported_protocols:
        lines.append(f"  Protocols: {', '.join(cable.supported_protocols)}")
    lines.append(f"  Video: {cable.video_capability.value}")
    return lines


def render_console_report(
    devices: Sequence[DeviceSummary], cables: Sequence[CableSummary]
) -> str:
    """Render both result lists in the order given."""
    parts = [_section_title("USB Devices")]
    if not devices:
        parts.append(NO_DEVICES_MESSAGE)
    for device in devices:
        parts.extend(_device_lines(device))
        parts.append("")

    parts.append(_section_title("USB4 / Thunderbolt Cables"))
    if not cables:
        parts.append(NO_CABLES_MESSAGE)
    for cable in cables:
        parts.extend(_cable_lines(cable))
        parts.append("")

    return "\n".join(parts).rstrip() + "\n"
