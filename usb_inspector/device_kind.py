"""Separation of host-internal hardware from user-attached peripherals."""

from collections.abc import Sequence
from enum import Enum


class DeviceKind(Enum):
    """Whether a device belongs to the host or was plugged in."""

    BUILT_IN = "builtIn"
    EXTERNAL = "external"


BUILT_IN_KEYWORDS = (
    "bluetooth",
    "camera",
    "facetime",
    "isight",
    "fingerprint",
    "touch bar",
    "touchbar",
    "keyboard",
    "trackpad",
    "internal",
    "built-in",
    "controller",
    "root hub",
    "usb bus",
    "usb 2.0 bus",
    "usb 3.0 bus",
    "usb 3.1 bus",
    "usb20bus",
    "usb30bus",
    "usb31bus",
    "apple internal",
    "t2 controller",
)
APPLE_VENDOR_ID = "05ac"
APPLE_PERIPHERAL_KEYWORDS = ("keyboard", "trackpad", "mouse", "camera", "bluetooth")
MAX_INFRASTRUCTURE_DEPTH = 2


def is_apple_vendor_id(vendor_id: str | None) -> bool:
    """Match Apple's USB vendor id in forms like "0x05AC  (Apple Inc.)"."""
    if not vendor_id:
        return False
    parts = vendor_id.strip().lower().split()
    if not parts:
        return False
    token = parts[0]
    if token.startswith("0x"):
        token = token[2:]
    return token == APPLE_VENDOR_ID


def infer_device_kind(
    path_segments: Sequence[str],
    name: str,
    vendor: str | None,
    vendor_id: str | None,
    device_class: str | None,
) -> DeviceKind:
    """Apply the built-in rules in order; the first match wins.

    The top-level bus segment is left out of the keyword scan, otherwise every
    device hanging off a bus named like "USB 3.0 Bus" would look internal.
    This departs from a whole-path scan on purpose; keep it.
    """
    scanned = path_segments[1:] if len(path_segments) > 1 else path_segments
    haystack = " ".join([*scanned, name, vendor or "", vendor_id or ""]).lower()

    if any(keyword in haystack for keyword in BUILT_IN_KEYWORDS):
        return DeviceKind.BUILT_IN
    if is_apple_vendor_id(vendor_id) and any(
        keyword in haystack for keyword in APPLE_PERIPHERAL_KEYWORDS
    ):
        return DeviceKind.BUILT_IN
    if device_class and "hub" in device_class.lower():
        return DeviceKind.BUILT_IN
    path = " ".join(path_segments).lower()
    if len(path_segments) <= MAX_INFRASTRUCTURE_DEPTH and "hub" in path:
        return DeviceKind.BUILT_IN
    return DeviceKind.EXTERNAL
