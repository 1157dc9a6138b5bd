"""Inference of display-signal support for devices and cables."""

from collections.abc import Sequence
from enum import Enum


class VideoCapability(Enum):
    """Whether a device or cable can carry a display signal."""

    CAPABLE = "Video Ready"
    NOT_CAPABLE = "Not Supported"
    UNKNOWN = "Unknown"


DEVICE_VIDEO_KEYWORDS = (
    "display",
    "displayport",
    "dp",
    "hdmi",
    "video",
    "monitor",
    "dock",
)
DEVICE_NO_VIDEO_KEYWORDS = ("power adapter", "charger")


def infer_device_video(
    path: str,
    name: str,
    vendor: str | None,
    product_name: str | None,
) -> VideoCapability:
    """Keyword-match a device's path, name, vendor and product name."""
    haystack = " ".join([path, name, vendor or "", product_name or ""]).lower()
    if any(keyword in haystack for keyword in DEVICE_VIDEO_KEYWORDS):
        return VideoCapability.CAPABLE
    if any(keyword in haystack for keyword in DEVICE_NO_VIDEO_KEYWORDS):
        return VideoCapability.NOT_CAPABLE
    return VideoCapability.UNKNOWN


def _is_displayport(protocol: str) -> bool:
    return "displayport" in protocol or "dp " in protocol or protocol == "dp"


def infer_cable_video(
    protocols: Sequence[str],
    cable_type: str | None,
    name: str,
) -> VideoCapability:
    """Rank the cable's signals; the first one that applies decides."""
    normalized = [p.lower() for p in protocols]
    if any(_is_displayport(p) for p in normalized):
        return VideoCapability.CAPABLE
    if cable_type and "thunderbolt" in cable_type.lower():
        return VideoCapability.CAPABLE
    if any("usb4" in p or "thunderbolt" in p for p in normalized):
        return VideoCapability.CAPABLE
    lowered_name = name.lower()
    if "display" in lowered_name or "hdmi" in lowered_name:
        return VideoCapability.CAPABLE
    if not normalized:
        return VideoCapability.UNKNOWN
    return VideoCapability.NOT_CAPABLE
