"""Inference of the USB generation a device link runs at."""

import re
from enum import Enum


class Transport(Enum):
    """Link generation of a USB or Thunderbolt device."""

    USB1 = "USB 1.x"
    USB2 = "USB 2.0"
    USB3 = "USB 3.0"
    USB3_1 = "USB 3.1"
    USB3_2 = "USB 3.2"
    USB4 = "USB4"
    THUNDERBOLT = "Thunderbolt / USB4"
    UNKNOWN = "Unknown"


NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
VERSION_RE = re.compile(r"^(?:usb\s*)?(\d+)(?:\.(\d))?")

# (numbers, words, transport); first rule with a hit wins.
# Numbers match a whole numeric token or its integer part, so "5.0" reads as
# "5" but "1.5" never does.
SPEED_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...], Transport], ...] = (
    (("40",), (), Transport.USB4),
    (("20",), (), Transport.USB3_2),
    (("10",), (), Transport.USB3_1),
    (("5",), ("super",), Transport.USB3),
    (("480",), ("high",), Transport.USB2),
    (("12", "1.5"), ("full", "low"), Transport.USB1),
)

USB4_VERSION_MARKERS = ("usb4", "usb 4")


def transport_from_speed(speed: str) -> Transport | None:
    """Match a speed description such as "Up to 5.0 Gb/s" or "high_speed"."""
    text = speed.lower()
    numbers: set[str] = set()
    for token in NUMBER_RE.findall(text):
        numbers.add(token)
        numbers.add(token.split(".")[0])
    for rule_numbers, rule_words, transport in SPEED_RULES:
        if numbers.intersection(rule_numbers):
            return transport
        if any(word in text for word in rule_words):
            return transport
    return None


def transport_from_version(version: str) -> Transport | None:
    """Match a USB version string such as "3.10", "2.0" or "USB4".

    Only the leading major.minor pair counts, so "2.14" is USB 2.0 even
    though it contains a 4.
    """
    text = version.strip().lower()
    if any(marker in text for marker in USB4_VERSION_MARKERS):
        return Transport.USB4
    match = VERSION_RE.match(text)
    if not match:
        return None
    major, minor = match.group(1), match.group(2)
    if major == "4":
        return Transport.USB4
    if major == "3":
        if minor == "2":
            return Transport.USB3_2
        if minor == "1":
            return Transport.USB3_1
        return Transport.USB3
    if major == "2":
        return Transport.USB2
    if major == "1":
        return Transport.USB1
    return None


def infer_transport(
    usb_version: str | None,
    speed: str | None,
    cable_type: str | None = None,
) -> Transport:
    """Infer the link generation, preferring the speed over the version."""
    if cable_type and "thunderbolt" in cable_type.lower():
        return Transport.THUNDERBOLT
    if speed:
        transport = transport_from_speed(speed)
        if transport is not None:
            return transport
    if usb_version:
        transport = transport_from_version(usb_version)
        if transport is not None:
            return transport
    return Transport.UNKNOWN
