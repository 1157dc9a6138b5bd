"""Shared fixtures: a trimmed system_profiler -json payload."""

from typing import Any

import pytest


@pytest.fixture
def profiler_payload() -> dict[str, Any]:
    """A USB tree and a Thunderbolt tree shaped like macOS output."""
    return {
        "SPUSBDataType": [
            {
                "_name": "USB31Bus",
                "host_controller": "AppleT8103USBXHCI",
                "_items": [
                    {
                        "_name": "Apple Internal Keyboard / Trackpad",
                        "vendor_id": "apple_vendor_id",
                        "product_id": "0x0281",
                        "location_id": "0x00100000 / 1",
                        "device_speed": "full_speed",
                        "bcd_device": "9.44",
                    },
                    {
                        "_name": "USB3.1 Hub",
                        "vendor_id": "0x2109  (VIA Labs, Inc.)",
                        "product_id": "0x0817",
                        "device_speed": "super_speed",
                        "location_id": "0x01100000 / 2",
                        "_items": [
                            {
                                "_name": "Extreme SSD",
                                "manufacturer": "SanDisk",
                                "vendor_id": "0x0781",
                                "product_id": "0x5583",
                                "serial_num": "3132333435",
                                "device_speed": "super_speed",
                                "bcd_device": "10.12",
                                "bsd_name": "disk4",
                                "current_required": "896mA",
                                "current_available": "900mA",
                            },
                            {
                                "_name": "Logitech USB Mouse",
                                "vendor_id": "0x046d",
                                "product_id": "0xc077",
                                "usb_version": "2.00",
                                "current_required": "100mA",
                                "_items": [
                                    {"_name": "HID Interface", "interface_number": 0},
                                ],
                            },
                        ],
                    },
                ],
            },
            {
                "_name": "USB20Bus",
                "_items": [
                    {
                        "_name": "Charger",
                        "vendor_id": "0x1234",
                        "current_required": "500 mA",
                    },
                ],
            },
        ],
        "SPThunderboltDataType": [
            {
                "_name": "thunderbolt_device_name",
                "device_name_key": "MacBook Pro",
                "_items": [
                    {
                        "_name": "Thunderbolt 4 Cable",
                        "vendor_name": "Apple Inc.",
                        "cable_type": "Thunderbolt 4",
                        "serial_number": "C07ABC",
                        "link_speed": "Up to 40 Gb/s",
                        "supported_protocols": ["USB4", "DisplayPort", "PCIe"],
                    },
                    {
                        "_name": "USB-C Charge Cable",
                        "device_type": "USB-C cable",
                        "supported_protocols": "USB 2.0",
                    },
                ],
            },
        ],
    }
