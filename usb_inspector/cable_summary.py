"""Immutable record describing one USB-C / Thunderbolt cable."""

from dataclasses import dataclass

from usb_inspector.video_capability import VideoCapability


@dataclass(frozen=True)
class CableSummary:
    """Metadata a smart cable reports about itself."""

    name: str
    vendor: str | None
    product_id: str | None
    serial_number: str | None
    cable_type: str | None
    max_speed: str | None
    supported_protocols: tuple[str, ...]  # discovery order, duplicates kept
    video_capability: VideoCapability

    @property
    def identity(self) -> str:
        """Serial number, else vendor, product id and name combined."""
        if self.serial_number:
            return self.serial_number
        return f"{self.vendor or 'vendor'}-{self.product_id or 'pid'}-{self.name}"
