"""Immutable record describing one USB device node."""

from dataclasses import dataclass

from usb_inspector.data_power_state import DataPowerState
from usb_inspector.milli_amps import MilliAmps
from usb_inspector.transport import Transport
from usb_inspector.video_capability import VideoCapability


@dataclass(frozen=True)
class DeviceSummary:
    """Flattened, classified view of a USB device."""

    path_description: str
    name: str
    vendor: str | None
    vendor_id: str | None
    product_id: str | None
    serial_number: str | None
    location_id: str | None
    bsd_name: str | None
    usb_version: str | None
    device_speed: str | None
    current_required: MilliAmps | None
    current_available: MilliAmps | None
    extra_operating_current: MilliAmps | None
    interface_count: int
    device_class: str | None
    device_subclass: str | None
    device_protocol: str | None
    transport: Transport
    data_power_state: DataPowerState
    video_capability: VideoCapability
    is_built_in: bool

    @property
    def identity(self) -> str:
        """Serial number, else location id, else the tree path."""
        return self.serial_number or self.location_id or self.path_description
