"""Inference of whether a device link carries data or only power."""

from enum import Enum

from usb_inspector.milli_amps import MilliAmps


class DataPowerState(Enum):
    """What a device link is observed to carry."""

    DATA_AND_POWER = "Data + Power"
    POWER_ONLY = "Power Only"
    UNKNOWN = "Unknown"


def infer_data_power_state(
    speed: str | None,
    current_required: MilliAmps | None,
    bsd_name: str | None,
    interface_count: int,
) -> DataPowerState:
    """Classify the link; any data signal outranks a bare current reading."""
    if bsd_name:
        return DataPowerState.DATA_AND_POWER
    if interface_count > 0:
        return DataPowerState.DATA_AND_POWER
    if speed:
        return DataPowerState.DATA_AND_POWER
    if current_required is not None:
        return DataPowerState.POWER_ONLY
    return DataPowerState.UNKNOWN
