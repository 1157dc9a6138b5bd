"""Classification of USB device nodes into DeviceSummary records."""

import logging
from collections.abc import Iterable

from usb_inspector import field_aliases as keys
from usb_inspector.data_power_state import infer_data_power_state
from usb_inspector.device_kind import DeviceKind, infer_device_kind
from usb_inspector.device_summary import DeviceSummary
from usb_inspector.milli_amps import MilliAmps
from usb_inspector.node_fields import (
    RawNode,
    children_of,
    first_int,
    first_string,
    has_any_key,
)
from usb_inspector.transport import infer_transport
from usb_inspector.video_capability import infer_device_video
from usb_inspector.walk_tree import DEFAULT_MAX_DEPTH, WalkedNode, walk_tree

logger = logging.getLogger(__name__)


def is_device_node(node: RawNode) -> bool:
    """Check whether the node carries any identifying USB attribute."""
    return has_any_key(node, keys.DEVICE_IDENTIFYING_KEYS)


def _looks_like_interface(child: RawNode) -> bool:
    if has_any_key(child, keys.INTERFACE_NUMBER_KEYS):
        return True
    name = first_string(child, keys.NAME_KEYS)
    return name is not None and "interface" in name.lower()


def interface_count(node: RawNode) -> int:
    """Use the explicit count when reported, else count interface children."""
    explicit = first_int(node, keys.DEVICE_INTERFACE_COUNT_KEYS)
    if explicit is not None:
        return explicit
    return sum(1 for child in children_of(node) if _looks_like_interface(child))


def make_device_summary(walked: WalkedNode) -> DeviceSummary:
    """Extract and classify one device node."""
    node = walked.node
    path = walked.path_description

    name = first_string(node, keys.NAME_KEYS) or "Unnamed device"
    vendor = first_string(node, keys.DEVICE_VENDOR_KEYS)
    vendor_id = first_string(node, keys.DEVICE_VENDOR_ID_KEYS)
    bsd_name = first_string(node, keys.DEVICE_BSD_NAME_KEYS)
    usb_version = first_string(node, keys.DEVICE_USB_VERSION_KEYS)
    speed = first_string(node, keys.DEVICE_SPEED_KEYS)
    device_class = first_string(node, keys.DEVICE_CLASS_KEYS)
    current_required = MilliAmps.parse(
        first_string(node, keys.DEVICE_CURRENT_REQUIRED_KEYS)
    )
    interfaces = interface_count(node)

    kind = infer_device_kind(walked.path, name, vendor, vendor_id, device_class)

    return DeviceSummary(
        path_description=path,
        name=name,
        vendor=vendor,
        vendor_id=vendor_id,
        product_id=first_string(node, keys.DEVICE_PRODUCT_ID_KEYS),
        serial_number=first_string(node, keys.DEVICE_SERIAL_KEYS),
        location_id=first_string(node, keys.DEVICE_LOCATION_KEYS),
        bsd_name=bsd_name,
        usb_version=usb_version,
        device_speed=speed,
        current_required=current_required,
        current_available=MilliAmps.parse(
            first_string(node, keys.DEVICE_CURRENT_AVAILABLE_KEYS)
        ),
        extra_operating_current=MilliAmps.parse(
            first_string(node, keys.DEVICE_EXTRA_CURRENT_KEYS)
        ),
        interface_count=interfaces,
        device_class=device_class,
        device_subclass=first_string(node, keys.DEVICE_SUBCLASS_KEYS),
        device_protocol=first_string(node, keys.DEVICE_PROTOCOL_KEYS),
        transport=infer_transport(
            usb_version,
            speed,
            cable_type=first_string(node, keys.DEVICE_CABLE_TYPE_KEYS),
        ),
        data_power_state=infer_data_power_state(
            speed, current_required, bsd_name, interfaces
        ),
        video_capability=infer_device_video(
            path,
            name,
            vendor,
            first_string(node, keys.DEVICE_PRODUCT_NAME_KEYS),
        ),
        is_built_in=kind is DeviceKind.BUILT_IN,
    )


def parse_devices(
    roots: Iterable[RawNode], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[DeviceSummary]:
    """Classify every device node under the USB roots, sorted by path."""
    devices = [
        make_device_summary(walked)
        for walked in walk_tree(roots, max_depth=max_depth)
        if is_device_node(walked.node)
    ]
    logger.debug("Classified %d USB device nodes", len(devices))
    return sorted(devices, key=lambda d: d.path_description)
