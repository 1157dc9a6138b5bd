"""Classification and de-duplication of Thunderbolt cable nodes."""

import logging
from collections.abc import Iterable

from usb_inspector import field_aliases as keys
from usb_inspector.cable_summary import CableSummary
from usb_inspector.node_fields import RawNode, first_string, string_list
from usb_inspector.video_capability import infer_cable_video
from usb_inspector.walk_tree import DEFAULT_MAX_DEPTH, walk_tree

logger = logging.getLogger(__name__)


def is_cable_node(node: RawNode) -> bool:
    """Check for a cable-type field or "cable" in the name or device type."""
    if node.get(keys.CABLE_TYPE_MARKER_KEY) is not None:
        return True
    name = first_string(node, keys.NAME_KEYS)
    if name and "cable" in name.lower():
        return True
    device_type = first_string(node, keys.CABLE_DEVICE_TYPE_KEYS)
    return bool(device_type and "cable" in device_type.lower())


def make_cable_summary(node: RawNode) -> CableSummary:
    """Extract and classify one cable node."""
    name = first_string(node, keys.CABLE_NAME_KEYS) or "Cable"
    cable_type = first_string(node, keys.CABLE_TYPE_KEYS)
    protocols = string_list(node, keys.CABLE_PROTOCOL_KEYS)
    return CableSummary(
        name=name,
        vendor=first_string(node, keys.CABLE_VENDOR_KEYS),
        product_id=first_string(node, keys.CABLE_PRODUCT_ID_KEYS),
        serial_number=first_string(node, keys.CABLE_SERIAL_KEYS),
        cable_type=cable_type,
        max_speed=first_string(node, keys.CABLE_MAX_SPEED_KEYS),
        supported_protocols=tuple(protocols),
        video_capability=infer_cable_video(protocols, cable_type, name),
    )


def merge_cable(cables: list[CableSummary], cable: CableSummary) -> None:
    """Add a cable, replacing in place an earlier one with the same serial."""
    if cable.serial_number is not None:
        for index, existing in enumerate(cables):
            if existing.serial_number == cable.serial_number:
                logger.debug("Replacing cable with serial %s", cable.serial_number)
                cables[index] = cable
                return
    cables.append(cable)


def parse_cables(
    roots: Iterable[RawNode], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[CableSummary]:
    """Classify every cable node under the Thunderbolt roots, sorted by name."""
    cables: list[CableSummary] = []
    for walked in walk_tree(roots, max_depth=max_depth):
        if is_cable_node(walked.node):
            merge_cable(cables, make_cable_summary(walked.node))
    logger.debug("Classified %d cables", len(cables))
    return sorted(cables, key=lambda c: c.name)
