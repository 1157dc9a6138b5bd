"""Decoded system_profiler payload split into its two root collections."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from usb_inspector.field_aliases import THUNDERBOLT_DATA_TYPE, USB_DATA_TYPE
from usb_inspector.node_fields import RawNode
from usb_inspector.profiler_errors import MalformedPayloadError


def _root_nodes(payload: Mapping[str, Any], data_type: str) -> list[RawNode]:
    nodes = payload.get(data_type)
    if not isinstance(nodes, list):
        return []
    return [node for node in nodes if isinstance(node, Mapping)]


@dataclass(frozen=True)
class SystemReport:
    """USB and Thunderbolt root nodes of one system_profiler run."""

    usb_nodes: list[RawNode]
    thunderbolt_nodes: list[RawNode]

    @classmethod
    def from_json(cls, payload: bytes | str) -> "SystemReport":
        """Decode ``system_profiler -json`` output."""
        try:
            doc = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedPayloadError(str(exc)) from exc
        if not isinstance(doc, dict):
            raise MalformedPayloadError(f"top level is {type(doc).__name__}")
        return cls(
            usb_nodes=_root_nodes(doc, USB_DATA_TYPE),
            thunderbolt_nodes=_root_nodes(doc, THUNDERBOLT_DATA_TYPE),
        )
