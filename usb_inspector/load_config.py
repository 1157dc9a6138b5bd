"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from usb_inspector.deep_merge import deep_merge
from usb_inspector.field_aliases import THUNDERBOLT_DATA_TYPE, USB_DATA_TYPE
from usb_inspector.walk_tree import DEFAULT_MAX_DEPTH

OUTPUT_FORMATS = ("text", "json")

DEFAULT_CONFIG: dict[str, Any] = {
    "profiler": {
        "command": "/usr/sbin/system_profiler",
        "data_types": [USB_DATA_TYPE, THUNDERBOLT_DATA_TYPE],
        "timeout": 60,
    },
    "walker": {
        "max_depth": DEFAULT_MAX_DEPTH,
    },
    "output": {
        "format": "text",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
