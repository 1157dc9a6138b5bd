"""Report attached USB devices and Thunderbolt/USB4 cables.

Collects a fresh ``system_profiler -json`` payload (or reads a saved one),
classifies the USB and Thunderbolt trees and prints the result as text or
JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from usb_inspector.build_json_report import build_json_report
from usb_inspector.collect_report import collect_report, load_report
from usb_inspector.load_config import OUTPUT_FORMATS, load_config
from usb_inspector.parse_cables import parse_cables
from usb_inspector.parse_devices import parse_devices
from usb_inspector.profiler_errors import SystemProfilerError
from usb_inspector.render_console_report import render_console_report
from usb_inspector.system_report import SystemReport

logger = logging.getLogger(__name__)


def _obtain_report(args: argparse.Namespace, config: dict[str, Any]) -> SystemReport:
    """Read the saved dump when given, otherwise run system_profiler."""
    if args.input:
        logger.info("Reading saved report from %s", args.input)
        return load_report(args.input)
    return collect_report(config)


def run_inspection(args: argparse.Namespace) -> int:
    """Execute one collection and classification pass."""
    config = load_config(args.config)
    output_format = args.format or config["output"]["format"]
    try:
        max_depth = int(config["walker"]["max_depth"])
    except (TypeError, ValueError):
        print(
            "Error: walker.max_depth must be an integer, "
            f"got {config['walker']['max_depth']!r}",
            file=sys.stderr,
        )
        return 1

    try:
        report = _obtain_report(args, config)
    except (SystemProfilerError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    devices = parse_devices(report.usb_nodes, max_depth=max_depth)
    cables = parse_cables(report.thunderbolt_nodes, max_depth=max_depth)

    if output_format == "json":
        print(json.dumps(build_json_report(devices, cables), indent=2))
    else:
        print(render_console_report(devices, cables), end="")
    return 0


def main() -> int:
    """Parse arguments and run the inspection."""
    ap = argparse.ArgumentParser(
        description="Inspect USB devices and Thunderbolt/USB4 cables (macOS).",
    )
    ap.add_argument(
        "--input",
        type=Path,
        help="Read a saved `system_profiler -json` dump instead of running it",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: from config, else text)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_inspection(args)


if __name__ == "__main__":
    raise SystemExit(main())
