"""Running system_profiler, or reading a saved dump of its output."""

import logging
import subprocess
from pathlib import Path
from typing import Any

from usb_inspector.profiler_errors import CommandFailedError
from usb_inspector.system_report import SystemReport

logger = logging.getLogger(__name__)


def profiler_command(config: dict[str, Any]) -> list[str]:
    """Build the system_profiler argument list from the config."""
    profiler = config["profiler"]
    return [str(profiler["command"]), "-json", *profiler["data_types"]]


def collect_report(config: dict[str, Any]) -> SystemReport:
    """Run system_profiler once and decode its output.

    Failures are raised to the caller; nothing is retried.
    """
    cmd = profiler_command(config)
    timeout = config["profiler"].get("timeout")
    logger.debug("Running: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, timeout=timeout, check=False)
    except FileNotFoundError as exc:
        raise CommandFailedError(None, f"{cmd[0]} not found") from exc
    except subprocess.TimeoutExpired as exc:
        raise CommandFailedError(None, f"timed out after {timeout}s") from exc

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise CommandFailedError(proc.returncode, stderr or "Unknown error")
    return SystemReport.from_json(proc.stdout)


def load_report(path: Path) -> SystemReport:
    """Decode a saved ``system_profiler -json`` dump."""
    return SystemReport.from_json(path.read_bytes())
