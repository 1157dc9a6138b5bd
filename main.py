"""Main orchestration script for inspecting USB and Thunderbolt hardware."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Optionally run the development checks, then the inspector."""
    parser = argparse.ArgumentParser(
        description="Report attached USB devices and Thunderbolt/USB4 cables."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before inspecting",
    )
    parser.add_argument(
        "--input",
        help="Saved `system_profiler -json` dump to read instead of running it",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with inspection.\n")

    cmd = [sys.executable, "-m", "usb_inspector.inspect_hardware"]
    if args.input:
        cmd.extend(["--input", args.input])
    if args.config:
        cmd.extend(["--config", args.config])
    if args.json:
        cmd.extend(["--format", "json"])

    run_command(cmd, cwd=root_dir)


if __name__ == "__main__":
    main()
