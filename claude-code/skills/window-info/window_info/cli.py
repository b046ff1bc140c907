"""Command-line interface for Window Info."""

from __future__ import annotations

import json
import logging
import sys
from typing import Annotated

import typer

from .actions import filter_snapshot, format_snapshot, load_snapshot, partition_snapshot
from .core import describe_window, get_window_info, match_title_rule
from .models import WindowInfoError

app = typer.Typer(
    name="window-info",
    help="Window Info - Extract app and title metadata from window titles.",
)


# =============================================================================
# Common type aliases for Typer options
# =============================================================================

SnapshotArg = Annotated[str, typer.Argument(help="Snapshot JSON file")]
DesktopOpt = Annotated[
    int | None, typer.Option("--desktop", "-d", help="Only windows on this desktop")
]
IncludeSystemOpt = Annotated[
    bool, typer.Option("--include-system", help="Include system windows (panels, launchers)")
]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Window Info - Extract app and title metadata from window titles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_error(e: Exception, json_output: bool) -> None:
    msg = json.dumps({"error": str(e)}) if json_output else f"Error: {e}"
    print(msg, file=sys.stderr)


def _print_windows_table(windows: list) -> None:
    """Print windows in a formatted table."""
    if not windows:
        print("No windows found.")
        return

    print(f"{'ID':<10} {'Desktop':<8} {'App':<20} {'Title':<40}")
    print("-" * 80)
    for w in windows:
        info = get_window_info(w)
        desktop = "sticky" if w.is_sticky() else str(w.desktop)
        app_name = info.app[:18] if info.app else "-"
        title = info.title[:38] if info.title else "-"
        print(f"{w.window_id:<10} {desktop:<8} {app_name:<20} {title:<40}")


@app.command("parse")
def parse_cmd(
    title: Annotated[str, typer.Argument(help="Raw window title")],
    explain: Annotated[
        bool, typer.Option("--explain", help="Show which title rule matched")
    ] = False,
    json_output: JsonOpt = False,
) -> None:
    """Parse a single window title."""
    rule, info = match_title_rule(title)

    if json_output:
        data = info.to_dict()
        if explain:
            data["rule"] = rule
        print(json.dumps(data, indent=2))
    else:
        print(info.format())
        if explain:
            print(f"Rule: {rule or 'none'}")


@app.command("show")
def show_cmd(
    snapshot_file: SnapshotArg,
    desktop: DesktopOpt = None,
    include_system: IncludeSystemOpt = False,
    json_output: JsonOpt = False,
) -> None:
    """Pretty-print a snapshot grouped by active, visible and other windows."""
    try:
        snapshot = filter_snapshot(load_snapshot(snapshot_file), desktop, include_system)

        if json_output:
            data = {"time": snapshot.time.isoformat(), **partition_snapshot(snapshot).to_dict()}
            print(json.dumps(data, indent=2))
        else:
            print(format_snapshot(snapshot), end="")
    except WindowInfoError as e:
        _print_error(e, json_output)
        raise typer.Exit(1) from e


@app.command("list")
def list_cmd(
    snapshot_file: SnapshotArg,
    desktop: DesktopOpt = None,
    include_system: IncludeSystemOpt = False,
    json_output: JsonOpt = False,
) -> None:
    """List the windows of a snapshot."""
    try:
        snapshot = filter_snapshot(load_snapshot(snapshot_file), desktop, include_system)
        windows = list(snapshot.windows)

        if json_output:
            print(json.dumps([describe_window(w) for w in windows], indent=2))
        else:
            _print_windows_table(windows)
    except WindowInfoError as e:
        _print_error(e, json_output)
        raise typer.Exit(1) from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point for window-info CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    if argv is not None:
        sys.argv = ["window-info", *list(argv)]
    try:
        app(prog_name="window-info")
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
