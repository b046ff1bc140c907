"""Snapshot actions: loading, partitioning and rendering for Window Info."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Any

from .core import describe_window, filter_windows, get_window_info
from .models import (
    MONTH_NAMES,
    TIMESTAMP_FORMAT,
    WEEKDAY_NAMES,
    Snapshot,
    SnapshotLoadError,
    Window,
)

logger = logging.getLogger("window_info.actions")


@dataclass(frozen=True)
class SnapshotGroups:
    """Windows of a snapshot split by focus state."""

    active: Window | None = None
    visible: tuple[Window, ...] = field(default_factory=tuple)
    other: tuple[Window, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "active": describe_window(self.active) if self.active is not None else None,
            "visible": [describe_window(w) for w in self.visible],
            "other": [describe_window(w) for w in self.other],
        }


# =============================================================================
# Loading
# =============================================================================


def load_snapshot(path: str | Path) -> Snapshot:
    """Load a snapshot from a JSON file written by the capture process.

    Args:
        path: Path to the snapshot JSON file.

    Returns:
        Parsed snapshot.

    Raises:
        SnapshotLoadError: If the file can't be read or isn't a valid snapshot.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SnapshotLoadError(f"Failed to read snapshot {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(f"Invalid JSON in snapshot {path}: {e}") from e

    snapshot = Snapshot.from_dict(data)
    logger.info("Loaded snapshot %s with %d windows", path, len(snapshot.windows))
    return snapshot


def filter_snapshot(
    snapshot: Snapshot,
    desktop: int | None = None,
    include_system: bool = False,
) -> Snapshot:
    """Return a copy of the snapshot keeping only user-facing windows."""
    windows = filter_windows(snapshot.windows, desktop=desktop, include_system=include_system)
    return replace(snapshot, windows=tuple(windows))


# =============================================================================
# Partitioning and Rendering
# =============================================================================


def partition_snapshot(snapshot: Snapshot) -> SnapshotGroups:
    """Split snapshot windows into active, visible and other groups.

    Input order is kept within each group. Ids in ``active`` or ``visible``
    that match no window are ignored.
    """
    active = None
    visible = []
    other = []
    for w in snapshot.windows:
        if snapshot.active is not None and w.window_id == snapshot.active:
            active = w
        elif w.window_id in snapshot.visible:
            visible.append(w)
        else:
            other.append(w)

    known_ids = {w.window_id for w in snapshot.windows}
    if snapshot.active is not None and snapshot.active not in known_ids:
        logger.debug("Active window %d not in snapshot, ignoring", snapshot.active)
    missing = sorted(snapshot.visible - known_ids)
    if missing:
        logger.debug("Visible windows %s not in snapshot, ignoring", missing)

    return SnapshotGroups(active=active, visible=tuple(visible), other=tuple(other))


def format_timestamp(t: datetime) -> str:
    """Format a capture time as e.g. "Tue Jan 2 15:04:05 +0000 UTC 2024"."""
    if t.tzinfo is None:
        t = t.astimezone()
    offset = f"{t:%z}"
    zone = t.tzname()
    # Fixed offsets without a zone name (e.g. "UTC+02:00") repeat the offset
    if not zone or (zone.startswith("UTC") and zone != "UTC"):
        zone = offset
    return TIMESTAMP_FORMAT.format(
        t=t,
        weekday=WEEKDAY_NAMES[t.weekday()],
        month=MONTH_NAMES[t.month - 1],
        offset=offset,
        zone=zone,
    )


def _format_group(label: str, windows: tuple[Window, ...]) -> str:
    entries = "".join(f"{get_window_info(w).format()}, " for w in windows)
    return f"\t{label}: {entries}\n"


def format_snapshot(snapshot: Snapshot) -> str:
    """Return a pretty-printed representation of the snapshot."""
    groups = partition_snapshot(snapshot)

    lines = [f"{format_timestamp(snapshot.time)}\n"]
    if groups.active is not None:
        lines.append(f"\tActive: {get_window_info(groups.active).format()}\n")
    if groups.visible:
        lines.append(_format_group("Visible", groups.visible))
    if groups.other:
        lines.append(_format_group("Other", groups.other))
    return "".join(lines)
