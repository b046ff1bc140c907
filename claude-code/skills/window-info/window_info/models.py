"""Data models and exceptions for Window Info."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Desktop id reported for windows that are present on every desktop
STICKY_DESKTOP = -1

# Window names used by desktop-environment windows that users never see
SYSTEM_WINDOW_NAMES: frozenset[str] = frozenset(
    {
        "XdndCollectionWindowImp",
        "unity-launcher",
        "unity-panel",
        "unity-dash",
        "Hud",
        "Desktop",
    }
)

# Title separators
DEFAULT_TITLE_SEPARATOR = " - "
EDGE_TITLE_SEPARATOR = "\u200e- "  # Left-to-right mark before the hyphen

# Applications with their own title conventions
CHROME_APP_NAME = "Google Chrome"
SLACK_APP_NAME = "Slack"

# Snapshot timestamps render as "Mon Jan 2 15:04:05 -0700 MST 2006"
TIMESTAMP_FORMAT = "{weekday} {month} {t.day} {t:%H:%M:%S} {offset} {zone} {t.year}"

# English names regardless of locale
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
)


class WindowInfoError(Exception):
    """Base exception for Window Info operations."""


class SnapshotLoadError(WindowInfoError):
    """Snapshot data could not be read or is malformed."""


@dataclass(frozen=True)
class Winfo:
    """Structured metadata extracted from a window title.

    ``app`` is the application that controls the window. ``sub_app`` is an
    application running inside it, e.g. a web app (Sourcegraph) in a Chrome
    tab, where ``app`` would be "Google Chrome". ``title`` is what remains
    once both have been stripped.
    """

    app: str = ""
    sub_app: str = ""
    title: str = ""

    def format(self) -> str:
        """Render as ``[App|SubApp|Title]``."""
        return f"[{self.app}|{self.sub_app}|{self.title}]"

    def __str__(self) -> str:
        return self.format()

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary representation."""
        return {"app": self.app, "sub_app": self.sub_app, "title": self.title}


@dataclass(frozen=True)
class Window:
    """An application window as reported by the windowing system."""

    window_id: int
    desktop: int
    name: str = ""

    def is_system(self) -> bool:
        """Return True for desktop-environment windows (e.g. "unity-panel")."""
        return self.name in SYSTEM_WINDOW_NAMES

    def is_sticky(self) -> bool:
        """Return True if the window is present on all desktops."""
        return self.desktop == STICKY_DESKTOP

    def is_on_desktop(self, desktop: int) -> bool:
        """Return True if the window is present on the given desktop."""
        return self.is_sticky() or self.desktop == desktop

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (uses the capture record keys)."""
        return {"id": self.window_id, "desktop": self.desktop, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Window:
        """Build a window from a ``{id, desktop, name}`` capture record.

        Raises:
            SnapshotLoadError: If a key is missing or has the wrong type.
        """
        try:
            window_id = data["id"]
            desktop = data["desktop"]
            name = data.get("name", "")
        except (KeyError, TypeError, AttributeError) as e:
            raise SnapshotLoadError(f"Invalid window record: {data!r}") from e

        if not _is_int(window_id) or not _is_int(desktop):
            raise SnapshotLoadError(f"Window id and desktop must be integers: {data!r}")
        if not isinstance(name, str):
            raise SnapshotLoadError(f"Window name must be a string: {data!r}")

        return cls(window_id=window_id, desktop=desktop, name=name)


@dataclass(frozen=True)
class Snapshot:
    """State of all in-use application windows at a moment in time."""

    time: datetime
    windows: tuple[Window, ...] = field(default_factory=tuple)
    active: int | None = None
    visible: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Collaborators may hand over any iterable of windows or visible ids
        object.__setattr__(self, "windows", tuple(self.windows))
        object.__setattr__(self, "visible", frozenset(self.visible))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (JSON-compatible)."""
        return {
            "time": self.time.isoformat(),
            "windows": [w.to_dict() for w in self.windows],
            "active": self.active,
            "visible": sorted(self.visible),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Snapshot:
        """Build a snapshot from its JSON representation.

        Raises:
            SnapshotLoadError: If the data is malformed.
        """
        if not isinstance(data, dict):
            raise SnapshotLoadError("Snapshot must be a JSON object")

        try:
            time = datetime.fromisoformat(data["time"])
        except KeyError as e:
            raise SnapshotLoadError("Snapshot is missing 'time'") from e
        except (TypeError, ValueError) as e:
            raise SnapshotLoadError(f"Invalid snapshot time: {data['time']!r}") from e

        records = data.get("windows", [])
        if not isinstance(records, list):
            raise SnapshotLoadError("Snapshot 'windows' must be a list")

        active = data.get("active")
        if active is not None and not _is_int(active):
            raise SnapshotLoadError(f"Snapshot 'active' must be an integer: {active!r}")

        visible = data.get("visible", [])
        if not isinstance(visible, list) or not all(_is_int(v) for v in visible):
            raise SnapshotLoadError("Snapshot 'visible' must be a list of integers")

        return cls(
            time=time,
            windows=tuple(Window.from_dict(r) for r in records),
            active=active,
            visible=frozenset(visible),
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
