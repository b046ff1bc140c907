"""Window Info - Extract app, sub-app and title metadata from window titles."""

from .actions import (
    SnapshotGroups,
    filter_snapshot,
    format_snapshot,
    format_timestamp,
    load_snapshot,
    partition_snapshot,
)
from .cli import main
from .core import (
    TITLE_RULES,
    TitleRule,
    describe_window,
    filter_windows,
    get_window_info,
    match_title_rule,
    parse_app_name_first,
    parse_app_name_last,
    parse_browser_subapp,
    parse_secondary_separator,
    parse_title,
)
from .models import (
    CHROME_APP_NAME,
    DEFAULT_TITLE_SEPARATOR,
    EDGE_TITLE_SEPARATOR,
    SLACK_APP_NAME,
    STICKY_DESKTOP,
    SYSTEM_WINDOW_NAMES,
    Snapshot,
    SnapshotLoadError,
    Window,
    WindowInfoError,
    Winfo,
)

__all__ = [
    "CHROME_APP_NAME",
    "DEFAULT_TITLE_SEPARATOR",
    "EDGE_TITLE_SEPARATOR",
    "SLACK_APP_NAME",
    "STICKY_DESKTOP",
    "SYSTEM_WINDOW_NAMES",
    "TITLE_RULES",
    "Snapshot",
    "SnapshotGroups",
    "SnapshotLoadError",
    "TitleRule",
    "Window",
    "WindowInfoError",
    "Winfo",
    "describe_window",
    "filter_snapshot",
    "filter_windows",
    "format_snapshot",
    "format_timestamp",
    "get_window_info",
    "load_snapshot",
    "main",
    "match_title_rule",
    "parse_app_name_first",
    "parse_app_name_last",
    "parse_browser_subapp",
    "parse_secondary_separator",
    "parse_title",
]
