"""Title parsing heuristics for Window Info.

Window titles embed the application name using a handful of conventions.
Assumptions:
    1) Most windows use " - " to separate the application name from the content.
    2) Most windows put the application name at the end.
    3) The few programs that reverse this convention only reverse it.

Rules are tried in order and the first one that returns a Winfo wins. A title
no rule recognizes becomes the whole Winfo title.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .models import (
    CHROME_APP_NAME,
    DEFAULT_TITLE_SEPARATOR,
    EDGE_TITLE_SEPARATOR,
    SLACK_APP_NAME,
    Window,
    Winfo,
)

logger = logging.getLogger("window_info.core")


@dataclass(frozen=True)
class TitleRule:
    """A named title convention."""

    name: str
    apply: Callable[[str], Winfo | None]


# =============================================================================
# Title Rules
# =============================================================================


def parse_browser_subapp(name: str) -> Winfo | None:
    """Chrome tabs of web apps end with "<site> - Google Chrome"."""
    fields = name.split(DEFAULT_TITLE_SEPARATOR)
    if len(fields) < 2 or fields[-1].strip() != CHROME_APP_NAME:
        return None

    return Winfo(
        app=CHROME_APP_NAME,
        sub_app=fields[-2].strip(),
        title=DEFAULT_TITLE_SEPARATOR.join(fields[:-2]),
    )


def parse_secondary_separator(name: str) -> Winfo | None:
    """Edge puts its name last behind a left-to-right mark."""
    before, sep, after = name.rpartition(EDGE_TITLE_SEPARATOR)
    if not sep:
        return None
    return Winfo(app=after.strip(), title=before.strip())


def parse_app_name_first(name: str) -> Winfo | None:
    """Slack puts its name first."""
    head, sep, tail = name.partition(DEFAULT_TITLE_SEPARATOR)
    # Compared untrimmed, while the stored values are trimmed. Kept as observed:
    # " Slack - x" falls through to the app-name-last rule.
    if not sep or head != SLACK_APP_NAME:
        return None
    return Winfo(app=head.strip(), title=tail.strip())


def parse_app_name_last(name: str) -> Winfo | None:
    before, sep, after = name.rpartition(DEFAULT_TITLE_SEPARATOR)
    if not sep:
        return None
    return Winfo(app=after.strip(), title=before.strip())


TITLE_RULES: tuple[TitleRule, ...] = (
    TitleRule("browser_subapp", parse_browser_subapp),
    TitleRule("secondary_separator", parse_secondary_separator),
    TitleRule("app_name_first", parse_app_name_first),
    TitleRule("app_name_last", parse_app_name_last),
)


# =============================================================================
# Parsing
# =============================================================================


def match_title_rule(name: str) -> tuple[str | None, Winfo]:
    """Parse a window title and report which rule matched.

    Args:
        name: Raw window title.

    Returns:
        Tuple of (rule name, parsed metadata). The rule name is None when no
        separator convention matched and the whole name became the title.
    """
    for rule in TITLE_RULES:
        info = rule.apply(name)
        if info is not None:
            logger.debug("Title %r matched rule %s", name, rule.name)
            return rule.name, info

    logger.debug("Title %r matched no rule", name)
    return None, Winfo(title=name)


def parse_title(name: str) -> Winfo:
    """Extract app, sub-app and title from a raw window title. Never fails."""
    return match_title_rule(name)[1]


def get_window_info(window: Window) -> Winfo:
    """Return structured metadata for a window, derived from its name."""
    return parse_title(window.name)


def describe_window(window: Window) -> dict[str, Any]:
    """Convert a window to a dictionary including its parsed metadata."""
    return {**window.to_dict(), "info": get_window_info(window).to_dict()}


# =============================================================================
# Window Filtering
# =============================================================================


def filter_windows(
    windows: Iterable[Window],
    *,
    desktop: int | None = None,
    include_system: bool = False,
) -> list[Window]:
    """Filter windows down to the ones users see.

    Args:
        windows: Windows in capture order.
        desktop: Keep only windows present on this desktop (sticky ones always are).
        include_system: Keep system windows such as "unity-panel".

    Returns:
        Matching windows, in input order.
    """
    result = []
    for w in windows:
        if not include_system and w.is_system():
            continue
        if desktop is not None and not w.is_on_desktop(desktop):
            continue
        result.append(w)
    return result
