"""
Render state for the contribution widget.

Everything the page shows is described by a PageState value built here by
pure functions. The web app and CLI only apply that state to their output.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from contrib_calendar.activity_generator import ActivityProvider, generate_activity
from contrib_calendar.calendar_builder import build_calendar
from contrib_calendar.github_client import (
    GitHubClient,
    GitHubClientError,
    UserProfile,
    fetch_profile,
)
from contrib_calendar.models import CalendarCell, CalendarGrid, SummaryStats
from contrib_calendar.streak_calculator import calculate_summary

logger = logging.getLogger(__name__)

# Contribution color scale, indexed by intensity bucket (similar to GitHub's)
PALETTE = (
    "#161b22",  # 0
    "#0e4429",  # 1-2
    "#006d32",  # 3-4
    "#26a641",  # 5-6
    "#39d353",  # 7+
)

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True)
class PageState:
    """Everything needed to render the widget page once."""

    username: str = ""
    profile: Optional[UserProfile] = None
    grid: Optional[CalendarGrid] = None
    stats: Optional[SummaryStats] = None
    error: Optional[str] = None

    @property
    def show_results(self) -> bool:
        return self.error is None and self.profile is not None

    @property
    def show_error(self) -> bool:
        return self.error is not None


def format_error(reason: str) -> str:
    """User-facing message for any failed lookup."""
    return f"Error: {reason}. Please check the username and try again."


def normalize_username(raw: Optional[str]) -> Optional[str]:
    """Trim submitted input; blank input returns None."""
    if raw is None:
        return None
    username = raw.strip()
    return username or None


def cell_color(cell: CalendarCell) -> Optional[str]:
    """Palette color for a data cell, None for placeholders."""
    if cell.is_placeholder:
        return None
    return PALETTE[cell.bucket]


def idle_state() -> PageState:
    return PageState()


def error_state(username: str, reason: str) -> PageState:
    # Failure never carries results, so no stale panel is shown
    return PageState(username=username, error=format_error(reason))


def results_state(
    username: str, profile: UserProfile, grid: CalendarGrid, stats: SummaryStats
) -> PageState:
    return PageState(username=username, profile=profile, grid=grid, stats=stats)


def load_page_state(
    raw_username: Optional[str],
    client: Optional[GitHubClient] = None,
    provider: Optional[ActivityProvider] = None,
    today: Optional[date] = None,
) -> PageState:
    """
    Run the whole widget pipeline for one submitted username.

    Args:
        raw_username: Text as submitted by the user
        client: GitHub client to use. Defaults to a new GitHubClient.
        provider: Activity data source. Defaults to random data.
        today: Override for today's date (for testing)

    Returns:
        idle_state() for blank input, error_state() if the lookup fails,
        otherwise results_state() with profile, calendar and stats
    """
    username = normalize_username(raw_username)
    if username is None:
        return idle_state()

    if today is None:
        today = date.today()

    logger.info("Loading contribution widget for %s", username)
    try:
        profile = fetch_profile(username, client=client)
    except GitHubClientError as e:
        return error_state(username, str(e))

    dataset = generate_activity(today=today, provider=provider)
    grid = build_calendar(dataset)
    stats = calculate_summary(dataset, today=today)

    return results_state(username, profile, grid, stats)


def cell_to_dict(cell: CalendarCell) -> dict:
    if cell.is_placeholder:
        return {"date": None, "count": None, "level": None, "color": None}
    return {
        "date": cell.date.isoformat(),
        "count": cell.count,
        "level": int(cell.bucket),
        "color": cell_color(cell),
    }


def calendar_to_dict(grid: CalendarGrid) -> dict:
    """JSON-ready calendar: week columns of cells, Sunday first."""
    return {
        "start": grid.start.isoformat(),
        "weeks": [[cell_to_dict(cell) for cell in week] for week in grid.weeks],
    }


def stats_to_dict(stats: SummaryStats) -> dict:
    return asdict(stats)


def profile_to_dict(profile: UserProfile) -> dict:
    return asdict(profile)
