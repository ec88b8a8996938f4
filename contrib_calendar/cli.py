"""
CLI display functions for contrib-calendar.
"""

from contrib_calendar.github_client import UserProfile
from contrib_calendar.models import CalendarGrid, SummaryStats
from contrib_calendar.presenter import WEEKDAY_LABELS

# One glyph per intensity bucket, lightest first
LEVEL_GLYPHS = ("·", "░", "▒", "▓", "█")
PLACEHOLDER_GLYPH = " "


def display_profile(profile: UserProfile) -> None:
    """
    Display the user info panel to the console.

    Args:
        profile: UserProfile with display fallbacks already applied
    """
    print(f"👤 {profile.display_name} (@{profile.login})")
    print(f"   {profile.bio}")
    print(
        f"   Repos: {profile.public_repos}  Followers: {profile.followers}  "
        f"Following: {profile.following}  Gists: {profile.public_gists}"
    )
    print()


def format_calendar(grid: CalendarGrid) -> list[str]:
    """
    Render the calendar grid as text rows.

    Each row is one weekday (Sunday first) and each column one week, so the
    output reads like GitHub's contribution graph.

    Returns:
        Seven strings, one per weekday
    """
    rows = []
    for day_index, label in enumerate(WEEKDAY_LABELS):
        glyphs = []
        for week in grid.weeks:
            cell = week[day_index]
            if cell.is_placeholder:
                glyphs.append(PLACEHOLDER_GLYPH)
            else:
                glyphs.append(LEVEL_GLYPHS[cell.bucket])
        rows.append(f"  {label} {''.join(glyphs)}".rstrip())
    return rows


def display_calendar(grid: CalendarGrid) -> None:
    """Display the contribution calendar with a color legend."""
    print("Contribution Activity:")
    for row in format_calendar(grid):
        print(row)
    print(f"      Less {' '.join(LEVEL_GLYPHS)} More")
    print()


def display_summary(stats: SummaryStats) -> None:
    """
    Display summary statistics to the console.

    Args:
        stats: SummaryStats from calculate_summary()
    """
    current_label = "day" if stats.current_streak == 1 else "days"
    longest_label = "day" if stats.longest_streak == 1 else "days"

    print("📊 Contribution Stats:")
    print(f"   Total:          {stats.total}")
    print(f"   Current streak: {stats.current_streak} {current_label}")
    print(f"   Longest streak: {stats.longest_streak} {longest_label}")
    print(f"   Daily average:  {stats.daily_average:.1f}")
    print()
