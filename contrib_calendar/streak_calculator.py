"""
Calculate activity streaks and summary statistics.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from contrib_calendar.models import (
    ActivityDataset,
    ActivityRecord,
    InvalidDatasetError,
    SummaryStats,
)

AVERAGE_PRECISION = Decimal("0.1")


def calculate_summary(
    dataset: ActivityDataset, today: Optional[date] = None
) -> SummaryStats:
    """
    Calculate summary statistics for an activity dataset.

    Args:
        dataset: Activity records sorted ascending with no gaps
        today: Override today's date for testing. Defaults to current date.

    Returns:
        SummaryStats with total, longest and current streak, and the
        daily average rounded half-up to one decimal

    Raises:
        InvalidDatasetError: If the dataset is empty or its total does not
            match the sum of its record counts
    """
    if not dataset.records:
        raise InvalidDatasetError("Cannot summarize an empty dataset")

    recomputed_total = sum(record.count for record in dataset.records)
    if recomputed_total != dataset.total:
        raise InvalidDatasetError(
            f"Dataset total {dataset.total} does not match record sum {recomputed_total}"
        )

    if today is None:
        today = date.today()

    return SummaryStats(
        total=dataset.total,
        longest_streak=calculate_longest_streak(dataset.records),
        current_streak=calculate_current_streak(dataset.records, today),
        daily_average=calculate_daily_average(dataset.total, len(dataset.records)),
    )


def calculate_longest_streak(records: Sequence[ActivityRecord]) -> int:
    """
    Calculate the longest run of consecutive active days.

    Args:
        records: Activity records sorted ascending

    Returns:
        Longest streak count
    """
    longest = 0
    temp_streak = 0

    for record in records:
        if record.count > 0:
            temp_streak += 1
        else:
            longest = max(longest, temp_streak)
            temp_streak = 0

    # A streak can end on the last record
    return max(longest, temp_streak)


def calculate_current_streak(records: Sequence[ActivityRecord], today: date) -> int:
    """
    Calculate the run of active days ending at the latest record up to today.

    Records dated after today are skipped. The scan walks backwards and stops
    at the first day without activity.

    Args:
        records: Activity records sorted ascending
        today: Reference date

    Returns:
        Current streak count
    """
    streak = 0

    for record in reversed(records):
        if record.date > today:
            continue
        if record.count == 0:
            break
        streak += 1

    return streak


def calculate_daily_average(total: int, days: int) -> float:
    """
    Average activity per day, rounded half-up to one decimal place.

    Uses exact decimal arithmetic so that e.g. 0.25 rounds to 0.3 rather
    than following binary float rounding.
    """
    if days <= 0:
        raise InvalidDatasetError("Daily average needs at least one day of records")

    average = (Decimal(total) / Decimal(days)).quantize(
        AVERAGE_PRECISION, rounding=ROUND_HALF_UP
    )
    return float(average)
