"""
Calendar layout for the activity heatmap.

Arranges daily activity records into GitHub-style week columns, each running
Sunday to Saturday, with placeholder cells padding the partial first and
last weeks.
"""

import math
from datetime import date, timedelta

from contrib_calendar.models import (
    ActivityDataset,
    CalendarCell,
    CalendarGrid,
    IntensityBucket,
    InvalidDatasetError,
)

DAYS_PER_WEEK = 7


def classify_count(count: int) -> IntensityBucket:
    """
    Calculate intensity level for heatmap coloring.

    Args:
        count: Activity count for the day

    Returns:
        IntensityBucket:
            0: No activity
            1: 1-2
            2: 3-4
            3: 5-6
            4: 7+
    """
    if count < 0:
        raise ValueError(f"Activity count must be non-negative, got {count}")
    if count == 0:
        return IntensityBucket.NONE
    elif count <= 2:
        return IntensityBucket.LOW
    elif count <= 4:
        return IntensityBucket.MEDIUM
    elif count <= 6:
        return IntensityBucket.HIGH
    else:
        return IntensityBucket.MAX


def sunday_offset(day: date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return (day.weekday() + 1) % 7


def build_calendar(dataset: ActivityDataset) -> CalendarGrid:
    """
    Build the week-major calendar grid for a dataset.

    Args:
        dataset: Activity records sorted ascending with no gaps

    Returns:
        CalendarGrid whose first column starts on the Sunday on or before
        the first record

    Raises:
        InvalidDatasetError: If the dataset has no records
    """
    if not dataset.records:
        raise InvalidDatasetError("Cannot build a calendar from an empty dataset")

    first_date = dataset.records[0].date
    last_date = dataset.records[-1].date

    lead_offset = sunday_offset(first_date)
    grid_start = first_date - timedelta(days=lead_offset)
    total_span_days = (last_date - first_date).days + 1
    total_weeks = math.ceil((total_span_days + lead_offset) / DAYS_PER_WEEK)

    counts_by_date = {record.date: record.count for record in dataset.records}

    weeks = []
    for week_index in range(total_weeks):
        week = []
        for day_index in range(DAYS_PER_WEEK):
            current = grid_start + timedelta(days=week_index * DAYS_PER_WEEK + day_index)
            count = counts_by_date.get(current)
            if count is None:
                week.append(CalendarCell.placeholder())
            else:
                week.append(
                    CalendarCell(date=current, count=count, bucket=classify_count(count))
                )
        weeks.append(tuple(week))

    return CalendarGrid(start=grid_start, weeks=tuple(weeks))
