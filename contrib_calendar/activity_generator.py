"""
Synthetic activity data for the contribution calendar.

GitHub has no public API for a user's contribution graph, so the widget
generates a demonstration dataset. Data sources sit behind ActivityProvider
so a real history source can replace the random one.
"""

import logging
import random
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Optional

from contrib_calendar.models import ActivityDataset, ActivityRecord, InvalidDatasetError

logger = logging.getLogger(__name__)

# Cumulative probability -> count. Draws past the last threshold fall
# through to a uniform count in BURST_RANGE.
COUNT_THRESHOLDS = [
    (0.50, 0),
    (0.70, 1),
    (0.85, 2),
    (0.93, 3),
    (0.97, 4),
]
BURST_RANGE = (5, 15)


def one_year_before(day: date) -> date:
    """
    Return the same calendar date one year earlier.

    Feb 29 has no counterpart in the previous year and rolls over to Mar 1.
    """
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        return date(day.year - 1, 3, 1)


def random_count(rng: random.Random) -> int:
    """Draw one day's activity count from the fixed distribution."""
    roll = rng.random()
    for threshold, count in COUNT_THRESHOLDS:
        if roll < threshold:
            return count
    return rng.randint(*BURST_RANGE)


class ActivityProvider(ABC):
    """Source of daily activity records."""

    @abstractmethod
    def get_dataset(self, start: date, end: date) -> ActivityDataset:
        """
        Produce one record per day for the closed range [start, end].

        Args:
            start: First day of the range
            end: Last day of the range (inclusive)

        Returns:
            ActivityDataset ordered by date ascending with no gaps
        """


class RandomActivityProvider(ActivityProvider):
    """Provider that draws every day's count independently at random."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_dataset(self, start: date, end: date) -> ActivityDataset:
        if start > end:
            raise InvalidDatasetError(
                f"Start date {start.isoformat()} is after end date {end.isoformat()}"
            )

        records = []
        current = start
        while current <= end:
            records.append(ActivityRecord(date=current, count=random_count(self.rng)))
            current += timedelta(days=1)

        dataset = ActivityDataset.from_records(records)
        logger.debug(
            "Generated %d activity records from %s to %s (total %d)",
            len(dataset),
            start.isoformat(),
            end.isoformat(),
            dataset.total,
        )
        return dataset


def generate_activity(
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
    provider: Optional[ActivityProvider] = None,
) -> ActivityDataset:
    """
    Generate the trailing one-year activity dataset ending on today.

    Args:
        today: Override for today's date (for testing)
        rng: Random source for the default provider
        provider: Data source to use instead of RandomActivityProvider

    Returns:
        ActivityDataset covering [one_year_before(today), today]
    """
    if today is None:
        today = date.today()
    if provider is None:
        provider = RandomActivityProvider(rng)

    return provider.get_dataset(one_year_before(today), today)
