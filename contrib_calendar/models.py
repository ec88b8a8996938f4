"""
Value objects shared by the activity generator, calendar builder and
streak calculator.
"""

from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Iterator


class InvalidDatasetError(ValueError):
    """Raised when an activity dataset violates the input contract."""

    pass


class IntensityBucket(IntEnum):
    """Heatmap intensity level for a day's activity count."""

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    MAX = 4


@dataclass(frozen=True)
class ActivityRecord:
    """Activity count for a single calendar day."""

    date: date
    count: int

    def __post_init__(self):
        if self.count < 0:
            raise InvalidDatasetError(
                f"Activity count for {self.date.isoformat()} must be non-negative"
            )


@dataclass(frozen=True)
class ActivityDataset:
    """Contiguous daily activity records ordered by date ascending."""

    records: tuple[ActivityRecord, ...]
    total: int

    @classmethod
    def from_records(cls, records) -> "ActivityDataset":
        """Build a dataset, computing the total from the records."""
        records = tuple(records)
        return cls(records=records, total=sum(r.count for r in records))

    @property
    def start(self) -> date | None:
        return self.records[0].date if self.records else None

    @property
    def end(self) -> date | None:
        return self.records[-1].date if self.records else None

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class CalendarCell:
    """
    One square of the calendar grid.

    A data cell has date, count and bucket set. A placeholder cell pads the
    first or last week and has all three set to None.
    """

    date: date | None
    count: int | None
    bucket: IntensityBucket | None

    @classmethod
    def placeholder(cls) -> "CalendarCell":
        return cls(date=None, count=None, bucket=None)

    @property
    def is_placeholder(self) -> bool:
        return self.date is None


@dataclass(frozen=True)
class CalendarGrid:
    """Week-major grid; every week is 7 cells ordered Sunday to Saturday."""

    start: date
    weeks: tuple[tuple[CalendarCell, ...], ...]

    def data_cells(self) -> Iterator[CalendarCell]:
        for week in self.weeks:
            for cell in week:
                if not cell.is_placeholder:
                    yield cell

    def __len__(self) -> int:
        return len(self.weeks)


@dataclass(frozen=True)
class SummaryStats:
    """Aggregate statistics shown next to the calendar."""

    total: int
    longest_streak: int
    current_streak: int
    daily_average: float
