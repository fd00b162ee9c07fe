"""Date Window — resolves optional date bounds into one concrete inclusive range.

Invariants:
    - Resolution happens once, at the start of an operation; filtering code only
      ever sees concrete start/end datetimes
    - Missing start resolves to datetime.min, missing end resolves to `now`
    - Both bounds are inclusive
    - explicit is True when the caller supplied at least one bound
    - Bounds are naive: a UTC offset on an input is dropped and its wall time
      kept, matching the naive ledger timestamps

Design Decisions:
    - `now` is passed in rather than read here: the engine owns the clock,
      so tests pin it
    - A date-only end bound is NOT stretched to end of day: "2024-12-31" means
      2024-12-31 00:00, same as the bound the caller sent
"""

from dataclasses import dataclass
from datetime import datetime


def _naive(moment: datetime) -> datetime:
    return moment.replace(tzinfo=None)


@dataclass(frozen=True)
class DateWindow:
    """Inclusive [start, end] range used to filter sales."""
    start: datetime
    end: datetime
    explicit: bool = False

    @classmethod
    def resolve(
        cls,
        date_from: datetime | None,
        date_to: datetime | None,
        *,
        now: datetime,
    ) -> "DateWindow":
        return cls(
            start=_naive(date_from) if date_from is not None else datetime.min,
            end=_naive(date_to) if date_to is not None else _naive(now),
            explicit=date_from is not None or date_to is not None,
        )

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end
