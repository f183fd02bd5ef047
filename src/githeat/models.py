from __future__ import annotations

import dataclasses
import datetime as dt


@dataclasses.dataclass(frozen=True)
class CommitRecord:
    sha: str
    decoration: str = ""  # e.g. "(HEAD -> main, tag: v1.0)"


@dataclasses.dataclass(frozen=True)
class GridLayout:
    first_monday: dt.date
    week_count: int
    month_labels: dict[int, str]  # week column -> "Jan".."Dec"

    def date_at(self, weekday: int, week: int) -> dt.date:
        return self.first_monday + dt.timedelta(days=week * 7 + weekday)
