from __future__ import annotations

import datetime as dt
from collections.abc import Mapping, Sequence

from .models import CommitRecord


def aggregate(commits_by_date: Mapping[str, Sequence[CommitRecord]]) -> tuple[dict[str, int], list[int]]:
    counts: dict[str, int] = {}
    weekday_totals = [0] * 7  # Mon..Sun
    for date, commits in commits_by_date.items():
        n = len(commits)
        counts[date] = n
        try:
            d = dt.date.fromisoformat(date)
        except ValueError:
            continue
        weekday_totals[d.weekday()] += n
    return counts, weekday_totals
