from __future__ import annotations

import datetime as dt
from collections.abc import Mapping

from .models import GridLayout

MONTH_ABBRS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def monday_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=d.weekday())


def build_grid(since: dt.date, today: dt.date) -> GridLayout:
    """
    Lay out Monday-start week columns from the week containing `since` through
    the week containing `today`.

    A column gets a month label when its Monday falls on days 1-7 of a month
    not labeled yet (keyed by year and month, so spans over a year label the
    same month name again for the next year).
    """
    if today < since:
        raise ValueError(f"today ({today}) must not be before since ({since})")
    first_monday = monday_of_week(since)
    week_count = (today - first_monday).days // 7 + 1

    month_labels: dict[int, str] = {}
    labeled: set[str] = set()
    for w in range(week_count):
        week_start = first_monday + dt.timedelta(days=w * 7)
        month_key = f"{week_start.year:04d}-{week_start.month:02d}"
        if week_start.day <= 7 and month_key not in labeled:
            month_labels[w] = MONTH_ABBRS[week_start.month - 1]
            labeled.add(month_key)
    return GridLayout(first_monday=first_monday, week_count=week_count, month_labels=month_labels)


def build_matrix(layout: GridLayout, counts: Mapping[str, int], today: dt.date) -> list[list[int | None]]:
    # rows Mon..Sun, columns weeks; None marks dates after today
    matrix: list[list[int | None]] = [[None] * layout.week_count for _ in range(7)]
    for w in range(layout.week_count):
        for d in range(7):
            current = layout.date_at(d, w)
            if current > today:
                continue
            matrix[d][w] = int(counts.get(current.isoformat(), 0))
    return matrix
