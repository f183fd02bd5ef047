from __future__ import annotations

import datetime as dt

from .aggregate import aggregate
from .config import HeatmapConfig
from .git import fetch_commits
from .grid import build_grid, build_matrix
from .render import render_heatmap


def build_heatmap(*, config: HeatmapConfig, today: dt.date | None = None) -> str:
    if today is None:
        today = dt.date.today()
    since = config.since(today)

    commits_by_date = fetch_commits(config.repo_path, since, today)
    counts, weekday_totals = aggregate(commits_by_date)

    layout = build_grid(since, today)
    matrix = build_matrix(layout, counts, today)
    return render_heatmap(layout, matrix, weekday_totals)


def run_heatmap(*, config: HeatmapConfig, today: dt.date | None = None) -> int:
    # nothing is printed unless the whole grid rendered
    print(build_heatmap(config=config, today=today))
    return 0
