from __future__ import annotations

import dataclasses
import datetime as dt
from pathlib import Path

DEFAULT_DAYS = 365


class ConfigurationError(ValueError):
    pass


@dataclasses.dataclass(frozen=True)
class HeatmapConfig:
    repo_path: Path
    days: int = DEFAULT_DAYS

    def since(self, today: dt.date) -> dt.date:
        return today - dt.timedelta(days=self.days)


def resolve_config(
    *,
    positional: str | None,
    repo_flag: str | None,
    days: int = DEFAULT_DAYS,
    today: dt.date | None = None,
) -> HeatmapConfig:
    repo = positional if positional is not None else (repo_flag or "")
    if not repo:
        raise ConfigurationError("repository path is required")
    if today is None:
        today = dt.date.today()
    max_days = (today - dt.date.min).days
    if days < 0 or days > max_days:
        raise ConfigurationError(f"--days must be between 0 and {max_days}, got: {days}")
    return HeatmapConfig(repo_path=Path(repo), days=int(days))
