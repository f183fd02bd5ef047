from __future__ import annotations

import datetime as dt
import subprocess
from pathlib import Path

from .models import CommitRecord

LOG_PRETTY = "%cd %h %d"  # committer date, the one --since filters on


class SourceQueryError(RuntimeError):
    pass


def run_git(args: list[str], cwd: Path) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
    )
    return proc.returncode, proc.stdout, proc.stderr


def parse_log_output(text: str) -> dict[str, list[CommitRecord]]:
    """
    Parse `git log --pretty=format:"%cd %h %d" --date=short-local` output:

      2024-01-02 1a2b3c4  (HEAD -> main, tag: v1.0)
      2024-01-02 5d6e7f8
      2024-01-01 9a0b1c2

    Lines without a hash are skipped. Commits keep git log order per date.
    """
    commits: dict[str, list[CommitRecord]] = {}
    for line in (text or "").splitlines():
        if not line.strip():
            continue
        parts = line.split(" ", 2)
        if len(parts) < 2 or not parts[0] or not parts[1]:
            continue
        date, sha = parts[0], parts[1]
        decoration = parts[2].strip() if len(parts) > 2 else ""
        commits.setdefault(date, []).append(CommitRecord(sha=sha, decoration=decoration))
    return commits


def _within(date: str, since: dt.date, today: dt.date) -> bool:
    try:
        d = dt.date.fromisoformat(date)
    except ValueError:
        return False
    return since <= d <= today


def fetch_commits(repo_path: Path, since: dt.date, today: dt.date | None = None) -> dict[str, list[CommitRecord]]:
    if today is None:
        today = dt.date.today()
    args = [
        "log",
        f"--since={since.isoformat()} 00:00:00",  # local midnight, not the current time of day
        f"--pretty=format:{LOG_PRETTY}",
        "--date=short-local",
        "--first-parent",
    ]
    try:
        code, out, err = run_git(args, cwd=repo_path)
    except OSError as e:
        # missing cwd, cwd not a directory, or no git binary on PATH
        raise SourceQueryError(str(e)) from e
    if code != 0:
        raise SourceQueryError(f"git log exited {code}: {err.strip()[:500]}")
    commits = parse_log_output(out)
    return {date: records for date, records in commits.items() if _within(date, since, today)}
