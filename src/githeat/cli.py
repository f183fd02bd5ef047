from __future__ import annotations

import argparse
import sys

from .config import DEFAULT_DAYS, ConfigurationError, resolve_config
from .git import SourceQueryError
from .run import run_heatmap


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="githeat", description="Visualize git repository activity as a calendar heatmap.")
    parser.add_argument("repo", nargs="?", default=None, help="Path to the git repository.")
    parser.add_argument("-r", "--repo", dest="repo_flag", type=str, default="", help="Path to the git repository.")
    parser.add_argument("-d", "--days", type=int, default=DEFAULT_DAYS, help="Number of days to look back for commits.")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = _build_parser().parse_args(argv)
    try:
        config = resolve_config(positional=args.repo, repo_flag=args.repo_flag, days=args.days)
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 1

    try:
        return run_heatmap(config=config)
    except SourceQueryError as e:
        print(f"Error executing git command: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
