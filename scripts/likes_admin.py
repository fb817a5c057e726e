#!/usr/bin/env python3
"""
Inspect or adjust the likes ledger without going through HTTP.

Usage:
  python scripts/likes_admin.py show
  python scripts/likes_admin.py reset --project "My Project"
  python scripts/likes_admin.py reset --all
  python scripts/likes_admin.py set --project "My Project" --count 10

The ledger path comes from LIKES_FILE (or --file).
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portfolio_api.repositories.json_storage import LedgerRepository  # noqa: E402
from portfolio_api.services.like_service import LikeError, LikeService  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage the portfolio likes ledger")
    ap.add_argument("--file", help="Ledger path (default: LIKES_FILE)")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="Print counts, most liked first")

    reset = sub.add_parser("reset", help="Remove one project or clear the ledger")
    target = reset.add_mutually_exclusive_group(required=True)
    target.add_argument("--project", help="Project name as displayed on the site")
    target.add_argument("--all", action="store_true", help="Remove every entry")

    set_cmd = sub.add_parser("set", help="Set an absolute count for a project")
    set_cmd.add_argument("--project", required=True)
    set_cmd.add_argument("--count", required=True, type=int)
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    repo = LedgerRepository(Path(args.file) if args.file else None)
    svc = LikeService(repo)

    if args.command == "show":
        ledger = svc.counts()
        if not ledger:
            print("Ledger is empty")
            return
        for name, count in sorted(ledger.items(), key=lambda kv: (-kv[1], kv[0])):
            print(f"{count:>6}  {name}")
        return

    try:
        if args.command == "reset":
            removed = svc.reset(None if args.all else args.project)
            print(f"OK: removed {removed} entr{'y' if removed == 1 else 'ies'}")
            return
        count = svc.set_count(args.project, args.count)
    except LikeError as exc:
        raise SystemExit(f"Error: {exc}")
    print(f"OK: {args.project} = {count}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
