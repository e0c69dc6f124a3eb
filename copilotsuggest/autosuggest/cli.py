"""Autosuggest CLI: build the dataset, inspect profiles, query suggestions."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from copilotsuggest.autosuggest.builder import DatasetBuilder
from copilotsuggest.autosuggest.display import user_display_info
from copilotsuggest.autosuggest.engine import AutosuggestEngine
from copilotsuggest.config.logging_config import setup_logging
from copilotsuggest.config.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Adaptive autosuggest tools.")
    parser.add_argument("--dataset", type=Path, default=None, help="Behavioral log (CSV).")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("build", help="Derive profiles and save the suggestion pool.")

    profile = sub.add_parser("profile", help="Show a user's profile and derived behavior.")
    profile.add_argument("user_id", help="User id.")

    query = sub.add_parser("query", help="Rank suggestions for a prefix.")
    query.add_argument("prefix", help="Text typed so far.")
    query.add_argument("--user", default="", help="User id (empty for a new user).")

    return parser


def main() -> int:
    args = build_parser().parse_args()

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir)
    builder = DatasetBuilder(settings)

    if args.command == "build":
        dataset = builder.build(args.dataset, save=True)
        print(json.dumps({**asdict(dataset.stats), "pool_path": str(settings.pool_path)}, indent=2))

    elif args.command == "profile":
        dataset = builder.build(args.dataset)
        profile = dataset.profiles.get(args.user_id)
        if profile is None:
            print(f"Unknown user: {args.user_id}")
            return 1
        print(json.dumps(
            {"profile": asdict(profile), "display": asdict(user_display_info(profile))},
            indent=2,
            default=str,
        ))

    elif args.command == "query":
        dataset = builder.build(args.dataset)
        engine = AutosuggestEngine(dataset.profiles, dataset.pool)
        result = engine.suggest(args.user, args.prefix)
        print(f"  [{result.trigger_reason}]")
        for s in result.suggestions:
            print(f"  {s.position}. {s.score:7.1f}  {s.source.value:<9}  {s.text}")

    else:
        build_parser().print_help()
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
