#!/usr/bin/env python3
"""
Fantasy Cricket Scorer CLI

Runs the HTTP service or performs one-off operations against the configured
team store.

Usage:
    python fantasy_cli.py serve --port 3000
    python fantasy_cli.py add-team team.json
    python fantasy_cli.py process-result data/match.json
    python fantasy_cli.py team-result
    python fantasy_cli.py standings
"""

import argparse
import json
import sys
from pathlib import Path

from fantasy_cricket import FantasyError, FantasyService, ValidationError, create_store
from fantasy_cricket.config import get_config, get_match_path, get_server_address
from fantasy_cricket.logging_config import setup_logging
from fantasy_cricket.server import run_server
from fantasy_cricket.utils import load_json


def main():
    parser = argparse.ArgumentParser(description="Fantasy cricket team scorer")
    parser.add_argument(
        "--teams", "-t",
        default=None,
        help="Path to the JSON team store (overrides config)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Write log files to this directory",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", "-p", type=int, default=None, help="Bind port")
    serve_parser.add_argument(
        "--access-log",
        action="store_true",
        help="Log one line per HTTP request",
    )

    add_parser = subparsers.add_parser("add-team", help="Submit a team from a JSON file")
    add_parser.add_argument("file", help="Team JSON file")

    process_parser = subparsers.add_parser("process-result", help="Score a match")
    process_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Match results JSON file (defaults to the configured match file)",
    )

    subparsers.add_parser("team-result", help="Print the winning teams")
    subparsers.add_parser("standings", help="Print all teams ranked by points")

    args = parser.parse_args()

    config = get_config()
    if args.teams:
        config = config.model_copy(update={"teams_path": args.teams, "store": "json"})

    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level="WARNING" if args.quiet else config.log_level,
        log_to_file=args.log_dir is not None,
        access_log=getattr(args, "access_log", False),
    )

    match_path = get_match_path()
    if args.command == "process-result" and args.file:
        match_path = args.file

    service = FantasyService(create_store(config), match_path=match_path)

    try:
        if args.command == "serve":
            host, port = get_server_address()
            run_server(service, args.host or host, args.port or port)

        elif args.command == "add-team":
            record = service.add_team(load_json(args.file))
            print(f"Added team {record.team_name}")

        elif args.command == "process-result":
            result = service.process_result()
            print(f"Scored {result.players_scored} players, {result.teams_updated} team updates")
            for warning in result.warnings:
                print(f"⚠️  {warning}")

        elif args.command == "team-result":
            print(json.dumps({"winner": service.team_result()}))

        elif args.command == "standings":
            print("=" * 60)
            print("STANDINGS")
            print("=" * 60)
            for entry in service.standings():
                print(f"  {entry.rank}. {entry.team_name}: {entry.points} pts")

    except ValidationError as e:
        print(f"❌ {e.message}")
        for detail in e.details:
            print(f"   {detail}")
        sys.exit(1)
    except (FantasyError, FileNotFoundError, json.JSONDecodeError) as e:
        print(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
