#!/usr/bin/env python3
"""CLI for listing, filtering and searching Rector rules, and serving the API."""

import argparse
import sys
from pathlib import Path

import uvicorn

from rectorrules.cache import CatalogCache
from rectorrules.config import configure_logging, load_config
from rectorrules.core import CatalogError
from rectorrules.search import MatchMode
from rectorrules.source import make_fetcher
from rectorrules.tools import (
    Colors,
    filter_rules,
    format_filter_response,
    format_list_response,
    format_search_response,
    list_rules,
    search_rules,
)


def serve(host: str, port: int, reload: bool) -> None:
    """Run the API under uvicorn.

    A single worker only: every process holds its own cache. The app reads
    its settings from the default config file and RECTOR_* variables.
    """
    try:
        uvicorn.run("rectorrules.web.app:app", host=host, port=port, reload=reload)
    except KeyboardInterrupt:
        print(f"\n{Colors.DIM}Server stopped{Colors.RESET}", file=sys.stderr)


def main():
    parser = argparse.ArgumentParser(description="Query the Rector rules catalog")
    parser.add_argument("--config", type=Path, help="Path to a YAML config file")
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of formatted text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show class paths, tags and debug logs")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all rule sets (and rules with -v)")

    filter_parser = subparsers.add_parser("filter", help="Show the rules of one rule set")
    filter_parser.add_argument("rule_set", help="Rule set name, e.g. php80 or codequality")

    search_parser = subparsers.add_parser("search", help="Search rules by keyword")
    search_parser.add_argument("query", help="Keywords to search for")
    search_parser.add_argument("-r", "--rule-set", help="Restrict the search to one rule set")
    search_parser.add_argument(
        "--substring",
        action="store_true",
        help="Match the whole query as one substring instead of word by word"
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("-p", "--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")

    args = parser.parse_args()

    if args.command == "serve":
        serve(args.host, args.port, args.reload)
        return

    config = load_config(args.config)
    configure_logging("DEBUG" if args.verbose else config.log_level)
    cache = CatalogCache(make_fetcher(config))

    try:
        if args.command == "list":
            response = list_rules(cache)
            output = format_list_response(response, verbose=args.verbose)
        elif args.command == "filter":
            response = filter_rules(cache, args.rule_set)
            output = format_filter_response(response, args.rule_set, verbose=args.verbose)
        else:
            mode = MatchMode.SUBSTRING if args.substring else MatchMode.ALL_TOKENS
            response = search_rules(cache, args.query, rule_set=args.rule_set, mode=mode)
            output = format_search_response(response, verbose=args.verbose)
    except CatalogError as e:
        print(f"{Colors.RED}Error: {e}{Colors.RESET}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"\n{Colors.DIM}Interrupted{Colors.RESET}", file=sys.stderr)
        sys.exit(130)

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        print(output)


if __name__ == "__main__":
    main()
