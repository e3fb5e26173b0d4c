# src/main.py — v2
"""CLI entry point — search, suggest, list, toc commands.

Usage:
    blogcore search <query> [--limit N] [--json]
    blogcore suggest <query>
    blogcore list [--category C] [--essays]
    blogcore toc <post_id>
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from blogcore.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = _load_settings(args)
        _setup_logging(settings, args.verbose)
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="blogcore",
        description=f"blogcore v{__version__} - search and browse Markdown blog content",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--root", type=Path, default=None,
        help="Content root directory (default: CONTENT_ROOT or ./posts)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- search ---
    p_search = subparsers.add_parser("search", help="Search posts and essays")
    p_search.add_argument("query", help="Free-text query")
    p_search.add_argument(
        "-n", "--limit", type=int, default=None,
        help="Maximum number of results",
    )
    p_search.add_argument(
        "--json", action="store_true",
        help="Print the full response as JSON",
    )
    p_search.set_defaults(func=_cmd_search)

    # --- suggest ---
    p_suggest = subparsers.add_parser("suggest", help="Suggest query completions")
    p_suggest.add_argument("query", help="Partial query")
    p_suggest.set_defaults(func=_cmd_suggest)

    # --- list ---
    p_list = subparsers.add_parser("list", help="List posts or essays")
    p_list.add_argument(
        "-c", "--category", default=None,
        help="Only posts in this category",
    )
    p_list.add_argument(
        "--essays", action="store_true",
        help="List essays instead of posts",
    )
    p_list.set_defaults(func=_cmd_list)

    # --- toc ---
    p_toc = subparsers.add_parser("toc", help="Print a post's table of contents")
    p_toc.add_argument("post_id", help="Post or essay id")
    p_toc.set_defaults(func=_cmd_toc)

    return parser


def _load_settings(args: argparse.Namespace):
    from blogcore.config.settings import load_settings

    overrides: dict[str, object] = {}
    if args.root is not None:
        overrides["content_root"] = args.root
    return load_settings(**overrides)


def _facade(settings):
    from blogcore.api.facade import SearchFacade

    return SearchFacade.from_settings(settings)


async def _cmd_search(args: argparse.Namespace, settings) -> int:
    """Run a search and print ranked results."""
    response = await _facade(settings).search_page(args.query, limit=args.limit)

    if args.json:
        print(response.model_dump_json(indent=2))
        return 0

    if not response.results:
        print(f"No results for {args.query!r}")
        if response.suggestions:
            print(f"  Did you mean: {', '.join(response.suggestions)}")
        return 0

    print(f"\n{response.total} result(s) for {args.query!r}:")
    for hit in response.results:
        print(f"  [{hit.score:3d}] {hit.id}  ({hit.date[:10]})")
        print(f"        matched: {', '.join(hit.matched_keywords)}")
    return 0


async def _cmd_suggest(args: argparse.Namespace, settings) -> int:
    for hint in await _facade(settings).suggest(args.query):
        print(hint)
    return 0


async def _cmd_list(args: argparse.Namespace, settings) -> int:
    """List posts (optionally by category) or essays."""
    repository = _facade(settings).repository
    if args.essays:
        records = await repository.list_essays()
    elif args.category:
        records = await repository.posts_by_category(args.category)
    else:
        records = await repository.list_posts()

    for record in records:
        label = record.essay_type if record.kind == "essay" else record.category
        print(f"{record.date[:10]}  {record.id}  [{label or '-'}]  {record.title}")
    print(f"\n{len(records)} item(s)")
    return 0


async def _cmd_toc(args: argparse.Namespace, settings) -> int:
    """Print headings indented by level."""
    from blogcore.core.errors import ContentNotFoundError

    try:
        headings = await _facade(settings).table_of_contents(args.post_id)
    except ContentNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    for heading in headings:
        indent = "  " * (heading.level - 1)
        print(f"{indent}- {heading.text}  (#{heading.id})")
    return 0


def _setup_logging(settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from blogcore.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
