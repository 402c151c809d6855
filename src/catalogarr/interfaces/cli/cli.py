from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TextIO

import structlog

from catalogarr.application.pagination import PaginationEngine
from catalogarr.domain.entities.browse import BrowseOptions
from catalogarr.domain.entities.catalog import (
    BrowseSortType,
    Category,
    Locale,
    MediaType,
    SearchFacet,
)
from catalogarr.domain.entities.errors import CatalogError
from catalogarr.infrastructure.config import AppConfig, load_config
from catalogarr.infrastructure.logging.setup import configure_logging
from catalogarr.interfaces.composition import Catalog, build_catalog

log = structlog.get_logger(__name__)


def _values(enum_cls: Any) -> list[str]:
    return [member.value for member in enum_cls]


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="catalogarr",
        description="Browse and search the video catalog as JSON lines.",
    )
    parser.add_argument("--config", type=Path, metavar="YAML")
    parser.add_argument("--dotenv", type=Path, metavar="ENV_FILE")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-format", choices=["json", "console"])

    commands = parser.add_subparsers(dest="command", required=True)

    browse = commands.add_parser("browse", help="Browse the catalog with filters.")
    browse.add_argument(
        "--category",
        action="append",
        default=[],
        choices=_values(Category),
        help="Category filter (repeatable).",
    )
    browse.add_argument("--dubbed", action=argparse.BooleanOptionalAction, default=None)
    browse.add_argument("--subbed", action=argparse.BooleanOptionalAction, default=None)
    browse.add_argument("--season", default=None, help="Simulcast season tag.")
    browse.add_argument("--sort", default=None, choices=_values(BrowseSortType))
    browse.add_argument("--type", default=None, choices=_values(MediaType))
    browse.add_argument("--audio", default=None, choices=_values(Locale))
    browse.add_argument("--limit", type=int, default=20, help="Max items to print.")

    search = commands.add_parser("search", help="Search the catalog by text.")
    search.add_argument("text")
    search.add_argument(
        "--facet",
        default=SearchFacet.TOP_RESULTS.value,
        choices=_values(SearchFacet),
    )
    search.add_argument("--limit", type=int, default=20, help="Max items to print.")

    seasons = commands.add_parser("seasons", help="List simulcast seasons.")
    seasons.add_argument("--locale", default=Locale.EN_US.value, choices=_values(Locale))

    return parser.parse_args(argv)


def _browse_options(args: argparse.Namespace) -> BrowseOptions:
    fields: dict[str, Any] = {
        "categories": tuple(Category(c) for c in args.category),
        "is_dubbed": args.dubbed,
        "is_subbed": args.subbed,
        "simulcast_season": args.season,
        "media_type": MediaType(args.type) if args.type else None,
        "preferred_audio_language": Locale(args.audio) if args.audio else None,
    }
    if args.sort:
        fields["sort"] = BrowseSortType(args.sort)
    return BrowseOptions(**fields)


def _emit(item: Any, out: TextIO) -> None:
    out.write(json.dumps(dataclasses.asdict(item), ensure_ascii=False) + "\n")


async def _drain(engine: PaginationEngine[Any], out: TextIO) -> int:
    count = 0
    async for item in engine:
        _emit(item, out)
        count += 1
    return count


async def _run(args: argparse.Namespace, catalog: Catalog, out: TextIO) -> int:
    if args.command == "browse":
        engine = catalog.browse(_browse_options(args), max_results=args.limit)
        count = await _drain(engine, out)
        log.info("browse_done", count=count, total=engine.current_total())
    elif args.command == "search":
        results = catalog.query(args.text, max_results=args.limit)
        engine = results.by_facet(SearchFacet(args.facet))
        count = await _drain(engine, out)
        log.info("search_done", facet=args.facet, count=count, total=engine.current_total())
    else:
        seasons = await catalog.simulcast_seasons(Locale(args.locale))
        for season in seasons:
            _emit(season, out)
        log.info("seasons_done", count=len(seasons))
    return 0


async def _main(args: argparse.Namespace, config: AppConfig, out: TextIO) -> int:
    async with build_catalog(config) as catalog:
        return await _run(args, catalog, out)


def _load(args: argparse.Namespace) -> AppConfig:
    flags = {"log_level": args.log_level, "log_format": args.log_format}
    return load_config(
        config_path=args.config,
        dotenv_path=args.dotenv,
        cli_overrides={key: value for key, value in flags.items() if value},
    )


def start(argv: Iterable[str] | None = None) -> int:
    """Console entrypoint: run one command and return the exit status."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    config = _load(args)
    configure_logging(config)

    try:
        return asyncio.run(_main(args, config, sys.stdout))
    except CatalogError as exc:
        log.error("catalog_command_failed", command=args.command, error=str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(start())
