#!/usr/bin/env python3
"""
Browse the image catalog from a terminal.

Run:
    catalog-browse --query sunset --min-size 1000 --open 1
"""

import argparse
import asyncio
import sys

from aws_lambda_powertools import Logger

from core.infrastructure.http.transport import RequestsTransport, Transport
from core.utils.settings import CatalogSettings
from handlers.search_images.models import SearchInputs
from handlers.view_state.controller import ViewStateController
from handlers.view_state.render import ConsoleRenderer, Renderer

logger = Logger(service="catalog-browse")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the image catalog")

    parser.add_argument("--query", default=None, help="Tags or keywords to search for")
    parser.add_argument(
        "--min-size",
        default=None,
        help="Minimum image size in pixels",
    )
    parser.add_argument("--license", default=None, help="License code filter")
    parser.add_argument("--language", default=None, help="Language code filter")
    parser.add_argument(
        "--open",
        type=int,
        default=None,
        metavar="N",
        help="Open the full record of the N-th result (1-based)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Catalog base URL (defaults to CATALOG_BASE_URL)",
    )

    return parser.parse_args(argv)


async def browse(
    args: argparse.Namespace,
    transport: Transport,
    renderer: Renderer,
    settings: CatalogSettings,
) -> int:
    controller = ViewStateController.from_transport(transport, renderer, settings)

    state = await controller.search(
        SearchInputs(
            query=args.query,
            minimum_size=args.min_size,
            license=args.license,
            language=args.language,
        )
    )

    if state.notice is None and args.open is not None:
        entries = state.listing.entries
        if not 1 <= args.open <= len(entries):
            logger.error(
                "No such result",
                extra={"open": args.open, "count": len(entries)},
            )
            return 1
        state = await controller.select_result(entries[args.open - 1].detail_ref)

    return 0 if state.notice is None else 1


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    settings = CatalogSettings.from_env()
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url})

    return asyncio.run(
        browse(args, RequestsTransport(settings), ConsoleRenderer(), settings)
    )


if __name__ == "__main__":
    sys.exit(main())
