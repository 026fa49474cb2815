"""Command-line entry points.

``smurfscan <GameName#TAG>`` prints the smurf report for a Riot ID.
``smurfscan-server`` serves the same scan over HTTP.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from uuid import uuid4

from pydantic import ValidationError

from smurfscan.adapters.riot_api import RiotAPIAdapter, regional_routing
from smurfscan.config.settings import MAX_MATCH_COUNT, MIN_MATCH_COUNT, Settings, get_settings
from smurfscan.contracts.report import SmurfReport
from smurfscan.core.errors import SmurfScanError
from smurfscan.core.observability import (
    clear_correlation_id,
    configure_logging,
    set_correlation_id,
)
from smurfscan.core.ports import RiotAPIPort
from smurfscan.core.services.account_resolver import parse_riot_id
from smurfscan.core.services.smurf_scan_service import SmurfScanService
from smurfscan.core.views.report import render_report

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smurfscan",
        description="Heuristic smurf detection from recent League of Legends matches",
    )
    parser.add_argument("riot_id", help="Riot ID in the form GameName#TagLine")
    parser.add_argument(
        "--region", default=None, help="Regional routing (americas, europe, asia, sea)"
    )
    parser.add_argument(
        "--platform", default=None, help="Platform for ranked entries (e.g. na1, euw1, kr)"
    )
    parser.add_argument("--count", type=int, default=None, help="Number of recent matches (1-100)")
    parser.add_argument("--queue", type=int, default=None, help="Queue id filter (e.g. 420)")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--ascii", action="store_true", help="ASCII-safe text output")
    parser.add_argument("--debug", action="store_true", help="Print debug logs")
    return parser


def _resolve_region(args: argparse.Namespace, settings: Settings) -> str:
    if args.region:
        return args.region.lower()
    if args.platform:
        return regional_routing(args.platform)
    return settings.riot_region


async def run_scan(
    riot_api: RiotAPIPort,
    settings: Settings,
    riot_id: str,
    region: str | None = None,
    platform: str | None = None,
    count: int | None = None,
    queue: int | None = None,
) -> SmurfReport:
    """Run one scan and always release the port's transport."""
    service = SmurfScanService(riot_api, settings=settings, region=region, platform=platform)
    set_correlation_id(uuid4().hex)
    try:
        return await service.scan_riot_id(riot_id, count=count, queue=queue)
    finally:
        clear_correlation_id()
        await riot_api.close()


def format_output(report: SmurfReport, as_json: bool = False, ascii_safe: bool = False) -> str:
    if as_json:
        return json.dumps(report.model_dump(mode="json"), indent=2)
    return render_report(report, ascii_safe=ascii_safe)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if args.debug else settings.app_log_level)

    if args.count is not None and not MIN_MATCH_COUNT <= args.count <= MAX_MATCH_COUNT:
        print(
            f"Error: --count must be between {MIN_MATCH_COUNT} and {MAX_MATCH_COUNT}",
            file=sys.stderr,
        )
        return 1

    try:
        # Input and configuration errors surface here, before any request
        parse_riot_id(args.riot_id)
        riot_api = RiotAPIAdapter(settings)
        report = asyncio.run(
            run_scan(
                riot_api,
                settings,
                args.riot_id,
                region=_resolve_region(args, settings),
                platform=args.platform,
                count=args.count,
                queue=args.queue,
            )
        )
    except SmurfScanError as e:
        logger.debug("Scan aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(report, as_json=args.json, ascii_safe=args.ascii))
    return 0


def serve_main(argv: list[str] | None = None) -> int:
    """Run the HTTP server until interrupted."""
    from smurfscan.api.server import SmurfScanServer

    parser = argparse.ArgumentParser(prog="smurfscan-server", description="SmurfScan HTTP server")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.app_log_level)

    try:
        riot_api = RiotAPIAdapter(settings)
    except SmurfScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    from aiohttp import web

    server = SmurfScanServer(SmurfScanService(riot_api, settings=settings))
    web.run_app(
        server.app,
        host=args.host or settings.server_host,
        port=args.port or settings.server_port,
        print=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
