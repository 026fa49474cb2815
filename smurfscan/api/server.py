"""SmurfScan HTTP server (aiohttp).

Endpoints:
- GET /health                          → Liveness probe
- GET /api/smurf/{game_name}/{tag_line} → SmurfReport as JSON

Domain errors map to HTTP statuses: invalid Riot ID 400, no data 404,
upstream failure 502, missing configuration 500.
"""

import logging
from uuid import uuid4

from aiohttp import web

from smurfscan.config.settings import MAX_MATCH_COUNT, MIN_MATCH_COUNT
from smurfscan.core.errors import (
    InvalidIdentifierError,
    MissingConfigurationError,
    NoDataError,
    SmurfScanError,
    UpstreamError,
)
from smurfscan.core.observability import clear_correlation_id, set_correlation_id
from smurfscan.core.services.smurf_scan_service import SmurfScanService

logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type[SmurfScanError], int] = {
    InvalidIdentifierError: 400,
    NoDataError: 404,
    UpstreamError: 502,
    MissingConfigurationError: 500,
}


def _invalid_parameter(message: str) -> web.Response:
    return web.json_response({"error": "InvalidParameter", "message": message}, status=400)


def _error_response(error: SmurfScanError) -> web.Response:
    status = next(
        (code for exc_type, code in _ERROR_STATUS.items() if isinstance(error, exc_type)), 500
    )
    return web.json_response(
        {"error": type(error).__name__, "message": str(error)}, status=status
    )


class SmurfScanServer:
    """HTTP server exposing the smurf scan."""

    def __init__(self, service: SmurfScanService) -> None:
        self.service = service
        self.app = web.Application()
        self._setup_routes()
        self.app.on_cleanup.append(self._on_cleanup)

    def _setup_routes(self) -> None:
        self.app.router.add_get("/health", self.health_check)
        self.app.router.add_get("/api/smurf/{game_name}/{tag_line}", self.handle_scan)

    async def _on_cleanup(self, _app: web.Application) -> None:
        await self.service.riot_api.close()

    async def health_check(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})

    async def handle_scan(self, request: web.Request) -> web.Response:
        game_name = request.match_info.get("game_name", "")
        tag_line = request.match_info.get("tag_line", "")
        count_param = request.query.get("count")

        try:
            count = int(count_param) if count_param else None
        except ValueError:
            return _invalid_parameter("count must be an integer")
        if count is not None and not MIN_MATCH_COUNT <= count <= MAX_MATCH_COUNT:
            return _invalid_parameter(
                f"count must be between {MIN_MATCH_COUNT} and {MAX_MATCH_COUNT}"
            )

        set_correlation_id(request.headers.get("X-Correlation-ID") or uuid4().hex)
        try:
            report = await self.service.scan(game_name, tag_line, count=count)
        except SmurfScanError as e:
            logger.warning("Scan failed for %s#%s: %s", game_name, tag_line, e)
            return _error_response(e)
        finally:
            clear_correlation_id()

        return web.json_response(report.model_dump(mode="json"))

