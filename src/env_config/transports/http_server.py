# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""HTTP transport exposing resolved configuration.

Routes:
- ``GET /config``: flat JSON object of the configured keys, resolved through
  the shared resolver. ``?keys=a,b`` selects other keys for one request.
- ``GET /health``: liveness check.
"""

from collections.abc import Iterable
import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from ..dependency_injection import ConfigContainer
from ..exceptions import EnvConfigError

logger = logging.getLogger(__name__)


def create_http_app(
    container: ConfigContainer | None = None,
    keys: Iterable[str] | None = None,
) -> Starlette:
    """Create Starlette HTTP app serving configuration values.

    Args:
        container: Container providing the resolver, defaults to pass-through
        keys: Configuration keys returned by GET /config

    Returns:
        Starlette application instance
    """
    container = container or ConfigContainer()
    default_keys = list(keys or [])

    # Env files are loaded once, before any request is served
    container.initialize()

    async def configuration(request: Request) -> JSONResponse:
        """Resolve the selected keys."""
        requested = _parse_keys(request.query_params.get("keys")) or default_keys
        resolver = container.get_resolver()

        try:
            return JSONResponse(resolver.resolve_many(requested))
        except EnvConfigError as e:
            logger.warning("Configuration request failed: %s", e)
            return JSONResponse(e.to_dict(), status_code=500)
        except Exception:
            logger.exception("Configuration request error")
            return JSONResponse({"error": "Internal error"}, status_code=500)

    async def health_check(_request: Request) -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({"status": "ok", "server": "env-config"})

    return Starlette(
        routes=[
            Route("/config", configuration, methods=["GET"]),
            Route("/health", health_check, methods=["GET"]),
        ]
    )


def _parse_keys(raw: str | None) -> list[str]:
    """Split a comma separated key list."""
    if not raw:
        return []
    return [key.strip() for key in raw.split(",") if key.strip()]
