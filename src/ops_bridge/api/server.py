"""
Internal HTTP API.

Routes
------
``GET /health``
    Liveness probe, always ``{"ok": true}``.
``GET /internal/roles?userId=<id>``
    Bearer-authenticated tier lookup for one member of the configured guild.

The app runs on the bot's event loop; see :func:`start` / :func:`stop`.
"""

from __future__ import annotations

import hmac
import logging
from typing import Optional

from aiohttp import web

from ops_bridge.access.tiers import RoleTierConfig, compute_tier, normalize_role_ids

from .directory import MemberDirectory

logger = logging.getLogger(__name__)


def _error(status: int, message: str) -> web.Response:
    return web.json_response({"ok": False, "error": message}, status=status)


class RolesApi:
    """Request handlers bound to one guild, one secret and one tier mapping."""

    def __init__(
        self,
        directory: MemberDirectory,
        *,
        guild_id: int,
        shared_secret: str,
        tiers: RoleTierConfig,
    ) -> None:
        self.directory = directory
        self.guild_id = guild_id
        self.tiers = tiers
        self._expected_auth = f"Bearer {shared_secret}".encode("utf-8", "surrogateescape")

    def _authorized(self, request: web.Request) -> bool:
        supplied = request.headers.get("Authorization", "").encode("utf-8", "surrogateescape")
        return hmac.compare_digest(supplied, self._expected_auth)

    async def health(self, request: web.Request) -> web.Response:
        return web.json_response({"ok": True})

    async def internal_roles(self, request: web.Request) -> web.Response:
        """Resolve ``userId`` to its current role ids and tier."""

        try:
            if not self._authorized(request):
                logger.warning("Rejected /internal/roles call from %s: bad credentials", request.remote)
                return _error(401, "unauthorized")

            user_id = request.query.get("userId", "").strip()
            if not user_id:
                return _error(400, "missing userId")

            raw_role_ids = await self.directory.fetch_role_ids(user_id)
            if raw_role_ids is None:
                return _error(404, "member_not_found")

            role_ids = sorted(normalize_role_ids(raw_role_ids))
            tier = compute_tier(role_ids, self.tiers)
            logger.debug("Resolved user %s to tier %d", user_id, tier)

            return web.json_response(
                {
                    "ok": True,
                    "userId": user_id,
                    "guildId": str(self.guild_id),
                    "roleIds": role_ids,
                    "tier": tier,
                }
            )
        except Exception:
            logger.exception("/internal/roles failed")
            return _error(500, "server_error")


def create_app(
    directory: MemberDirectory,
    *,
    guild_id: int,
    shared_secret: str,
    tiers: RoleTierConfig,
) -> web.Application:
    """Build the aiohttp application serving the internal API."""

    api = RolesApi(
        directory,
        guild_id=guild_id,
        shared_secret=shared_secret,
        tiers=tiers,
    )
    app = web.Application()
    app.router.add_get("/health", api.health)
    app.router.add_get("/internal/roles", api.internal_roles)
    return app


async def start(app: web.Application, host: str, port: int) -> web.AppRunner:
    """Serve ``app`` on ``host:port`` without blocking the event loop."""

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info("API listening on %s:%d", host, port)
    return runner


async def stop(runner: Optional[web.AppRunner]) -> None:
    if runner is None:
        return
    await runner.cleanup()
    logger.info("API stopped")


__all__ = ["RolesApi", "create_app", "start", "stop"]
