"""
Keep the bot confined to the configured guild.
"""

from __future__ import annotations

import logging

import discord

from ops_bridge.access import in_guild_scope
from ops_bridge.config import core

logger = logging.getLogger(__name__)


async def leave_if_foreign(guild: discord.Guild) -> bool:
    """
    Leave ``guild`` unless it is the configured one.

    :returns: ``True`` when the bot left the guild. Failures are logged and
        reported as ``False``; they never propagate.
    """

    if in_guild_scope(guild, core.GUILD_ID):
        return False

    logger.info("🔒 Present in foreign guild %s (%s). Leaving.", getattr(guild, "name", "?"), guild.id)
    try:
        await guild.leave()
    except Exception:
        logger.exception("Failed to leave foreign guild %s", guild.id)
        return False
    return True


async def handle(client: discord.Client, guild: discord.Guild) -> None:
    """Guild join event: leave immediately when it is not ours."""

    await leave_if_foreign(guild)
