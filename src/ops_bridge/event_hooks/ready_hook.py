import logging

import discord

from ops_bridge.config import core
from ops_bridge.event_hooks.guild_hook import leave_if_foreign

logger = logging.getLogger(__name__)


async def handle(client: discord.Client) -> int:
    """Log the session and sweep any guilds joined while offline."""

    logger.info(f"✅ Logged in as {client.user} (ID: {client.user.id})")

    left = 0
    for guild in list(client.guilds):
        if await leave_if_foreign(guild):
            left += 1

    if left:
        logger.info("Left %d foreign guild(s) on startup", left)
    if client.get_guild(core.GUILD_ID) is None:
        logger.warning("Bot is not a member of configured guild %s", core.GUILD_ID)
    return left
