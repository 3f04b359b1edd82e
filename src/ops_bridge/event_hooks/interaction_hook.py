"""
Guard and error boundary for every slash-command interaction.

``check`` runs before any command body; ``on_error`` turns failures into an
ephemeral reply for the caller while the details go to the log.
"""

from __future__ import annotations

import logging

import discord
from discord import app_commands

from ops_bridge.access import in_guild_scope
from ops_bridge.commands import messages
from ops_bridge.config import core

logger = logging.getLogger(__name__)


async def _send_ephemeral(interaction: discord.Interaction, content: str) -> None:
    """Reply or follow up depending on whether the interaction was answered."""

    try:
        if interaction.response.is_done():
            await interaction.followup.send(content, ephemeral=True)
        else:
            await interaction.response.send_message(content, ephemeral=True)
    except discord.HTTPException as exc:
        logger.warning("Could not deliver error reply for interaction %s: %s", interaction.id, exc)


async def check(interaction: discord.Interaction) -> bool:
    """Reject interactions from DMs or any guild other than the configured one."""

    if in_guild_scope(interaction.guild, core.GUILD_ID):
        return True

    logger.info(
        "Rejected interaction from user %s in guild %s (locked to %s)",
        getattr(interaction.user, "id", "unknown"),
        getattr(interaction.guild, "id", None),
        core.GUILD_ID,
    )
    await _send_ephemeral(interaction, messages.LOCKED)
    return False


async def on_error(
    interaction: discord.Interaction, error: app_commands.AppCommandError
) -> None:
    """Map command-tree errors to user-safe replies."""

    if not in_guild_scope(interaction.guild, core.GUILD_ID):
        await _send_ephemeral(interaction, messages.LOCKED)
        return

    if isinstance(error, app_commands.CommandNotFound):
        logger.warning("Unknown command %r; command tree may be out of sync", error.name)
        await _send_ephemeral(interaction, messages.NOT_SYNCED)
        return

    command = getattr(interaction.command, "name", None)
    logger.error("Interaction error in command %s", command, exc_info=error)
    await _send_ephemeral(interaction, messages.GENERIC_ERROR)
