from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from .. import messages, register_cog
from ops_bridge.access import has_any_role, in_guild_scope
from ops_bridge.config import core as core_cfg
from ops_bridge.config import roles as roles_cfg

logger = logging.getLogger(__name__)

PANEL_TOOLS = ("Activity tracking", "Logbook", "Session tools")


# ----------------------------- Panel Helpers ----------------------------- #

def build_panel_embed(community: str) -> discord.Embed:
    lines = [f"Use this panel to access {community} operations tools:"]
    lines.extend(f"• {tool}" for tool in PANEL_TOOLS)
    lines.extend(["", "Click below to sign in with Discord."])

    embed = discord.Embed(title=f"🧊 {community} Ops Panel", description="\n".join(lines))
    embed.set_footer(text=f"{community} Hotels — Ops")
    return embed


def build_panel_view(portal_url: str) -> discord.ui.View:
    view = discord.ui.View(timeout=None)
    view.add_item(
        discord.ui.Button(
            label="Open Ops Panel",
            style=discord.ButtonStyle.link,
            url=portal_url,
        )
    )
    return view


async def _resolve_ops_channel(guild: discord.Guild, channel_id: int):
    """Return the configured ops channel if it exists and can receive messages."""

    if not channel_id:
        return None

    channel = guild.get_channel(channel_id)
    if channel is None:
        try:
            channel = await guild.fetch_channel(channel_id)
        except (discord.NotFound, discord.Forbidden):
            logger.warning("Ops channel %s is not reachable in guild %s", channel_id, guild.id)
            return None

    if not isinstance(channel, discord.abc.Messageable):
        logger.warning("Ops channel %s is not a text channel", channel_id)
        return None
    return channel


# ----------------------------- Command Definitions ----------------------------- #


@register_cog
class PostOps(commands.Cog):
    """
    Post the public ops panel link.

    Restricted to members holding a role from ``ALLOWED_POSTER_ROLE_IDS``.
    """

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(
        name="post-ops",
        description="Post the Ops Panel link button in the ops channel.",
    )
    @app_commands.guild_only()
    async def post_ops(self, interaction: discord.Interaction) -> None:
        """Gate on the poster allow-list, then publish the panel."""

        if not in_guild_scope(interaction.guild, core_cfg.GUILD_ID):
            await interaction.response.send_message(messages.LOCKED, ephemeral=True)
            return

        member_roles = [role.id for role in getattr(interaction.user, "roles", None) or []]
        if not has_any_role(member_roles, roles_cfg.ALLOWED_POSTER_ROLE_IDS):
            logger.info(
                "User %s denied /post-ops (no allowed poster role)",
                getattr(interaction.user, "id", "unknown"),
            )
            await interaction.response.send_message(
                messages.NO_POST_PERMISSION, ephemeral=True
            )
            return

        channel = await _resolve_ops_channel(interaction.guild, core_cfg.PUBLIC_OPS_CHANNEL_ID)
        if channel is None:
            await interaction.response.send_message(
                messages.OPS_CHANNEL_MISSING, ephemeral=True
            )
            return

        await channel.send(
            embed=build_panel_embed(core_cfg.COMMUNITY_NAME),
            view=build_panel_view(core_cfg.OPS_PORTAL_URL),
        )
        logger.info(
            "Ops panel posted to channel %s by %s",
            channel.id,
            getattr(interaction.user, "id", "unknown"),
        )
        await interaction.response.send_message(messages.PANEL_POSTED, ephemeral=True)
