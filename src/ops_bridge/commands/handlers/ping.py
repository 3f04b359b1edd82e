from __future__ import annotations

import discord
from discord import app_commands
from discord.ext import commands

from .. import messages, register_cog


@register_cog
class OpsPing(commands.Cog):
    """Liveness check from inside Discord."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="ops-ping", description="Check if the Ops Bridge bot is online.")
    @app_commands.guild_only()
    async def ops_ping(self, interaction: discord.Interaction) -> None:
        await interaction.response.send_message(messages.ONLINE, ephemeral=True)
