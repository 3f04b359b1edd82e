"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging
import sys

import discord
from aiohttp import web
from discord import app_commands
from discord.ext import commands as discord_commands

from ops_bridge import api
from ops_bridge import commands as ob_commands
from ops_bridge.config import core, roles
from ops_bridge.event_hooks import guild_hook, interaction_hook, ready_hook

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
intents = discord.Intents.none()
intents.guilds = True
intents.members = True


class ScopedCommandTree(app_commands.CommandTree):
    """Command tree that refuses to run anything outside the configured guild."""

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        return await interaction_hook.check(interaction)

    async def on_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ) -> None:
        await interaction_hook.on_error(interaction, error)


class OpsBridgeBot(discord_commands.Bot):
    """Single-guild bot that also hosts the internal roles API."""

    def __init__(self) -> None:
        super().__init__(
            command_prefix=discord_commands.when_mentioned,
            intents=intents,
            application_id=core.CLIENT_ID,
            tree_cls=ScopedCommandTree,
        )
        self.api_runner: web.AppRunner | None = None

    async def setup_hook(self) -> None:
        """Register slash commands, sync them to our guild and start the API."""

        await ob_commands.setup(self)

        guild = discord.Object(id=core.GUILD_ID)
        self.tree.copy_global_to(guild=guild)
        try:
            synced = await self.tree.sync(guild=guild)
            logger.info("✅ Registered %d slash command(s) to guild %s", len(synced), core.GUILD_ID)
        except discord.HTTPException:
            logger.exception("Failed to sync application commands")

        app = api.create_app(
            api.DiscordMemberDirectory(self, core.GUILD_ID),
            guild_id=core.GUILD_ID,
            shared_secret=core.OPS_SHARED_SECRET,
            tiers=roles.TIERS,
        )
        self.api_runner = await api.start(app, core.API_HOST, core.PORT)

    async def close(self) -> None:
        await api.stop(self.api_runner)
        self.api_runner = None
        await super().close()


bot = OpsBridgeBot()


@bot.event
async def on_ready() -> None:
    await ready_hook.handle(bot)


@bot.event
async def on_guild_join(guild: discord.Guild) -> None:
    await guild_hook.handle(bot, guild)


def run() -> None:
    """Start the bot and API using configuration from the environment."""

    try:
        bot.run(core.DISCORD_TOKEN, log_handler=None)
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
        sys.exit(1)
