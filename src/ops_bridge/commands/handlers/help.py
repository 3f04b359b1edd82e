from __future__ import annotations

import discord
from discord import app_commands
from discord.ext import commands

from .. import register_cog
from ops_bridge.access import has_any_role
from ops_bridge.config import roles as roles_cfg

# Commands gated by the poster allow-list
POSTER_ONLY = frozenset({"post-ops"})


def describe_commands(tree_commands, member_role_ids) -> str:
    """One line per command, flagging the ones the caller cannot run."""

    can_post = has_any_role(member_role_ids, roles_cfg.ALLOWED_POSTER_ROLE_IDS)
    lines = []
    for cmd in sorted(tree_commands, key=lambda c: c.name):
        line = f"`/{cmd.name}`: {cmd.description}"
        if cmd.name in POSTER_ONLY and not can_post:
            line += " (🔒 poster role required)"
        lines.append(line)
    return "\n".join(lines) if lines else "No Ops Bridge commands registered."


@register_cog
class OpsHelp(commands.Cog):
    """Describe the bridge's commands for the caller."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="ops-help", description="List Ops Bridge commands you can use.")
    @app_commands.guild_only()
    async def ops_help(self, interaction: discord.Interaction) -> None:
        member_roles = [role.id for role in getattr(interaction.user, "roles", None) or []]
        listing = describe_commands(self.bot.tree.get_commands(), member_roles)
        await interaction.response.send_message(listing, ephemeral=True)
