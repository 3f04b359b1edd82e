"""
Member role lookups against the configured guild.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

import discord

logger = logging.getLogger(__name__)


class MemberDirectory(Protocol):
    """Anything that can report a member's current role ids."""

    async def fetch_role_ids(self, user_id: str) -> Optional[List[str]]:
        """Return the member's role ids, or ``None`` when they are not in the guild."""


class DiscordMemberDirectory:
    """
    Fetch members fresh from Discord for every lookup.

    Role ids are never cached here; the gateway cache is bypassed via
    ``Guild.fetch_member`` so tier changes show up immediately.
    """

    def __init__(self, client: discord.Client, guild_id: int) -> None:
        self.client = client
        self.guild_id = guild_id

    async def _guild(self) -> discord.Guild:
        guild = self.client.get_guild(self.guild_id)
        if guild is None:
            guild = await self.client.fetch_guild(self.guild_id)
        return guild

    async def fetch_role_ids(self, user_id: str) -> Optional[List[str]]:
        if not isinstance(user_id, str) or not (user_id.isascii() and user_id.isdigit()):
            logger.debug("Rejecting non-snowflake user id %r", user_id)
            return None
        member_id = int(user_id)

        guild = await self._guild()
        try:
            member = await guild.fetch_member(member_id)
        except discord.NotFound:
            return None

        return [str(role.id) for role in member.roles]


__all__ = ["MemberDirectory", "DiscordMemberDirectory"]
