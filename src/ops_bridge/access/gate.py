"""Authorization predicates: role allow-lists and the single-guild lock."""

from __future__ import annotations

from typing import Any

from .tiers import normalize_role_ids


def has_any_role(member_role_ids: Any, allowed_role_ids: Any) -> bool:
    """
    Return ``True`` when the member holds at least one allowed role.

    Any single role from the allow-list is sufficient. Malformed input on
    either side yields ``False``.
    """

    member = normalize_role_ids(member_role_ids)
    allowed = normalize_role_ids(allowed_role_ids)
    return not member.isdisjoint(allowed)


def in_guild_scope(guild: Any, guild_id: int) -> bool:
    """
    Return ``True`` only for the one configured guild.

    ``guild`` may be a guild object exposing ``id``, a raw id, or ``None``
    (DMs), which is always out of scope.
    """

    if guild is None or not guild_id:
        return False
    candidate = getattr(guild, "id", guild)
    try:
        return int(candidate) == int(guild_id)
    except (TypeError, ValueError):
        return False


__all__ = ["has_any_role", "in_guild_scope"]
