"""Tier resolution and access checks. Pure functions over pre-fetched role ids."""

from .gate import has_any_role, in_guild_scope
from .tiers import MAX_TIER, NO_TIER, RoleTierConfig, compute_tier, normalize_role_ids

__all__ = [
    "MAX_TIER",
    "NO_TIER",
    "RoleTierConfig",
    "compute_tier",
    "has_any_role",
    "in_guild_scope",
    "normalize_role_ids",
]
