"""
Membership tier resolution.

A tier is an integer rank from 0 to 6. Each of tiers 1-6 is backed by a set
of Discord role ids; a member's tier is the highest tier whose role set
intersects the member's roles, or 0 when nothing matches.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List


MAX_TIER = 6
NO_TIER = 0


def normalize_role_ids(raw: Any) -> FrozenSet[str]:
    """
    Coerce role ids from an external source into a set of strings.

    ``None``, non-iterables, bare strings and mappings are treated as "no
    roles" rather than errors. Blank entries are dropped and ints (as handed
    out by ``discord.py``) are stringified.
    """

    if raw is None or isinstance(raw, (str, bytes, Mapping)):
        return frozenset()
    if not isinstance(raw, Iterable):
        return frozenset()

    ids = set()
    for item in raw:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            ids.add(text)
    return frozenset(ids)


@dataclass(frozen=True)
class RoleTierConfig:
    """Immutable tier -> role id mapping for tiers 1 through 6."""

    tiers: Mapping[int, FrozenSet[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned: Dict[int, FrozenSet[str]] = {}
        for tier, role_ids in dict(self.tiers).items():
            if not 1 <= int(tier) <= MAX_TIER:
                raise ValueError(f"Tier must be between 1 and {MAX_TIER}, got {tier}")
            cleaned[int(tier)] = normalize_role_ids(role_ids)
        object.__setattr__(self, "tiers", MappingProxyType(cleaned))

    def role_ids_for(self, tier: int) -> FrozenSet[str]:
        return self.tiers.get(tier, frozenset())

    def overlapping_role_ids(self) -> Dict[str, List[int]]:
        """Return role ids configured under more than one tier."""

        seen: Dict[str, List[int]] = {}
        for tier in sorted(self.tiers):
            for role_id in self.tiers[tier]:
                seen.setdefault(role_id, []).append(tier)
        return {rid: tiers for rid, tiers in seen.items() if len(tiers) > 1}


def compute_tier(member_role_ids: Any, config: RoleTierConfig) -> int:
    """
    Return the highest tier ``member_role_ids`` qualifies for.

    Tiers are checked from 6 down to 1 and the first intersecting tier wins,
    so a member holding both a tier-6 and a tier-1 role reports 6.

    :param member_role_ids: Role ids held by the member. Malformed input
        resolves to :data:`NO_TIER`.
    :param config: Tier mapping to resolve against.
    :returns: Tier in ``[0, 6]``.
    """

    member = normalize_role_ids(member_role_ids)
    if not member:
        return NO_TIER

    for tier in range(MAX_TIER, NO_TIER, -1):
        if not member.isdisjoint(config.role_ids_for(tier)):
            return tier
    return NO_TIER


__all__ = [
    "MAX_TIER",
    "NO_TIER",
    "RoleTierConfig",
    "compute_tier",
    "normalize_role_ids",
]
