import logging
import os
from typing import FrozenSet, List

from ops_bridge.access.tiers import MAX_TIER, RoleTierConfig

logger = logging.getLogger(__name__)


def _split_ids(raw) -> List[str]:
    if isinstance(raw, (list, tuple)):
        return [str(rid).strip() for rid in raw if str(rid).strip()]
    return [rid.strip() for rid in str(raw or "").split(",") if rid.strip()]


class Roles:
    def __init__(self, config: dict | None = None) -> None:
        roles_cfg = (config or {}).get("opsbridge", {}).get("roles", {})

        tiers = {}
        for tier in range(1, MAX_TIER + 1):
            raw = roles_cfg.get(f"tier{tier}") or os.getenv(f"TIER{tier}_ROLE_IDS", "")
            tiers[tier] = frozenset(_split_ids(raw))
        self.TIERS: RoleTierConfig = RoleTierConfig(tiers)

        posters_raw = roles_cfg.get("allowed_posters") or os.getenv("ALLOWED_POSTER_ROLE_IDS", "")
        self.ALLOWED_POSTER_ROLE_IDS: FrozenSet[str] = frozenset(_split_ids(posters_raw))

        # Highest tier still wins; overlaps are only reported.
        for role_id, tier_list in sorted(self.TIERS.overlapping_role_ids().items()):
            logger.warning(
                "Role %s is configured for multiple tiers %s; tier %d will be used",
                role_id,
                tier_list,
                max(tier_list),
            )

        if not self.ALLOWED_POSTER_ROLE_IDS:
            logger.info("ALLOWED_POSTER_ROLE_IDS is empty; /post-ops will reject everyone")
