from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.toml")
CONFIG_PATH_ENV = "OPS_BRIDGE_CONFIG"
ROOT_TABLE = "opsbridge"
KNOWN_SECTIONS = frozenset({"discord", "api", "panel", "roles"})


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the optional bridge config.

    The path is ``path``, else ``$OPS_BRIDGE_CONFIG``, else ``config.toml``.
    Returns an empty dict when the file is missing so callers fall back to
    environment variables. Unknown ``[opsbridge.*]`` sections are reported
    and ignored.
    """
    if path is None:
        path = os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
    target = Path(path)
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        raw = tomllib.load(handle)

    bridge = raw.get(ROOT_TABLE)
    if not isinstance(bridge, dict):
        logger.warning("%s has no [%s] table; using environment only", target, ROOT_TABLE)
        return {}

    for section in sorted(set(bridge) - KNOWN_SECTIONS):
        logger.warning("Ignoring unknown config section [%s.%s] in %s", ROOT_TABLE, section, target)

    logger.info("Loaded bridge config from %s", target)
    return {ROOT_TABLE: {k: v for k, v in bridge.items() if k in KNOWN_SECTIONS}}


__all__ = ["load_raw_config", "DEFAULT_CONFIG_PATH", "CONFIG_PATH_ENV"]
