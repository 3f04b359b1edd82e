"""User-facing reply strings shared by cogs and the interaction guard."""

from ops_bridge.config import core

LOCKED = f"❌ This bot is locked to {core.COMMUNITY_NAME} only."
NOT_SYNCED = "❌ Command not found (bot not synced)."
GENERIC_ERROR = "❌ Something errored. Try again or contact Corporate."
NO_POST_PERMISSION = "❌ You don’t have permission to post the Ops Panel."
OPS_CHANNEL_MISSING = (
    "❌ Ops channel not found or not a text channel. Check PUBLIC_OPS_CHANNEL_ID."
)
PANEL_POSTED = "✅ Posted the Ops Panel button."
ONLINE = f"✅ {core.COMMUNITY_NAME} Ops Bridge is online."
