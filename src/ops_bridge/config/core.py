import os


def _as_int(name: str, raw) -> int:
    try:
        return int(str(raw).strip() or "0")
    except ValueError:
        raise ValueError(f"{name} must be an integer id, got {raw!r}") from None


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("opsbridge", {})
        discord_cfg = cfg.get("discord", {})
        api_cfg = cfg.get("api", {})
        panel_cfg = cfg.get("panel", {})

        token_env = str(discord_cfg.get("token_env", "DISCORD_TOKEN"))
        secret_env = str(api_cfg.get("secret_env", "OPS_SHARED_SECRET"))

        self.DISCORD_TOKEN: str | None = os.getenv(token_env)
        self.OPS_SHARED_SECRET: str | None = os.getenv(secret_env)

        self.CLIENT_ID: int = _as_int("CLIENT_ID", discord_cfg.get("client_id") or os.getenv("CLIENT_ID", "0"))
        self.GUILD_ID: int = _as_int("GUILD_ID", discord_cfg.get("guild_id") or os.getenv("GUILD_ID", "0"))
        self.PUBLIC_OPS_CHANNEL_ID: int = _as_int(
            "PUBLIC_OPS_CHANNEL_ID",
            discord_cfg.get("public_ops_channel_id") or os.getenv("PUBLIC_OPS_CHANNEL_ID", "0"),
        )
        self.COMMUNITY_NAME: str = str(discord_cfg.get("community_name") or os.getenv("COMMUNITY_NAME", "Glace"))

        self.API_HOST: str = str(api_cfg.get("host") or os.getenv("API_HOST", "0.0.0.0"))
        self.PORT: int = int(api_cfg.get("port", os.getenv("PORT", "10000")))

        self.OPS_PORTAL_URL: str = str(
            panel_cfg.get("portal_url") or os.getenv("OPS_PORTAL_URL", "https://example.com/sign-in")
        )

        required = [
            ("DISCORD_TOKEN", self.DISCORD_TOKEN),
            ("CLIENT_ID", self.CLIENT_ID),
            ("GUILD_ID", self.GUILD_ID),
            ("OPS_SHARED_SECRET", self.OPS_SHARED_SECRET),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")
