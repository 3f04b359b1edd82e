"""Internal HTTP API exposing member tiers to trusted services."""

from .directory import DiscordMemberDirectory, MemberDirectory
from .server import RolesApi, create_app, start, stop

__all__ = [
    "DiscordMemberDirectory",
    "MemberDirectory",
    "RolesApi",
    "create_app",
    "start",
    "stop",
]
