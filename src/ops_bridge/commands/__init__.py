"""
Auto-discovery & registry for slash command cogs.

Any module inside ``commands/handlers`` that defines::

    from ops_bridge.commands import register_cog

    @register_cog
    class MyCog(commands.Cog): ...

is picked up automatically at import-time. Invoking :func:`setup` attaches
every registered cog to the bot.
"""

from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from pkgutil import iter_modules
from typing import List, Optional, Type

from discord.ext import commands as commands_ext

logger = logging.getLogger(__name__)

_COG_CLASSES: List[Type[commands_ext.Cog]] = []


def register_cog(cls: Optional[Type[commands_ext.Cog]] = None):
    """Decorator registering a Cog class for later attachment to the bot."""

    def _register(cog_cls: Type[commands_ext.Cog]):
        if not issubclass(cog_cls, commands_ext.Cog):
            raise TypeError("register_cog expects a discord.ext.commands.Cog subclass")

        # Every slash command must be guild-only.
        open_commands = [
            cmd.name
            for cmd in getattr(cog_cls, "__cog_app_commands__", [])
            if not getattr(cmd, "guild_only", False)
        ]
        if open_commands:
            raise TypeError(
                f"{cog_cls.__name__} defines commands without guild_only: {', '.join(open_commands)}"
            )

        if cog_cls not in _COG_CLASSES:
            _COG_CLASSES.append(cog_cls)
        return cog_cls

    if cls is None:
        return _register
    return _register(cls)


async def setup(bot: commands_ext.Bot) -> None:
    """
    Attach registered cogs to ``bot``.

    This must be invoked during the bot setup phase (typically inside
    ``commands.Bot.setup_hook``). Raises ``RuntimeError`` when no cog was
    discovered, since a bridge without commands is misdeployed.
    """

    for cog_cls in _COG_CLASSES:
        if bot.get_cog(cog_cls.__name__):
            continue
        await bot.add_cog(cog_cls(bot))

    if not _COG_CLASSES:
        raise RuntimeError("No command cogs discovered under ops_bridge.commands.handlers")
    logger.info("Registered %d command cog(s)", len(_COG_CLASSES))


_pkg_path = Path(__file__).resolve().parent / "handlers"
for _, modname, _ in iter_modules([str(_pkg_path)]):
    if modname.startswith("_"):
        continue
    import_module(f"{__name__}.handlers.{modname}")


__all__ = [
    "register_cog",
    "setup",
]
