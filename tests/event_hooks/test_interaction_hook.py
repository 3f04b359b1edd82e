import asyncio
from types import SimpleNamespace

import discord
from discord import app_commands

from ops_bridge.commands import messages
from ops_bridge.event_hooks import interaction_hook


class FakeResponse:
    def __init__(self, done=False, error=None):
        self.sent = []
        self._done = done
        self.error = error

    def is_done(self):
        return self._done

    async def send_message(self, content=None, **kwargs):
        if self.error is not None:
            raise self.error
        self.sent.append((content, kwargs))
        self._done = True


class FakeFollowup:
    def __init__(self):
        self.sent = []

    async def send(self, content=None, **kwargs):
        self.sent.append((content, kwargs))


def _interaction(guild_id=100, done=False, error=None):
    guild = SimpleNamespace(id=guild_id) if guild_id is not None else None
    return SimpleNamespace(
        id=1,
        guild=guild,
        user=SimpleNamespace(id=42),
        command=SimpleNamespace(name="post-ops"),
        response=FakeResponse(done=done, error=error),
        followup=FakeFollowup(),
    )


def test_check_allows_configured_guild(monkeypatch):
    monkeypatch.setattr(interaction_hook.core, "GUILD_ID", 100)
    interaction = _interaction()

    assert asyncio.run(interaction_hook.check(interaction)) is True
    assert interaction.response.sent == []


def test_check_rejects_foreign_guild(monkeypatch):
    monkeypatch.setattr(interaction_hook.core, "GUILD_ID", 100)
    interaction = _interaction(guild_id=200)

    assert asyncio.run(interaction_hook.check(interaction)) is False
    assert interaction.response.sent == [(messages.LOCKED, {"ephemeral": True})]


def test_check_rejects_direct_messages(monkeypatch):
    monkeypatch.setattr(interaction_hook.core, "GUILD_ID", 100)
    interaction = _interaction(guild_id=None)

    assert asyncio.run(interaction_hook.check(interaction)) is False
    assert interaction.response.sent[0][0] == messages.LOCKED


def test_on_error_unknown_command(monkeypatch):
    monkeypatch.setattr(interaction_hook.core, "GUILD_ID", 100)
    interaction = _interaction()

    asyncio.run(interaction_hook.on_error(interaction, app_commands.CommandNotFound("ghost", [])))

    assert interaction.response.sent == [(messages.NOT_SYNCED, {"ephemeral": True})]


def test_on_error_generic_reply(monkeypatch):
    monkeypatch.setattr(interaction_hook.core, "GUILD_ID", 100)
    interaction = _interaction()

    asyncio.run(interaction_hook.on_error(interaction, app_commands.AppCommandError("boom")))

    assert interaction.response.sent == [(messages.GENERIC_ERROR, {"ephemeral": True})]


def test_on_error_uses_followup_after_reply(monkeypatch):
    monkeypatch.setattr(interaction_hook.core, "GUILD_ID", 100)
    interaction = _interaction(done=True)

    asyncio.run(interaction_hook.on_error(interaction, app_commands.AppCommandError("boom")))

    assert interaction.response.sent == []
    assert interaction.followup.sent == [(messages.GENERIC_ERROR, {"ephemeral": True})]


def test_on_error_reply_failure_is_logged(monkeypatch, caplog):
    monkeypatch.setattr(interaction_hook.core, "GUILD_ID", 100)
    failure = discord.HTTPException(SimpleNamespace(status=500, reason="err"), "nope")
    interaction = _interaction(error=failure)

    asyncio.run(interaction_hook.on_error(interaction, app_commands.AppCommandError("boom")))

    assert any("Could not deliver" in rec.getMessage() for rec in caplog.records)
