"""Slash command cogs. Every public module here is imported by ``ops_bridge.commands``."""
