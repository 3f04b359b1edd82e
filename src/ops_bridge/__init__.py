"""Discord ops bridge: single-guild slash commands and an internal tier lookup API."""

__version__ = "0.1.0"
