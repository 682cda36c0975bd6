"""Core logic of a chat moderation bot: command lexing, log text, timeouts and help pages."""

__version__ = "0.1.0"