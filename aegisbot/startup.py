"""Configuration loading and the start-up chores run before the bot goes live."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_PATH = Path("./Config.toml")
UPDATE_FILE = Path("./update.txt")
UPDATE_ARG_PREFIX = "--id"
STALE_PREFIX = "new_"
STALE_MARKER = "aegis"
ENCRYPTION_MARKER = "**ENCRYPTION ENABLED**"
UPDATE_FINISHED = "Update finished!"
SHORT_HASH_LENGTH = 7
DEFAULT_MAX_CONNECTIONS = 5

_KEY_START = "```\n"
_KEY_END = "\n```"


@dataclass(frozen=True)
class Environment:
    """Settings of one deployment environment (``release`` or ``dev``)."""

    token: str
    prefix: str
    database_url: str
    max_connections: int | None = None
    whitelist_enabled: bool | None = None
    whitelist: tuple[int, ...] | None = None

    @property
    def connection_limit(self) -> int:
        """Size of the database pool, falling back to the default."""
        if self.max_connections is None:
            return DEFAULT_MAX_CONNECTIONS
        return self.max_connections


def load_config(path: str | os.PathLike[str] = CONFIG_PATH) -> dict[str, Any]:
    """Read and parse the TOML configuration file."""
    with open(path, "rb") as handle:
        return tomllib.load(handle)


def _required_str(table: Mapping[str, Any], key: str, section: str) -> str:
    value = table.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{section}.{key} must be a string")
    return value


def _environment_from(table: Any, section: str) -> Environment:
    if not isinstance(table, Mapping):
        raise ValueError(f"{section} must be a table")

    max_connections = table.get("max_connections")
    if max_connections is not None and (
        not isinstance(max_connections, int) or isinstance(max_connections, bool)
    ):
        raise ValueError(f"{section}.max_connections must be an integer")

    whitelist_enabled = table.get("whitelist_enabled")
    if whitelist_enabled is not None and not isinstance(whitelist_enabled, bool):
        raise ValueError(f"{section}.whitelist_enabled must be a boolean")

    whitelist = table.get("whitelist")
    if whitelist is not None:
        if not isinstance(whitelist, list) or not all(
            isinstance(i, int) and not isinstance(i, bool) for i in whitelist
        ):
            raise ValueError(f"{section}.whitelist must be a list of integers")
        whitelist = tuple(whitelist)

    return Environment(
        token=_required_str(table, "token", section),
        prefix=_required_str(table, "prefix", section),
        database_url=_required_str(table, "database_url", section),
        max_connections=max_connections,
        whitelist_enabled=whitelist_enabled,
        whitelist=whitelist,
    )


def select_environment(config: Mapping[str, Any]) -> Environment:
    """Pick the environment named by ``bot.env``: ``release`` or ``dev``."""
    bot = config.get("bot")
    if not isinstance(bot, Mapping) or not isinstance(bot.get("env"), str):
        raise ValueError("bot.env must be set to one of release or dev")
    env = bot["env"]

    if env == "release":
        if "release" not in config:
            raise ValueError("a release environment is required in the config")
        return _environment_from(config["release"], "release")
    if env == "dev":
        if config.get("dev") is None:
            raise ValueError(
                "a dev environment must be present in the config when bot.env is dev"
            )
        return _environment_from(config["dev"], "dev")
    raise ValueError("Unknown bot.env, verify bot.env is one of release or dev")


def cleanup(directory: str | os.PathLike[str] | None = None) -> list[Path]:
    """Delete leftover update binaries (``new_*aegis*``); returns what was removed."""
    root = Path.cwd() if directory is None else Path(directory)
    removed = []
    for path in root.iterdir():
        name = path.name
        if path.is_file() and name.startswith(STALE_PREFIX) and STALE_MARKER in name:
            path.unlink()
            removed.append(path)
    return removed


def update_ids_from(
    argv: Sequence[str], path: str | os.PathLike[str] = UPDATE_FILE
) -> str | None:
    """Find the pending update reference, from ``--id=`` or a one-shot file.

    The file is deleted once read.
    """
    for arg in argv:
        if arg.startswith(UPDATE_ARG_PREFIX):
            return arg.split("=")[-1]
    update_file = Path(path)
    try:
        ids = update_file.read_text()
    except OSError:
        return None
    try:
        update_file.unlink()
    except OSError:
        pass
    return ids


def parse_update_ids(ids: str) -> tuple[int, int, str | None] | None:
    """Split ``channel:message[:hash]``; ``None`` if fewer than two parts."""
    parts = ids.split(":")
    if len(parts) < 2:
        return None
    channel_id, message_id = int(parts[0]), int(parts[1])
    commit_hash = parts[2] if len(parts) > 2 else None
    return channel_id, message_id, commit_hash


def update_reply(commit_hash: str | None) -> str:
    """Reply posted once an update has finished."""
    if commit_hash is None:
        return UPDATE_FINISHED
    return f"Updated to `{commit_hash[:SHORT_HASH_LENGTH]}`"


def extract_encryption_key(content: str) -> str | None:
    """Pull the displayed key out of an encryption-enabled announcement."""
    if ENCRYPTION_MARKER not in content:
        return None
    start = content.find(_KEY_START)
    if start < 0:
        return None
    after = content[start + len(_KEY_START):]
    end = after.find(_KEY_END)
    if end < 0:
        return None
    return after[:end].strip()


def non_whitelisted(
    guild_ids: Iterable[int], enabled: bool | None, whitelist: Iterable[int] | None
) -> list[int]:
    """Guilds the bot must leave; none when the whitelist is switched off."""
    if not enabled:
        return []
    allowed = set(whitelist) if whitelist is not None else set()
    return [guild_id for guild_id in guild_ids if guild_id not in allowed]