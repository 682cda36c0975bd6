"""Help output: command details and the paged command listing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEVELOPER_CATEGORY = "developer"
FOOTER_TEMPLATE = "View additional information using {prefix}help <command: String>"

_BUTTON_LABELS = (("first", "<<"), ("prev", "<"), ("page", ""), ("next", ">"), ("last", ">>"))


@dataclass(frozen=True)
class CommandInfo:
    """What the help output needs to know about a command.

    ``syntax`` holds ``(definition, example)`` pairs, ``params`` holds
    ``(short, name, description)`` triples and ``required`` / ``one_of`` hold
    groups of permission names such as ``"Ban Members"``.
    """

    name: str
    category: str
    short: str = ""
    full: str = ""
    syntax: tuple[tuple[str, str], ...] = ()
    params: tuple[tuple[str, str, str], ...] = ()
    required: tuple[tuple[str, ...], ...] = ()
    one_of: tuple[tuple[str, ...], ...] = ()


def _names(group: Iterable[str]) -> list[str]:
    return [name.upper().replace(" ", "_") for name in group]


def permission_summary(
    required: Sequence[Iterable[str]], one_of: Sequence[Iterable[str]]
) -> str:
    """Describe the permissions a command needs; empty if it needs none."""
    if not required and not one_of:
        return ""
    result = " && ".join(" && ".join(_names(group)) for group in required)
    if one_of:
        alternatives = " || ".join(" || ".join(_names(group)) for group in one_of)
        result = f"{result} && ({alternatives})" if result else alternatives
    return f"\nRequired Permissions:\n`{result}`"


def syntax_block(
    prefix: str, name: str, definitions: Iterable[str], examples: Iterable[str]
) -> str:
    """The syntax and example code blocks of a command."""
    return (
        f"Syntax:\n```\n{prefix}{name} {' '.join(definitions)}\n```\n"
        f"Example:\n```{prefix}{name} {' '.join(examples)}```"
    )


def command_detail(prefix: str, command: CommandInfo) -> str:
    """Full help text for one command."""
    params = ""
    if command.params:
        lines = "\n".join(
            f"`+{short}/+{name}` -> {desc}" for short, name, desc in command.params
        )
        params = f"\n\nOptional Parameters:\n{lines}"
    syntax = syntax_block(
        prefix,
        command.name,
        (definition for definition, _ in command.syntax),
        (example for _, example in command.syntax),
    )
    perms = permission_summary(command.required, command.one_of)
    return f"**{command.name.upper()}**\n{command.full}{params}\n\n{syntax}{perms}"


class HelpPages:
    """Commands grouped into one page per category, with paging buttons.

    Categories appear in the order their first command does; the developer
    category is left out unless ``developer`` is true.
    """

    def __init__(self, commands: Iterable[CommandInfo], developer: bool = False):
        groups: dict[str, list[CommandInfo]] = {}
        for command in commands:
            if command.category.casefold() == DEVELOPER_CATEGORY and not developer:
                continue
            groups.setdefault(command.category, []).append(command)
        self.pages: list[tuple[str, list[CommandInfo]]] = list(groups.items())
        self.current = 0
        self._disabled = [True, True, False, False]

    def page_body(self, index: int) -> str:
        """Text of page ``index``; empty if there is no such page."""
        if not 0 <= index < len(self.pages):
            return ""
        category, commands = self.pages[index]
        lines = "".join(f"`{c.name}` - {c.short}\n" for c in commands if c.short)
        return f"**{category.upper()}**\n{lines}"

    def press(self, button: str) -> str | None:
        """Handle a paging button; returns the new page body, or ``None`` if unknown."""
        if button == "first":
            self.current = 0
            self._disabled = [True, True, False, False]
        elif button == "prev":
            if self.current == 0:
                raise IndexError("already on the first page")
            self.current -= 1
            at_start = self.current == 0
            self._disabled = [at_start, at_start, False, False]
        elif button == "next":
            self.current += 1
            at_end = self.current + 1 >= len(self.pages)
            self._disabled = [False, False, at_end, at_end]
        elif button == "last":
            if not self.pages:
                raise IndexError("there are no pages")
            self.current = len(self.pages) - 1
            self._disabled = [False, False, True, True]
        else:
            return None
        return self.page_body(self.current)

    def buttons(self) -> list[tuple[str, str, bool]]:
        """The paging buttons as ``(custom_id, label, disabled)``."""
        first, prev, nxt, last = self._disabled
        disabled = (first, prev, True, nxt, last)
        page_label = f"{self.current + 1}/{len(self.pages)}"
        return [
            (custom_id, page_label if custom_id == "page" else label, state)
            for (custom_id, label), state in zip(_BUTTON_LABELS, disabled)
        ]