"""Shell-specific escape sequences for prompt text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ShellInfo:
    name: str
    escaped_backslash: str
    escaped_backtick: str
    escaped_dollar: str


BASH = ShellInfo(
    name="bash",
    escaped_backslash="\\\\\\\\",
    escaped_backtick="\\`",
    escaped_dollar="\\$",
)

ZSH = ShellInfo(
    name="zsh",
    escaped_backslash="\\\\",
    escaped_backtick="\\`",
    escaped_dollar="\\$",
)

BARE = ShellInfo(
    name="bare",
    escaped_backslash="\\",
    escaped_backtick="`",
    escaped_dollar="$",
)

_SHELLS: dict[str, ShellInfo] = {shell.name: shell for shell in (BASH, ZSH, BARE)}


def available_shell_names() -> tuple[str, ...]:
    """Return selectable shell names."""
    return tuple(sorted(_SHELLS))


def resolve_shell(name: str | None) -> ShellInfo:
    """Return the escape table for ``name``, falling back to ``bare``."""
    if not name:
        return BARE
    return _SHELLS.get(name.strip().lower(), BARE)
