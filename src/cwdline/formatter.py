"""Turn path segments into coloured, escaped segments for the rendering sink."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cwdline.constants import ORIGIN_CWD, ORIGIN_CWD_PATH, SEPARATOR_THIN
from cwdline.models import Segment

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cwdline.config import ThemeConfig
    from cwdline.models import PathSegment
    from cwdline.shells import ShellInfo


def shorten_name(text: str, max_dir_size: int) -> str:
    """Cut ``text`` to ``max_dir_size`` characters; non-positive sizes disable shortening."""
    if max_dir_size > 0 and len(text) > max_dir_size:
        return text[:max_dir_size]
    return text


def escape_variables(text: str, shell: ShellInfo) -> str:
    """Escape characters the shell would expand inside a prompt string.

    Backslashes go first so the escapes inserted for backticks and dollars are
    left alone.
    """
    text = text.replace("\\", shell.escaped_backslash)
    text = text.replace("`", shell.escaped_backtick)
    return text.replace("$", shell.escaped_dollar)


def segment_colors(segment: PathSegment, theme: ThemeConfig, *, is_last: bool) -> tuple[int, int]:
    """Return ``(foreground, background)`` for ``segment``."""
    if segment.is_home and theme.home_special_display:
        return theme.home_fg, theme.home_bg
    if is_last:
        return theme.cwd_fg, theme.path_bg
    return theme.path_fg, theme.path_bg


def format_path_segments(
    path_segments: Sequence[PathSegment],
    *,
    theme: ThemeConfig,
    shell: ShellInfo,
    max_dir_size: int = -1,
) -> list[tuple[str, Segment]]:
    """Format ``path_segments`` in order, tagging each with its origin.

    The last segment is tagged ``cwd``; every other one ``cwd-path``. Thin
    separators go on every segment except the last one and a specially
    displayed home segment.
    """
    formatted: list[tuple[str, Segment]] = []
    last_index = len(path_segments) - 1
    for index, path_segment in enumerate(path_segments):
        is_last = index == last_index
        foreground, background = segment_colors(path_segment, theme, is_last=is_last)
        segment = Segment(
            content=escape_variables(shorten_name(path_segment.text, max_dir_size), shell),
            foreground=foreground,
            background=background,
        )
        if not (path_segment.is_home and theme.home_special_display) and not is_last:
            segment.separator = SEPARATOR_THIN
            segment.separator_foreground = theme.separator_fg

        formatted.append((ORIGIN_CWD if is_last else ORIGIN_CWD_PATH, segment))
    return formatted
