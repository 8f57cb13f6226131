"""Split a working directory into typed display segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cwdline.constants import PATH_SEPARATOR
from cwdline.models import PathSegment, SegmentKind
from cwdline.probe import exists
from cwdline.roots import plan_segmentation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cwdline.environment import PathEnvironment
    from cwdline.probe import ExistsProbe

__all__ = [
    "PathSegment",
    "SegmentKind",
    "apply_skip",
    "cwd_to_path_segments",
    "split_components",
]


def split_components(path: str) -> tuple[str, ...]:
    """Split ``path`` into directory names, ignoring leading and trailing separators."""
    names = path.strip(PATH_SEPARATOR).split(PATH_SEPARATOR)
    if names[0] == "":
        names = names[1:]
    return tuple(names)


def apply_skip(names: Sequence[str], skip: int) -> tuple[str, ...]:
    """Drop the first ``skip`` names.

    When ``skip`` would consume every name, keep only the last one if there
    were at least two; a single name (or none) is returned unchanged.
    """
    count = len(names)
    if skip < count:
        return tuple(names[skip:])
    if count >= 2:
        return (names[-1],)
    return tuple(names)


def cwd_to_path_segments(
    cwd: str,
    env: PathEnvironment,
    *,
    exists: ExistsProbe = exists,
) -> list[PathSegment]:
    """Build the full, untruncated segment list for ``cwd``.

    Args:
        cwd: Absolute working directory. Empty falls back to ``env.pwd``.
        env: Home, workspace and ``PWD`` values for this invocation.
        exists: Filesystem probe used for root and marker detection.

    Returns:
        Leading detector segment (if any) followed by the directory names,
        either one segment per name or a single joined segment.
    """
    cwd = env.resolve_cwd(cwd)
    plan = plan_segmentation(cwd, env, exists=exists)

    segments = list(plan.head)
    names = apply_skip(split_components(plan.remainder), plan.skip)
    if not names:
        return segments
    if plan.joined:
        segments.append(PathSegment(PATH_SEPARATOR.join(names)))
    else:
        segments.extend(PathSegment(name) for name in names)
    return segments
