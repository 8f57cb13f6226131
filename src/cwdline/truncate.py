"""Depth-limit policy for segmented paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cwdline.constants import ELLIPSIS, MAX_HEAD_SEGMENTS
from cwdline.models import PathSegment, SegmentKind

if TYPE_CHECKING:
    from collections.abc import Sequence

MAX_DEPTH_ADVISORY = "Ignoring cwd max depth since it's smaller than or equal to 0"


@dataclass(frozen=True, slots=True)
class TruncationResult:
    """Truncated segments plus an optional non-fatal advisory for the caller."""

    segments: list[PathSegment]
    advisory: str | None = None


def head_count(max_depth: int) -> int:
    """Number of leading segments kept before the ellipsis."""
    return min(MAX_HEAD_SEGMENTS, max_depth - 1)


def truncate_segments(segments: Sequence[PathSegment], max_depth: int) -> TruncationResult:
    """Collapse the middle of ``segments`` into one ellipsis when longer than ``max_depth``.

    The result holds ``head_count(max_depth)`` leading segments, the ellipsis
    and a tail, for ``max_depth + 1`` segments in total. A non-positive
    ``max_depth`` disables truncation and reports an advisory instead.
    """
    if max_depth <= 0:
        return TruncationResult(list(segments), advisory=MAX_DEPTH_ADVISORY)
    if len(segments) <= max_depth:
        return TruncationResult(list(segments))

    n_before = head_count(max_depth)
    tail_start = len(segments) + n_before - max_depth
    truncated = [
        *segments[:n_before],
        PathSegment(ELLIPSIS, SegmentKind.ELLIPSIS),
        *segments[tail_start:],
    ]
    return TruncationResult(truncated)


def dir_only(segments: Sequence[PathSegment]) -> list[PathSegment]:
    """Keep only the last segment."""
    return list(segments[-1:])
