"""Entry point that emits the working-directory segments to a rendering sink."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from cwdline.constants import HOME_LABEL, ORIGIN_CWD
from cwdline.environment import PathEnvironment
from cwdline.formatter import format_path_segments
from cwdline.models import Segment
from cwdline.probe import exists
from cwdline.segments import cwd_to_path_segments
from cwdline.truncate import TruncationResult, dir_only, truncate_segments

if TYPE_CHECKING:
    from cwdline.config import CwdConfig, ThemeConfig
    from cwdline.probe import ExistsProbe
    from cwdline.shells import ShellInfo

logger = logging.getLogger(__name__)


class SegmentSink(Protocol):
    def append_segment(self, origin: str, segment: Segment) -> None: ...


class SegmentCollector:
    """List-backed sink that records ``(origin, segment)`` pairs in order."""

    def __init__(self) -> None:
        self.segments: list[tuple[str, Segment]] = []

    def append_segment(self, origin: str, segment: Segment) -> None:
        self.segments.append((origin, segment))

    def contents(self) -> list[str]:
        return [segment.content for _origin, segment in self.segments]


def abbreviate_home(cwd: str, home: str) -> str:
    """Replace a leading ``home`` with ``~``."""
    if home and cwd.startswith(home):
        return HOME_LABEL + cwd[len(home) :]
    return cwd


def segment_cwd(
    sink: SegmentSink,
    *,
    config: CwdConfig,
    theme: ThemeConfig,
    shell: ShellInfo,
    cwd: str = "",
    env: PathEnvironment | None = None,
    exists: ExistsProbe = exists,
) -> TruncationResult:
    """Emit the segments for ``cwd`` to ``sink`` according to ``config.mode``.

    ``plain`` emits the whole path (home abbreviated) as one segment,
    ``dironly`` the last path segment only, and ``default`` the segmented
    path truncated to ``config.max_depth``. An invalid depth is logged and
    returned as the result's advisory; it never raises.
    """
    if env is None:
        env = PathEnvironment.from_environ()
    cwd = env.resolve_cwd(cwd)

    if config.mode == "plain":
        sink.append_segment(
            ORIGIN_CWD,
            Segment(
                content=abbreviate_home(cwd, env.home),
                foreground=theme.cwd_fg,
                background=theme.path_bg,
            ),
        )
        return TruncationResult([])

    path_segments = cwd_to_path_segments(cwd, env, exists=exists)
    if config.mode == "dironly":
        result = TruncationResult(dir_only(path_segments))
    else:
        result = truncate_segments(path_segments, config.max_depth)
        if result.advisory:
            logger.warning(result.advisory)

    for origin, segment in format_path_segments(
        result.segments,
        theme=theme,
        shell=shell,
        max_dir_size=config.max_dir_size,
    ):
        sink.append_segment(origin, segment)
    return result
