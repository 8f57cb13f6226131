"""cwdline: compact working-directory segments for shell prompts."""

from cwdline.cwd import SegmentCollector, segment_cwd
from cwdline.segments import PathSegment, SegmentKind, cwd_to_path_segments
from cwdline.truncate import TruncationResult, dir_only, truncate_segments

__version__ = "0.1.0"

__all__ = [
    "PathSegment",
    "SegmentCollector",
    "SegmentKind",
    "TruncationResult",
    "cwd_to_path_segments",
    "dir_only",
    "segment_cwd",
    "truncate_segments",
]
