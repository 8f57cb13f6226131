"""Value types shared by the segmenter, truncator and formatter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SegmentKind(StrEnum):
    """Role of a path segment; drives colouring and separator suppression."""

    PLAIN = "plain"
    HOME = "home"
    ROOT = "root"
    ELLIPSIS = "ellipsis"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One unit of the segmented working directory."""

    text: str
    kind: SegmentKind = SegmentKind.PLAIN

    @property
    def is_home(self) -> bool:
        return self.kind is SegmentKind.HOME


@dataclass(frozen=True, slots=True)
class ProjectRoot:
    """Result of searching upward for a version-controlled project root."""

    path: str
    found: bool

    @classmethod
    def missing(cls) -> ProjectRoot:
        return cls(path="", found=False)


@dataclass(frozen=True, slots=True)
class SegmentationPlan:
    """Leading segments chosen by a detector plus how to split the rest.

    ``skip`` drops that many leading components of ``remainder``; ``joined``
    renders what is left as a single slash-joined segment.
    """

    head: tuple[PathSegment, ...]
    remainder: str
    skip: int = 0
    joined: bool = False


@dataclass(slots=True)
class Segment:
    """A formatted segment handed to the rendering sink."""

    content: str
    foreground: int
    background: int
    separator: str | None = None
    separator_foreground: int | None = None
