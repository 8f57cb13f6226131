"""Project root detection: version-control roots, ecosystems and workspaces.

Detectors return a :class:`SegmentationPlan` describing the leading segment
and how the rest of the path is split, or ``None`` when they do not claim the
path. The segmenter tries them in precedence order.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cwdline.constants import (
    HOME_LABEL,
    ROOT_LABEL,
    VCS_LABEL,
    VCS_MARKER,
    WORKSPACE_LABEL,
    WORKSPACE_SKIP,
    WORKSPACE_SOURCE_DIR,
)
from cwdline.models import PathSegment, ProjectRoot, SegmentationPlan, SegmentKind
from cwdline.probe import exists

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cwdline.environment import PathEnvironment
    from cwdline.probe import ExistsProbe

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EcosystemMarker:
    """A file or directory whose presence at a project root selects ``label``."""

    marker: str
    label: str


# First match wins.
ECOSYSTEM_MARKERS: tuple[EcosystemMarker, ...] = (
    EcosystemMarker("package.json", "JS"),
    EcosystemMarker("composer.json", "\U0001f418"),
    EcosystemMarker("Gemfile", "\U0001f48e"),
    EcosystemMarker("cpanfile", "\U0001f42a"),
    EcosystemMarker("__pycache__", "Py"),
)


def find_vcs_root(
    start: str,
    *,
    marker: str = VCS_MARKER,
    exists: ExistsProbe = exists,
) -> ProjectRoot:
    """Walk upward from ``start`` to the nearest directory containing ``marker``.

    The search stops at the filesystem root or an empty path; neither is
    itself checked for the marker.
    """
    candidate = start
    while candidate not in ("/", ""):
        if exists(candidate, marker):
            return ProjectRoot(path=candidate, found=True)
        parent = os.path.dirname(candidate)
        if parent == candidate:
            break
        candidate = parent
    return ProjectRoot.missing()


def classify_ecosystem(
    root: str,
    *,
    markers: Sequence[EcosystemMarker] = ECOSYSTEM_MARKERS,
    exists: ExistsProbe = exists,
) -> str:
    """Return the label of the first marker present in ``root``, or the generic VCS label."""
    for entry in markers:
        if exists(root, entry.marker):
            return entry.label
    return VCS_LABEL


def match_workspace(cwd: str, gopath: str) -> SegmentationPlan | None:
    """Claim paths under ``<gopath>/src``."""
    if not gopath:
        return None
    prefix = gopath + WORKSPACE_SOURCE_DIR
    if not cwd.startswith(prefix):
        return None
    return SegmentationPlan(
        head=(PathSegment(WORKSPACE_LABEL, SegmentKind.HOME),),
        remainder=cwd[len(prefix) :],
        skip=WORKSPACE_SKIP,
        joined=True,
    )


def match_project_root(cwd: str, *, exists: ExistsProbe = exists) -> SegmentationPlan | None:
    """Claim paths inside a version-controlled project, labelled by ecosystem.

    The remainder keeps the project directory name itself, so the joined
    segment reads ``project/sub/dir``.
    """
    root = find_vcs_root(cwd, exists=exists)
    if not root.found:
        return None
    label = classify_ecosystem(root.path, exists=exists)
    logger.debug("project root %s classified as %r", root.path, label)
    return SegmentationPlan(
        head=(PathSegment(label, SegmentKind.HOME),),
        remainder=cwd[len(os.path.dirname(root.path)) :],
        joined=True,
    )


def match_home(cwd: str, home: str) -> SegmentationPlan | None:
    if not home or not cwd.startswith(home):
        return None
    return SegmentationPlan(
        head=(PathSegment(HOME_LABEL, SegmentKind.HOME),),
        remainder=cwd[len(home) :],
    )


def match_filesystem_root(cwd: str) -> SegmentationPlan | None:
    """Claim the filesystem root, including spellings like ``//`` that ``cd //`` leaves in ``PWD``."""
    if not cwd or cwd.strip(ROOT_LABEL):
        return None
    return SegmentationPlan(head=(PathSegment(ROOT_LABEL, SegmentKind.ROOT),), remainder="")


def plan_segmentation(
    cwd: str,
    env: PathEnvironment,
    *,
    exists: ExistsProbe = exists,
) -> SegmentationPlan:
    """Pick the first detector that claims ``cwd``.

    Precedence: language workspace, project root, home directory, filesystem
    root. Unclaimed paths are split as-is with no leading segment.
    """
    plan = (
        match_workspace(cwd, env.gopath)
        or match_project_root(cwd, exists=exists)
        or match_home(cwd, env.home)
        or match_filesystem_root(cwd)
    )
    if plan is None:
        return SegmentationPlan(head=(), remainder=cwd)
    logger.debug("segmenting %s with head %r", cwd, [segment.text for segment in plan.head])
    return plan
