"""Read-only environment inputs for path segmentation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cwdline.constants import WORKSPACE_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class PathEnvironment:
    """Home directory, workspace root and ``PWD`` fallback for one invocation."""

    home: str = ""
    gopath: str = ""
    pwd: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> PathEnvironment:
        """Snapshot the relevant variables from ``environ`` (defaults to ``os.environ``)."""
        source = os.environ if environ is None else environ
        return cls(
            home=source.get("HOME", ""),
            gopath=source.get(WORKSPACE_ENV_VAR, ""),
            pwd=source.get("PWD", ""),
        )

    def resolve_cwd(self, cwd: str) -> str:
        """Return ``cwd``, or the ``PWD`` fallback when it is empty."""
        return cwd or self.pwd
