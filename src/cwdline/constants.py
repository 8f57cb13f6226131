"""Glyphs and fixed labels used when building path segments."""

from __future__ import annotations

ELLIPSIS = "…"
HOME_LABEL = "~"
ROOT_LABEL = "/"
PATH_SEPARATOR = "/"

VCS_MARKER = ".git"
VCS_LABEL = "Git"

WORKSPACE_ENV_VAR = "GOPATH"
WORKSPACE_SOURCE_DIR = "/src"
WORKSPACE_LABEL = "\U0001f42d"
WORKSPACE_SKIP = 2

# Segments kept verbatim before the ellipsis when truncating.
MAX_HEAD_SEGMENTS = 2

SEPARATOR_THIN = "\ue0b1"

ORIGIN_CWD = "cwd"
ORIGIN_CWD_PATH = "cwd-path"

DEFAULT_MAX_DEPTH = 5
