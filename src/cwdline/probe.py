"""Filesystem existence probe used for marker detection."""

from __future__ import annotations

import os
from typing import Protocol


class ExistsProbe(Protocol):
    def __call__(self, *parts: str) -> bool: ...


def exists(*parts: str) -> bool:
    """Return True when the joined path can be stat'ed.

    Any ``OSError`` (permission denied, broken link, name too long) or
    ``ValueError`` (embedded NUL byte) counts as "does not exist" so marker
    detection never fails.
    """
    if not parts:
        return False
    try:
        os.stat(os.path.join(*parts))
    except (OSError, ValueError):
        return False
    return True
