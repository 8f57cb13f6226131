"""Configuration loader for cwdline."""

from __future__ import annotations

import os
import tempfile
import tomllib
from typing import TYPE_CHECKING, Literal

import tomlkit
from pydantic import BaseModel, Field, field_validator

from cwdline.constants import DEFAULT_MAX_DEPTH
from cwdline.paths import get_config_path

if TYPE_CHECKING:
    from pathlib import Path


type CwdModeLiteral = Literal["plain", "dironly", "default"]
type ShellLiteral = Literal["bash", "zsh", "bare"]

CWD_MODE_VALUES = frozenset({"plain", "dironly", "default"})
SHELL_VALUES = frozenset({"bash", "zsh", "bare"})


class CwdConfig(BaseModel):
    """How the working directory segment is built."""

    mode: CwdModeLiteral = Field(
        default="default",
        description="plain (whole path), dironly (last directory) or default (segmented)",
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        description="Maximum number of path segments before the middle is elided (<= 0 disables)",
    )
    max_dir_size: int = Field(
        default=-1, description="Maximum characters per directory name (<= 0 disables)"
    )

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, value: object) -> str:
        """Gracefully coerce unknown modes to the segmented default."""
        if isinstance(value, str) and value in CWD_MODE_VALUES:
            return value
        return "default"


class ThemeConfig(BaseModel):
    """xterm-256 colour indices for path segments."""

    home_special_display: bool = Field(
        default=True, description="Colour the home/project segment with the home pair"
    )
    home_fg: int = Field(default=15)
    home_bg: int = Field(default=31)
    path_fg: int = Field(default=250)
    path_bg: int = Field(default=237)
    cwd_fg: int = Field(default=254)
    separator_fg: int = Field(default=244)


class ShellConfig(BaseModel):
    """Target shell, which decides how special characters are escaped."""

    name: ShellLiteral = Field(default="bash")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: object) -> str:
        if isinstance(value, str) and value.lower() in SHELL_VALUES:
            return value.lower()
        return "bare"


class CwdlineConfig(BaseModel):
    """Root configuration model."""

    cwd: CwdConfig = Field(default_factory=CwdConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> CwdlineConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        doc = tomlkit.document()
        doc.add(tomlkit.comment("cwdline configuration"))

        for section_name in ("cwd", "theme", "shell"):
            section = getattr(self, section_name)
            table = tomlkit.table()
            for key, value in section.model_dump().items():
                if value is not None:
                    table[key] = value
            doc[section_name] = table

        path.parent.mkdir(parents=True, exist_ok=True)
        # Readers must never see a half-written file; swap in a finished sibling.
        handle = tempfile.NamedTemporaryFile(
            "w", dir=path.parent, prefix=".tmp_", suffix=".toml", delete=False, encoding="utf-8"
        )
        try:
            with handle:
                handle.write(tomlkit.dumps(doc))
            os.replace(handle.name, path)
        except Exception:
            os.unlink(handle.name)
            raise
