"""CLI entry point for cwdline."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from cwdline import __version__
from cwdline.config import CWD_MODE_VALUES, CwdlineConfig
from cwdline.cwd import SegmentCollector, segment_cwd
from cwdline.debug_log import setup_logging
from cwdline.environment import PathEnvironment
from cwdline.paths import get_config_path
from cwdline.shells import available_shell_names, resolve_shell

if TYPE_CHECKING:
    from cwdline.models import Segment


def _load_config(config_path: Path | None) -> CwdlineConfig:
    try:
        return CwdlineConfig.load(config_path)
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        location = config_path or get_config_path()
        raise click.ClickException(f"Invalid config {location}: {exc}") from exc


def render_text(segments: list[tuple[str, Segment]]) -> str:
    """Join segment contents with spaces, showing separators where present."""
    parts: list[str] = []
    for _origin, segment in segments:
        if segment.separator:
            parts.append(f"{segment.content} {segment.separator}")
        else:
            parts.append(segment.content)
    return " ".join(parts)


def render_json(segments: list[tuple[str, Segment]]) -> str:
    payload = [
        {
            "origin": origin,
            "content": segment.content,
            "foreground": segment.foreground,
            "background": segment.background,
            "separator": segment.separator,
        }
        for origin, segment in segments
    ]
    return json.dumps(payload, ensure_ascii=False)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Compact working-directory segments for shell prompts."""
    if version:
        click.echo(f"cwdline {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        # ctx.invoke fills defaults but skips envvar lookup.
        env_config = os.environ.get("CWDLINE_CONFIG")
        ctx.invoke(show, config_path=Path(env_config) if env_config else None)


@cli.command()
@click.argument("path", required=False, default=None)
@click.option(
    "--mode",
    type=click.Choice(sorted(CWD_MODE_VALUES)),
    default=None,
    help="Segment mode (overrides config)",
)
@click.option("--max-depth", type=int, default=None, help="Maximum number of path segments")
@click.option("--max-dir-size", type=int, default=None, help="Maximum characters per directory")
@click.option(
    "--shell",
    "shell_name",
    type=click.Choice(available_shell_names(), case_sensitive=False),
    default=None,
    help="Shell whose escaping rules apply",
)
@click.option("--json", "as_json", is_flag=True, help="Print segments as JSON")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="CWDLINE_CONFIG",
    help="Path to config file",
)
@click.option("-v", "--verbose", is_flag=True, help="Log detection details to stderr")
def show(
    path: str | None,
    mode: str | None,
    max_depth: int | None,
    max_dir_size: int | None,
    shell_name: str | None,
    as_json: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Print the segments for PATH (defaults to $PWD, then the process cwd).

    \b
    Examples:
        cwdline show
        cwdline show ~/src/project/lib --max-depth 3
        cwdline show --mode dironly --json
    """
    setup_logging(verbose=verbose)
    config = _load_config(config_path)

    overrides = {
        key: value
        for key, value in (
            ("mode", mode),
            ("max_depth", max_depth),
            ("max_dir_size", max_dir_size),
        )
        if value is not None
    }
    cwd_config = config.cwd.model_copy(update=overrides)

    env = PathEnvironment.from_environ()
    cwd = os.path.abspath(os.path.expanduser(path)) if path else ""
    if not cwd and not env.pwd:
        cwd = os.getcwd()

    collector = SegmentCollector()
    segment_cwd(
        collector,
        config=cwd_config,
        theme=config.theme,
        shell=resolve_shell(shell_name or config.shell.name),
        cwd=cwd,
        env=env,
    )

    if as_json:
        click.echo(render_json(collector.segments))
    else:
        click.echo(render_text(collector.segments))


@cli.group("config")
def config_group() -> None:
    """Inspect or create the config file."""
    pass


@config_group.command("path")
def config_path_cmd() -> None:
    """Print the config file location."""
    click.echo(str(get_config_path()))


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def config_init(force: bool) -> None:
    """Write a config file with default values."""
    target = get_config_path()
    if target.exists() and not force:
        raise click.ClickException(f"Config already exists: {target} (use --force to overwrite)")
    CwdlineConfig().save(target)
    click.secho(f"Wrote {target}", fg="green")


if __name__ == "__main__":
    cli()
