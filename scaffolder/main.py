"""
Scaffolder — CLI entrypoint.

Usage:
    python -m scaffolder.main --help
    python -m scaffolder.main create app/relations/books.rb --content "..."
    python -m scaffolder.main apply manifest.yml --within slices/main
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from scaffolder import __version__
from scaffolder.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="scaffolder")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to scaffold.yml (default: auto-detect).",
)
@click.option(
    "--root",
    "root",
    type=click.Path(file_okay=False),
    default=None,
    help="Project root (default: directory of scaffold.yml, else cwd).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    root: str | None,
) -> None:
    """Scaffolder — write generated files into a project tree."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["root"] = Path(root) if root else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("SCAFFOLD_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("SCAFFOLD_LOG_FILE"),
        log_file_level=os.environ.get("SCAFFOLD_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


def _build_writer(ctx: click.Context):
    """Resolve config and project root, and build a disk-backed writer."""
    from scaffolder.adapters.shell.filesystem import DiskFileSystem
    from scaffolder.core.config.loader import (
        ConfigError,
        find_config_file,
        load_config,
        project_root,
    )
    from scaffolder.core.files import ScaffoldFileWriter
    from scaffolder.core.models.config import ScaffoldConfig

    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is None:
        config_path = find_config_file(ctx.obj.get("root"))

    try:
        config = load_config(config_path) if config_path else ScaffoldConfig()
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    root: Path | None = ctx.obj.get("root")
    if root is None:
        root = project_root(config_path) if config_path else Path.cwd()

    fs = DiskFileSystem(root, encoding=config.encoding)
    return ScaffoldFileWriter(fs=fs, keep_file=config.keep_file)


def _collect_content(content: tuple[str, ...], from_file: str | None) -> list[str]:
    fragments = list(content)
    if from_file:
        fragments.append(Path(from_file).read_text(encoding="utf-8"))
    return fragments


def _content_options(fn):
    fn = click.option(
        "--from-file",
        "from_file",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="Append the content of this file.",
    )(fn)
    fn = click.option(
        "--content",
        "content",
        multiple=True,
        help="Content fragment (repeatable, concatenated in order).",
    )(fn)
    return fn


# ── Files ───────────────────────────────────────────────────────


@cli.command()
@click.argument("path")
@_content_options
@click.pass_context
def create(ctx: click.Context, path: str, content: tuple[str, ...], from_file: str | None) -> None:
    """Create PATH, asking before overwriting an existing file."""
    from scaffolder.core.files import FileAlreadyExistsError

    writer = _build_writer(ctx)
    try:
        writer.create(path, *_collect_content(content, from_file))
    except FileAlreadyExistsError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("path")
@_content_options
@click.pass_context
def write(ctx: click.Context, path: str, content: tuple[str, ...], from_file: str | None) -> None:
    """Write PATH, overwriting without asking."""
    writer = _build_writer(ctx)
    writer.write(path, *_collect_content(content, from_file))


@cli.command()
@click.argument("path")
@click.pass_context
def mkdir(ctx: click.Context, path: str) -> None:
    """Create directory PATH (no output if it already exists)."""
    writer = _build_writer(ctx)
    writer.mkdir(path)


@cli.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@click.option("--within", "within", default=None, help="Directory to write the files into.")
@click.pass_context
def apply(ctx: click.Context, manifest: str, within: str | None) -> None:
    """Write every file listed in a YAML MANIFEST."""
    from scaffolder.core.config.loader import ConfigError, load_manifest
    from scaffolder.core.files import FileAlreadyExistsError

    try:
        files = load_manifest(Path(manifest))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    writer = _build_writer(ctx)
    try:
        if within:
            writer.mkdir(within)
            with writer.chdir(within):
                writer.apply(files)
        else:
            writer.apply(files)
    except FileAlreadyExistsError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
