"""Command-line interface for the case conversion tool."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .constants import (
    CONTEXT_SETTINGS,
    DEFAULT_EXTENSIONS_PATH,
    EXIT_USAGE,
    PROG_NAME,
    VERSION_FLAGS,
)
from .core import CaseConversionRequest, LetterCase, RamUtilsError, display_path
from .extensions import find_unique_extensions
from .renamer import convert_path

console = Console()


def version_option(func):
    """Attach the shared -V/--version flag."""
    return click.version_option(__version__, *VERSION_FLAGS, prog_name=PROG_NAME)(
        func
    )


def conversion_options(func):
    """Arguments shared by the upper and lower commands."""
    decorators = [
        click.argument("path", type=click.Path(path_type=Path)),
        click.option(
            "-r", "recursive", is_flag=True, help="Convert directories recursively"
        ),
        click.option(
            "--ignore-files", is_flag=True, help="Ignore files during conversion"
        ),
        click.option(
            "--ignore-dirs", is_flag=True, help="Ignore directories during conversion"
        ),
        version_option,
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def run_conversion(
    path: Path,
    case: LetterCase,
    recursive: bool,
    ignore_files: bool,
    ignore_dirs: bool,
) -> None:
    """Build the request, run the walk and report the outcome."""
    request = CaseConversionRequest(
        target_path=path,
        direction=case,
        recursive=recursive,
        ignore_dirs=ignore_dirs,
        ignore_files=ignore_files,
    )

    try:
        summary = convert_path(request, console=console)
    except RamUtilsError as e:
        raise click.ClickException(str(e)) from e

    console.print(
        f"[green]✓ Converted {summary.count} item(s) to {case.value} case: "
        f"{escape(display_path(path))}[/green]",
        highlight=False,
        soft_wrap=True,
    )


@click.group(
    name=PROG_NAME, context_settings=CONTEXT_SETTINGS, invoke_without_command=True
)
@version_option
@click.pass_context
def main(ctx):
    """Simple utilities."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(EXIT_USAGE)


@main.command(context_settings=CONTEXT_SETTINGS)
@conversion_options
def upper(path, recursive, ignore_files, ignore_dirs):
    """Convert files and/or directories to upper case."""
    run_conversion(path, LetterCase.UPPER, recursive, ignore_files, ignore_dirs)


@main.command(context_settings=CONTEXT_SETTINGS)
@conversion_options
def lower(path, recursive, ignore_files, ignore_dirs):
    """Convert files and/or directories to lower case."""
    run_conversion(path, LetterCase.LOWER, recursive, ignore_files, ignore_dirs)


@main.command(name="unique_ext", context_settings=CONTEXT_SETTINGS)
@click.argument(
    "path", required=False, default=DEFAULT_EXTENSIONS_PATH, type=click.Path()
)
@version_option
def unique_ext(path):
    """Find all unique extensions in this directory."""
    try:
        extensions = find_unique_extensions(Path(path))
    except RamUtilsError as e:
        raise click.ClickException(str(e)) from e

    for ext in sorted(extensions):
        console.print(
            f"{escape(display_path(ext))} ({extensions[ext]} files)",
            highlight=False,
            soft_wrap=True,
        )


@main.command(name="help", context_settings=CONTEXT_SETTINGS)
@click.argument("command", required=False)
@click.pass_context
def help_command(ctx, command):
    """Print this message or the help of the given subcommand."""
    parent = ctx.parent
    if command is None:
        click.echo(parent.get_help())
        return

    subcommand = main.get_command(parent, command)
    if subcommand is None:
        raise click.UsageError(f"No such command '{command}'.", ctx)

    with click.Context(subcommand, info_name=command, parent=parent) as sub_ctx:
        click.echo(subcommand.get_help(sub_ctx))
