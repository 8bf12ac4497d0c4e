"""CLI adapter for ``field_composer`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the combinators on the command line so separators, list rendering and
string utilities can be tried without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling and settings loading.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_compose` / :func:`cli_merge` – join values.
* :func:`cli_list` / :func:`cli_count` – render or count list items.
* :func:`cli_str` / :func:`cli_tag` – string utilities and tag wrapping.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It builds a
:class:`~field_composer.core.FieldComposer` from
:func:`~field_composer.core.read_settings` and never reaches into the
application layer directly. ``lib_cli_exit_tools`` centralises the exit code
strategy.
"""

from __future__ import annotations

import sys
import uuid
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import FieldComposer, read_settings
from .domain.field import Field
from .observability import trace_scope

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version("field-composer")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Compose field values without stray separators",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="field_composer",
    message="field_composer version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False, readable=True),
    default=None,
    help="Settings file (.toml, .json, .yaml) overriding the default separators",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, config_path: Optional[Path]) -> None:
    """Root command storing the traceback preference and the configured composer.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``; binds a fresh trace
        identifier until the command finishes.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    ctx.with_resource(trace_scope(uuid.uuid4().hex[:12]))
    ctx.obj["composer"] = FieldComposer(read_settings(config_path))


def _composer(ctx: click.Context) -> FieldComposer:
    return ctx.obj["composer"]


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("field-composer")
    except metadata.PackageNotFoundError:
        click.echo("field_composer (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'field-composer')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("compose", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("values", nargs=-1)
@click.option("--separator", "-s", default=None, help="Separator placed between non-empty values")
@click.pass_context
def cli_compose(ctx: click.Context, values: Sequence[str], separator: Optional[str]) -> None:
    """Join VALUES, skipping empty ones.

    Without ``--separator`` a trailing value among several is the separator.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["compose", "Jil Nash", "", "2014", "--separator", " / "])
    >>> result.output
    'Jil Nash / 2014\\n'
    """

    click.echo(_composer(ctx).compose(*values, separator=separator).value)


@cli.command("merge", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("subject")
@click.argument("values", nargs=-1)
@click.option("--separator", "-s", default=None, help="Separator placed between non-empty values")
@click.option("--position", "-p", type=int, default=None, help="Index of SUBJECT in the result (negative counts from the end)")
@click.option("--exclude", is_flag=True, default=False, help="Leave SUBJECT out of the result")
@click.pass_context
def cli_merge(
    ctx: click.Context,
    subject: str,
    values: Sequence[str],
    separator: Optional[str],
    position: Optional[int],
    exclude: bool,
) -> None:
    """Merge SUBJECT with VALUES."""

    result = _composer(ctx).merge(
        Field(subject),
        *values,
        separator=separator,
        position=position,
        include=False if exclude else None,
    )
    click.echo(result.value)


@cli.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
@click.option("--split", default=None, help="Separator the stored VALUE is split on (default: comma)")
@click.option("--join", default=None, help="Separator placed between rendered items")
@click.option("--conjunction", default=None, help="Word placed before the last item, e.g. 'and'")
@click.option("--serial/--no-serial", default=False, help="Add a serial (Oxford) comma before the conjunction")
@click.pass_context
def cli_list(
    ctx: click.Context,
    value: str,
    split: Optional[str],
    join: Optional[str],
    conjunction: Optional[str],
    serial: bool,
) -> None:
    """Render VALUE as a list sentence."""

    result = _composer(ctx).to_list(Field(value), split=split, join=join, conjunction=conjunction, serial=serial)
    click.echo(result.value)


@cli.command("count", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
@click.option("--split", default=None, help="Separator the stored VALUE is split on (default: comma)")
@click.pass_context
def cli_count(ctx: click.Context, value: str, split: Optional[str]) -> None:
    """Print the number of list items in VALUE."""

    click.echo(_composer(ctx).count(Field(value), split=split).value)


@cli.command("str", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
@click.argument("method")
@click.argument("args", nargs=-1)
@click.pass_context
def cli_str(ctx: click.Context, value: str, method: str, args: Sequence[str]) -> None:
    """Apply the string utility METHOD (with ARGS) to VALUE."""

    click.echo(_composer(ctx).str(Field(value), method, *args).value)


@cli.command("tag", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
@click.argument("name")
@click.option("--attr", "attrs", multiple=True, help="Attribute as key=value (repeatable)")
@click.option("--encode/--no-encode", default=True, help="Escape VALUE before wrapping it")
@click.pass_context
def cli_tag(ctx: click.Context, value: str, name: str, attrs: Sequence[str], encode: bool) -> None:
    """Wrap VALUE in the tag NAME."""

    result = _composer(ctx).tag(Field(value), name, _parse_attrs(attrs), encode=encode)
    click.echo(result.value)


def _parse_attrs(values: Sequence[str]) -> dict[str, object]:
    """Turn ``key=value`` pairs into a mapping; a bare ``key`` becomes ``True``.

    Examples
    --------
    >>> _parse_attrs(["class=title", "hidden"])
    {'class': 'title', 'hidden': True}
    """

    parsed: dict[str, object] = {}
    for entry in values:
        key, sep, raw = entry.partition("=")
        if not key:
            raise click.BadParameter(f"Invalid attribute: {entry!r}", param_hint="--attr")
        parsed[key] = raw if sep else True
    return parsed


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="field_composer",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
