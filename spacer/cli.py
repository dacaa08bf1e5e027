"""
Reports and fixes beginning-of-line tabs and spaces in a text file.
For C# sources, whitespace inside string literals is never modified.
"""

from __future__ import annotations

import logging

import click

from .config import ConfigError, build_config
from .engine import check_output_target, convert, parse_target, tally
from .exceptions import InputNotFoundError, InvalidConfigurationError, MalformedStringRegionError
from .filesystem import (
    collect_file_stat,
    enforce_file_size,
    get_max_file_size,
    normalize_filepath,
    normalize_output_path,
    safe_read,
    write_output,
)
from .models import WhitespaceKind
from .profiles import profile_for_path

__all__ = ["cli", "format_report"]

logger = logging.getLogger(__name__)


def format_report(
    input_path: str,
    profile_name: str,
    before: WhitespaceKind,
    output_path: str | None = None,
    after: WhitespaceKind | None = None,
) -> str:
    """Build the one-line summary printed for a file.

    Examples:
        format_report("a.cs", "c#", WhitespaceKind.MIXED, "a.cs", WhitespaceKind.TABS)
        # '"a.cs", c#, mixed -> "a.cs", tabs'
    """
    report = f'"{input_path}", {profile_name}, {before.value}'
    if output_path is not None and after is not None:
        report += f' -> "{output_path}", {after.value}'
    return report


@click.command()
@click.version_option()
@click.option(
    "-m",
    "--mode",
    help="The convert mode: spaces (s), tabs (t) or none. Default is to just report.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="Output file. Default is to overwrite the input file.",
)
@click.option("-t", "--tab-size", type=int, help="Tab size to assume. Default is 4.")
@click.option(
    "-r",
    "--round/--no-round",
    "round_down",
    default=None,
    help=(
        "When tabifying, round leading spaces down to a whole number of tabs. "
        "Defaults to the configured value."
    ),
)
@click.option("-v", "--verbose", is_flag=True, help="Log tallies and writes to stderr.")
@click.argument("inputfile", type=click.Path(dir_okay=False))
def cli(
    inputfile: str,
    mode: str | None = None,
    output: str | None = None,
    tab_size: int | None = None,
    round_down: bool | None = None,
    verbose: bool = False,
):
    """
    Report the indentation of INPUTFILE and optionally convert it.

    Args:
        inputfile: Path to the text file to analyze.
        mode: Conversion mode name; None or ``"none"`` only reports.
        output: Destination for the converted text; defaults to `inputfile`.
        tab_size: Override for the configured tab size.
        round_down: Drop leading spaces that do not fill a tab stop when tabifying;
            None keeps the configured value.
        verbose: Enable debug logging.

    Returns:
        None.

    Raises:
        click.BadParameter: If the mode, paths, or configuration are invalid.
        click.UsageError: If an output file is given without a conversion mode.
        click.ClickException: If the input is missing, unreadable, too large,
            contains an unterminated multi-line string, or cannot be written.

    Examples:
        spacer Program.cs --mode tabs --tab-size 4 --round
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )

    try:
        target = parse_target(mode)
    except InvalidConfigurationError as error:
        raise click.BadParameter(str(error), param_hint="'--mode'") from error

    try:
        check_output_target(target, output)
    except InvalidConfigurationError as error:
        raise click.UsageError(str(error)) from error

    try:
        filepath = normalize_filepath(inputfile)
    except InputNotFoundError as error:
        raise click.ClickException(str(error)) from error
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        output_path = filepath if output is None else normalize_output_path(output)
    except ValueError as error:
        raise click.BadParameter(str(error), param_hint="'--output'") from error

    try:
        config = build_config(
            filepath.parent,
            tab_size=tab_size,
            round_down=round_down,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        initial_stat = collect_file_stat(filepath)
        enforce_file_size(initial_stat, max_file_size, filepath)
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        raise click.ClickException(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except IOError as error:
        raise click.ClickException(str(error)) from error

    profile = profile_for_path(filepath, config.string_aware_extensions)
    logger.debug("Using profile %s for %s", profile.name, filepath)

    if target is None:
        try:
            before = tally(content, profile)
        except MalformedStringRegionError as error:
            raise click.ClickException(f"{filepath}: {error}") from error
        click.echo(format_report(inputfile, profile.name, before.kind))
        return

    try:
        result = convert(content, target, config.tab_size, config.round_down, profile)
    except MalformedStringRegionError as error:
        raise click.ClickException(f"{filepath}: {error}") from error

    if output_path == filepath and result.content == content:
        logger.debug("%s is unchanged; not rewriting", filepath)
    else:
        try:
            write_output(
                output_path,
                result.content,
                expected_stat=initial_stat if output_path == filepath else None,
                template_stat=initial_stat,
                warn=lambda message: click.echo(message, err=True),
            )
        except IOError as error:
            raise click.ClickException(str(error)) from error

    click.echo(
        format_report(
            inputfile,
            profile.name,
            result.before_kind,
            inputfile if output is None else output,
            result.after_kind,
        )
    )


if __name__ == "__main__":
    cli()
