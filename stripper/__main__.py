import os
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from stripper.config import ErrorPolicy, SelectionConfig
from stripper.constants import DEFAULT_ROOT, ENV_PREFIX, PROG_NAME, USAGE
from stripper.errors import StripperError
from stripper.logging import setup_logging
from stripper.rules import compile_rules, read_rules_file
from stripper.selection import SelectedEntry, SelectionReport, select_tree
from stripper.tui import SelectionConsoleUI


ERROR_POLICY_VALUES = [policy.value for policy in ErrorPolicy]


def _format_entry(entry: SelectedEntry, rules_file: Path, explain: bool) -> bytes:
    path = os.fsencode(entry.path)
    if not explain:
        return path
    source = os.fsencode(f"{rules_file}:{entry.rule.describe()}")
    return source + b"\t" + path


@click.command(
    name=PROG_NAME,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "auto_envvar_prefix": ENV_PREFIX,
    },
)
@click.argument("rules_file", required=False, type=click.Path(path_type=Path))
@click.option(
    "--root",
    default=DEFAULT_ROOT,
    show_default=True,
    help="Directory to walk; printed paths keep this prefix.",
)
@click.option(
    "--prune/--no-prune",
    default=False,
    help="Do not descend into directories that are already selected.",
)
@click.option(
    "--on-error",
    type=click.Choice(ERROR_POLICY_VALUES, case_sensitive=False),
    default=ErrorPolicy.ABORT.value,
    show_default=True,
    help="Stop at the first unreadable entry, or report them all at the end.",
)
@click.option("--ignore-case", is_flag=True, help="Match patterns case-insensitively.")
@click.option("-0", "--print0", is_flag=True, help="Terminate paths with NUL instead of newline.")
@click.option("--explain", is_flag=True, help="Prefix each path with the rule that selected it.")
@click.option("-v", "--verbose", is_flag=True, help="Log matching decisions to stderr.")
def cli(
    rules_file: Optional[Path],
    root: str,
    prune: bool,
    on_error: str,
    ignore_case: bool,
    print0: bool,
    explain: bool,
    verbose: bool,
) -> None:
    """Print every entry under ROOT that RULES_FILE would ignore."""
    if rules_file is None:
        click.echo(USAGE, err=True)
        raise click.exceptions.Exit(1)

    setup_logging(verbose)
    ui = SelectionConsoleUI(Console(stderr=True))
    config = SelectionConfig(
        root=root,
        prune=prune,
        on_error=ErrorPolicy(on_error.lower()),
        case_insensitive=ignore_case,
    )

    try:
        lines = read_rules_file(rules_file)
    except StripperError as exc:
        raise click.ClickException(str(exc))
    ruleset = compile_rules(lines, case_insensitive=config.case_insensitive)

    terminator = b"\0" if print0 else b"\n"
    report = SelectionReport()
    try:
        for entry in select_tree(ruleset, config, report):
            click.echo(_format_entry(entry, rules_file, explain) + terminator, nl=False)
    except StripperError as exc:
        ui.render_fatal(exc)
        raise click.exceptions.Exit(1)

    if verbose:
        ui.render_summary(report, config.root)
    if report.errors:
        ui.render_errors(list(report.errors))
        raise click.exceptions.Exit(1)


def main() -> int:
    # without standalone mode click returns the Exit code instead of raising it
    try:
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
