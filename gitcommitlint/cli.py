#!/usr/bin/env python3
import json
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_CONFIG_FILENAME, Config
from .linter import CommitLinter
from .models import Commit
from .observers import ConsoleLogObserver, FileLogObserver
from .report import StatusReport

console = Console()

REPORT_SECTIONS = (
    ("errors", "Errors", "red"),
    ("warnings", "Warnings", "yellow"),
    ("messages", "Messages", "default"),
)


def collect_commits(files: Tuple[Path, ...], messages: Tuple[str, ...]) -> List[Commit]:
    """Build the commits to lint from message files, inline messages or stdin."""
    commits = [Commit(message=path.read_text(encoding="utf-8", errors="replace")) for path in files]
    commits.extend(Commit(message=message) for message in messages)

    if not commits:
        stdin = click.get_text_stream("stdin", encoding="utf-8", errors="replace")
        if stdin.isatty():
            raise click.UsageError("No commit messages given (pass files, -m or pipe to stdin)")
        commits.append(Commit(message=stdin.read()))

    return commits


def print_report(report: StatusReport, output: Console) -> None:
    """Print the report grouped by severity."""
    for category, title, style in REPORT_SECTIONS:
        entries = report[category]
        if not entries:
            continue
        output.print(f"\n[bold]{title}:[/bold]")
        for entry in entries:
            output.print(f"  [{style}]- {escape(entry)}[/{style}]")

    if not report.passed:
        output.print(f"\n[red]Commit lint failed with {len(report.errors)} error(s)[/red]")
    elif report.is_empty():
        output.print("[green]All commit messages look good[/green]")
    else:
        output.print("\n[green]Commit lint passed[/green]")


def print_config(config: Config, config_path: Path) -> None:
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<40} {'Source':<10}")
    console.print("-" * 70)

    def print_setting(name: str, value: object):
        console.print(f"{name:<20} {escape(str(value)):<40} {source:<10}")

    print_setting("disable", config.disable)
    print_setting("warn", config.warn)
    print_setting("max_subject_length", config.max_subject_length)
    print_setting("always_log", config.always_log)
    print_setting("log_file", config.log_file or "None")

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


@click.command()
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-m",
    "--message",
    "messages",
    multiple=True,
    help="Commit message to lint (repeatable)",
)
@click.option(
    "--disable",
    multiple=True,
    help="Check to skip: subject_length, subject_period, empty_line or 'all' (repeatable)",
)
@click.option(
    "--warn",
    multiple=True,
    help="Check to report as a warning instead of an error, or 'all' (repeatable)",
)
@click.option(
    "--max-subject-length",
    type=click.IntRange(min=1),
    help="Maximum subject line length (overrides config setting)",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Directory holding the config file (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log lint results (overrides config setting)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each violation to the console")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option("--version", is_flag=True, help="Show version information")
def main(
    files: Tuple[Path, ...],
    messages: Tuple[str, ...],
    disable: Tuple[str, ...],
    warn: Tuple[str, ...],
    max_subject_length: Optional[int],
    path: Path,
    log_file: Optional[Path],
    verbose: bool,
    as_json: bool,
    config_list: bool,
    version: bool,
):
    """
    Lint commit messages against common git style rules.

    Checks that the subject line is short, doesn't end with a period and
    is separated from the body by a blank line. Violations of enforced
    checks make the command exit with status 1.

    Configuration can be set in .gitcommitlint.toml in the repository root.
    Command line options override configuration file settings.
    """
    exit_code = 0
    try:
        if version:
            from .version import get_version_summary

            console.print(get_version_summary())
            return

        repo_path = path.absolute()
        config = Config.load(repo_path)

        # Command line options override config
        if disable:
            config.disable = ",".join(disable)
        if warn:
            config.warn = ",".join(warn)
        if max_subject_length is not None:
            config.max_subject_length = max_subject_length
        if log_file is not None:
            config.log_file = str(log_file)

        if config_list:
            print_config(config, repo_path / DEFAULT_CONFIG_FILENAME)
            return

        commits = collect_commits(files, messages)

        linter = CommitLinter(config)
        if verbose:
            linter.add_observer(ConsoleLogObserver())

        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            linter.add_observer(FileLogObserver(str(log_file_path)))

        report = linter.check(commits)

        if as_json:
            click.echo(json.dumps(report.to_dict(), indent=2))
        else:
            print_report(report, console)

        exit_code = 0 if report.passed else 1
    except click.UsageError:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        exit_code = 130
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
