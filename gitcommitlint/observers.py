"""Observer pattern for lint runs."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape

from .models import Disposition
from .report import StatusReport


def _describe_commit(commit: Any) -> str:
    sha = getattr(commit, "sha", None)
    subject = commit.message.split("\n")[0]
    if sha:
        return f"{sha[:12]} {subject}"
    return subject


class LintObserver(ABC):
    """Abstract base class for lint run observers."""

    @abstractmethod
    def on_unknown_checks(self, check_ids: List[str]) -> None:
        """Called when the configuration names checks that don't exist."""
        pass

    @abstractmethod
    def on_violation(self, check_id: str, commit: Any, disposition: Disposition) -> None:
        """Called when a check fails for a commit."""
        pass

    @abstractmethod
    def on_noop(self) -> None:
        """Called when every check was disabled and nothing was evaluated."""
        pass

    @abstractmethod
    def on_check_completed(self, report: StatusReport) -> None:
        """Called when a lint run completes."""
        pass


class ConsoleLogObserver(LintObserver):
    """Observer that logs lint runs to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def on_unknown_checks(self, check_ids: List[str]) -> None:
        self.console.print(f"[yellow]Ignoring unknown checks: {', '.join(check_ids)}[/yellow]")

    def on_violation(self, check_id: str, commit: Any, disposition: Disposition) -> None:
        color = "red" if disposition == Disposition.ENFORCE else "yellow"
        self.console.print(
            f"[{color}]{check_id} failed for: {escape(_describe_commit(commit))}[/{color}]"
        )

    def on_noop(self) -> None:
        self.console.print("[yellow]All checks disabled, no commits evaluated[/yellow]")

    def on_check_completed(self, report: StatusReport) -> None:
        if report.passed:
            self.console.print(f"[green]Lint passed ({len(report.warnings)} warnings)[/green]")
        else:
            self.console.print(
                f"[red]Lint failed ({len(report.errors)} errors, {len(report.warnings)} warnings)[/red]"
            )


class FileLogObserver(LintObserver):
    """Observer that logs lint runs to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_unknown_checks(self, check_ids: List[str]) -> None:
        self._log(f"Ignoring unknown checks: {', '.join(check_ids)}")

    def on_violation(self, check_id: str, commit: Any, disposition: Disposition) -> None:
        self._log(f"{disposition.value}: {check_id} failed for: {_describe_commit(commit)}")

    def on_noop(self) -> None:
        self._log("All checks disabled, no commits evaluated")

    def on_check_completed(self, report: StatusReport) -> None:
        status = "passed" if report.passed else "failed"
        self._log(
            f"Lint {status}: {len(report.errors)} errors, "
            f"{len(report.warnings)} warnings, {len(report.messages)} messages"
        )
