"""Lint engine for commit messages."""
from typing import Any, Iterable, List, Optional

from .checks import CheckRegistry, create_registry
from .config import Config
from .models import CheckSelector, Commit, Disposition
from .observers import LintObserver
from .report import StatusReport
from .resolver import resolve_dispositions, unknown_checks

NOOP_MESSAGE = "All checks were disabled, nothing to do."


class CommitLinter:
    """Runs the registered checks against commits and collects a status report.

    The report is reset on every call to ``check``; the object returned is
    the same one exposed as ``status_report``.
    """

    def __init__(self, config: Optional[Config] = None, registry: Optional[CheckRegistry] = None):
        self.config = config or Config()
        self.registry = registry or create_registry(self.config.max_subject_length)
        self.status_report = StatusReport()
        self.observers: List[LintObserver] = []

    def add_observer(self, observer: LintObserver) -> None:
        """Add an observer to be notified of lint runs."""
        self.observers.append(observer)

    def remove_observer(self, observer: LintObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def check(
        self,
        commits: Iterable[Any],
        disable: Any = None,
        warn: Any = None,
    ) -> StatusReport:
        """Lint commits and return the status report.

        Args:
            commits: Commits to lint, in order. Anything with a ``message``
                attribute works; plain strings are wrapped in ``Commit``, and a
                single string is linted as one commit.
            disable: Checks to skip, ``"all"`` or identifiers. Defaults to
                the configured selector.
            warn: Checks to report as warnings. Defaults to the configured
                selector.

        Returns:
            StatusReport: errors, warnings and messages for this run
        """
        self.status_report.reset()

        disable_selector = self.config.disable if disable is None else CheckSelector.parse(disable)
        warn_selector = self.config.warn if warn is None else CheckSelector.parse(warn)

        unknown = unknown_checks(self.registry, disable_selector, warn_selector)
        if unknown:
            for observer in self.observers:
                observer.on_unknown_checks(unknown)

        dispositions = resolve_dispositions(self.registry, disable_selector, warn_selector)

        if all(disposition == Disposition.SKIP for disposition in dispositions.values()):
            self.status_report.warn(NOOP_MESSAGE)
            for observer in self.observers:
                observer.on_noop()
                observer.on_check_completed(self.status_report)
            return self.status_report

        if isinstance(commits, str):
            commits = [commits]
        commits = [Commit(message=c) if isinstance(c, str) else c for c in commits]

        for check in self.registry:
            disposition = dispositions[check.identifier]
            if disposition == Disposition.SKIP:
                continue

            for commit in commits:
                if check.evaluate(commit.message):
                    continue

                if disposition == Disposition.ENFORCE:
                    self.status_report.error(check.violation_message)
                else:
                    self.status_report.warn(check.violation_message)

                for observer in self.observers:
                    observer.on_violation(check.identifier, commit, disposition)

        for observer in self.observers:
            observer.on_check_completed(self.status_report)

        return self.status_report
