"""Linter: runs every rule over every class list in a source file."""

from __future__ import annotations

import logging
from typing import Callable

from classlint.model.diagnostic import Diagnostic
from classlint.model.settings import Settings
from classlint.rules.rules import ALL_RULES
from classlint.source.locate import ClassList, find_class_lists

log = logging.getLogger("classlint")


class LintError(Exception):
    """Raised when linting produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Lint failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[ClassList, Settings], list[Diagnostic]]


def lint_class_list(
    class_list: ClassList, settings: Settings, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all rules against a single class list."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(class_list, settings))
    return diagnostics


def lint(
    source: str, settings: Settings, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Lint every class list found in *source*.

    Returns the full list of diagnostics (errors, warnings, info) ordered by
    position.
    """
    class_lists = find_class_lists(source, settings.attributes, settings.callees)
    log.debug("Found %d class list(s)", len(class_lists))
    diagnostics: list[Diagnostic] = []
    for class_list in class_lists:
        diagnostics.extend(lint_class_list(class_list, settings, extra_rules))
    diagnostics.sort(key=lambda d: (d.line, d.column))
    return diagnostics


def lint_or_raise(
    source: str, settings: Settings, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run the linter; raises :class:`LintError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = lint(source, settings, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise LintError(errors)
    return diagnostics
