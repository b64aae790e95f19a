"""Lint rules for class lists.

Each rule is a function taking a ClassList and Settings and returning a list
of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from classlint.classes.detect import find_duplicates, find_unknowns
from classlint.classes.format import format_classes
from classlint.classes.parse import tokenize
from classlint.model.diagnostic import Diagnostic, Replacement, Severity
from classlint.model.settings import Settings
from classlint.source.locate import ClassList, locate, token_positions


# ---------------------------------------------------------------------------
# Class content rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_duplicate_classes(class_list: ClassList, settings: Settings) -> list[Diagnostic]:
    """A class must not restyle what an earlier class in the list styles."""
    tokens = tokenize(class_list.text)
    if not tokens:
        return []
    positions = token_positions(class_list.text)
    diagnostics: list[Diagnostic] = []
    for dup in find_duplicates(tokens, settings.candidates_to_css):
        line, column = locate(class_list, *positions[dup.index])
        diagnostics.append(
            Diagnostic(
                rule="no-duplicate-classes",
                severity=Severity.ERROR,
                message=f"Class '{dup.token}' styles the same properties as '{dup.first}'.",
                line=line,
                column=column,
                token=dup.token,
                first=dup.first,
            )
        )
    return diagnostics


def check_unknown_classes(class_list: ClassList, settings: Settings) -> list[Diagnostic]:
    """Every class must resolve to a known utility."""
    tokens = tokenize(class_list.text)
    if not tokens:
        return []
    positions = token_positions(class_list.text)
    diagnostics: list[Diagnostic] = []
    for token in find_unknowns(tokens, settings.candidates_to_css):
        line, column = locate(class_list, *positions[tokens.index(token)])
        diagnostics.append(
            Diagnostic(
                rule="no-unknown-classes",
                severity=Severity.ERROR,
                message=f"Unknown class '{token}'.",
                line=line,
                column=column,
                token=token,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Formatting rules (WARNING severity)
# ---------------------------------------------------------------------------


def render_class_list(class_list: ClassList, settings: Settings) -> str:
    """Canonical text for *class_list* under *settings*."""
    # The packed lines must fit after the indentation they are printed with.
    width = max(
        settings.print_width - len(class_list.indent) - settings.extra_indentation, 1
    )
    return format_classes(
        class_list.text,
        settings.get_class_order,
        indent=class_list.indent,
        width=width,
        extra_indentation=settings.extra_indentation,
    )


def check_sort_order(class_list: ClassList, settings: Settings) -> list[Diagnostic]:
    """Classes must be sorted, grouped by variant and wrapped to the print width."""
    rendered = render_class_list(class_list, settings)
    if rendered == class_list.text:
        return []
    return [
        Diagnostic(
            rule="enforce-sort-order",
            severity=Severity.WARNING,
            message="Classes are not in canonical order.",
            line=class_list.line,
            column=class_list.column - 1,
            fix=Replacement(
                start=class_list.start,
                end=class_list.end,
                text=f"`{rendered}`",
            ),
        )
    ]


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_duplicate_classes,
    check_unknown_classes,
    check_sort_order,
]
