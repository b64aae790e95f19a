from classlint.rules.linter import LintError, RuleFunc, lint, lint_class_list, lint_or_raise
from classlint.rules.rules import (
    ALL_RULES,
    check_duplicate_classes,
    check_sort_order,
    check_unknown_classes,
    render_class_list,
)

__all__ = [
    "ALL_RULES",
    "LintError",
    "RuleFunc",
    "check_duplicate_classes",
    "check_sort_order",
    "check_unknown_classes",
    "lint",
    "lint_class_list",
    "lint_or_raise",
    "render_class_list",
]
