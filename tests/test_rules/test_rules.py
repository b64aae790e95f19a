"""Tests for the lint rules and the linter."""

import pytest

from classlint.model.diagnostic import Diagnostic, Severity
from classlint.model.settings import Settings
from classlint.rules import (
    ALL_RULES,
    LintError,
    check_duplicate_classes,
    check_sort_order,
    check_unknown_classes,
    lint,
    lint_class_list,
    lint_or_raise,
    render_class_list,
)
from classlint.source import apply_fixes, find_class_lists


def _only(source):
    [class_list] = find_class_lists(source)
    return class_list


# ---------------------------------------------------------------------------
# check_duplicate_classes
# ---------------------------------------------------------------------------


class TestCheckDuplicateClasses:
    def test_later_occurrence_located(self, settings):
        diags = check_duplicate_classes(_only("<div className={`p-4 m-2 p-4`} />"), settings)
        assert len(diags) == 1
        diag = diags[0]
        assert diag.rule == "no-duplicate-classes"
        assert diag.severity is Severity.ERROR
        assert (diag.token, diag.first) == ("p-4", "p-4")
        assert (diag.line, diag.column) == (1, 25)

    def test_conflicting_value_message(self, settings):
        [diag] = check_duplicate_classes(_only("cn(`p-4 p-2`)"), settings)
        assert "'p-2'" in diag.message
        assert "'p-4'" in diag.message
        assert (diag.line, diag.column) == (1, 8)

    def test_multi_line_location(self, settings):
        source = "<div\n  className={`\n    flex m-2\n    block\n  `}\n/>"
        [diag] = check_duplicate_classes(_only(source), settings)
        assert diag.token == "block"
        assert (diag.line, diag.column) == (4, 4)

    def test_clean(self, settings):
        assert check_duplicate_classes(_only("cn(`flex p-4 m-2`)"), settings) == []

    def test_empty_list(self, settings, framework):
        assert check_duplicate_classes(_only("cn(`   `)"), settings) == []
        assert framework.css_calls == 0


# ---------------------------------------------------------------------------
# check_unknown_classes
# ---------------------------------------------------------------------------


class TestCheckUnknownClasses:
    def test_unknown_located(self, settings):
        [diag] = check_unknown_classes(_only("<div className={`bogus p-4 group`} />"), settings)
        assert diag.rule == "no-unknown-classes"
        assert diag.token == "bogus"
        assert (diag.line, diag.column) == (1, 17)

    def test_repeated_unknown_reported_once_at_first(self, settings):
        diags = check_unknown_classes(_only("cn(`p-4 zz m-2 zz`)"), settings)
        assert [(d.token, d.column) for d in diags] == [("zz", 8)]

    def test_structural_allowed(self, settings):
        assert check_unknown_classes(_only("cn(`group peer/a md:group`)"), settings) == []


# ---------------------------------------------------------------------------
# check_sort_order
# ---------------------------------------------------------------------------


class TestCheckSortOrder:
    def test_unsorted_single_line(self, settings):
        source = "<div className={`p-4 flex`} />"
        [diag] = check_sort_order(_only(source), settings)
        assert diag.rule == "enforce-sort-order"
        assert diag.severity is Severity.WARNING
        assert (diag.line, diag.column) == (1, 16)
        assert diag.fix.text == "`flex p-4`"
        assert apply_fixes(source, [diag]) == "<div className={`flex p-4`} />"

    def test_canonical_is_clean(self, settings):
        assert check_sort_order(_only("cn(`flex m-2 p-4`)"), settings) == []

    def test_extra_whitespace_is_reported(self, settings):
        [diag] = check_sort_order(_only("cn(` flex  p-4`)"), settings)
        assert diag.fix.text == "`flex p-4`"

    def test_variant_groups_render_multi_line(self, settings):
        source = "  <div className={`hover:p-4 flex`} />"
        [diag] = check_sort_order(_only(source), settings)
        assert diag.fix.text == "`\n    flex\n\n    hover:p-4\n  `"

    def test_wraps_to_print_width(self, framework):
        settings = Settings(
            candidates_to_css=framework.candidates_to_css,
            get_class_order=framework.get_class_order,
            print_width=20,
        )
        [diag] = check_sort_order(_only("x = cn(`dddd cccc bbbb aaaa`)"), settings)
        assert diag.fix.text == "`\n  aaaa bbbb cccc\n  dddd\n`"

    def test_fixed_output_is_stable(self, settings):
        source = "  <div className={`hover:p-4 bogus p-4 flex focus:p-4 m-2`} />"
        fixed = apply_fixes(source, check_sort_order(_only(source), settings))
        assert fixed != source
        assert check_sort_order(_only(fixed), settings) == []

    def test_render_class_list_width_accounts_for_indent(self, framework):
        settings = Settings(
            candidates_to_css=framework.candidates_to_css,
            get_class_order=framework.get_class_order,
            print_width=18,
            extra_indentation=2,
        )
        class_list = _only("    cn(`aaaa bbbb cccc`)")
        assert render_class_list(class_list, settings) == "\n      aaaa bbbb\n      cccc\n    "


# ---------------------------------------------------------------------------
# Linter
# ---------------------------------------------------------------------------

SOURCE = (
    "export function Button() {\n"
    "  return (\n"
    "    <button className={`p-4 flex p-2 bogus`}>\n"
    "      <span className={cn(`m-2`)} />\n"
    "    </button>\n"
    "  );\n"
    "}\n"
)


class TestLint:
    def test_all_rules_registered(self):
        assert ALL_RULES == [check_duplicate_classes, check_unknown_classes, check_sort_order]

    def test_diagnostics_ordered_by_position(self, settings):
        diags = lint(SOURCE, settings)
        assert [d.rule for d in diags] == [
            "enforce-sort-order",
            "no-duplicate-classes",
            "no-unknown-classes",
        ]
        assert [(d.line, d.column) for d in diags] == [(3, 23), (3, 33), (3, 37)]

    def test_clean_source(self, settings):
        assert lint("<div className={`flex p-4`} />", settings) == []

    def test_no_class_lists(self, settings):
        assert lint("const x = 1;\n", settings) == []

    def test_commented_out_markup_untouched(self, settings):
        source = "/* <div className={`p-4 p-2`} /> */\n// cn(`bogus`)\n"
        diags = lint(source, settings)
        assert diags == []
        assert apply_fixes(source, diags) == source

    def test_extra_rules(self, settings):
        def check_length(class_list, settings):
            return [
                Diagnostic(
                    rule="max-length",
                    severity=Severity.INFO,
                    message="long",
                    line=class_list.line,
                    column=class_list.column,
                )
            ]

        [class_list] = find_class_lists("cn(`flex`)")
        diags = lint_class_list(class_list, settings, extra_rules=[check_length])
        assert [d.rule for d in diags] == ["max-length"]

    def test_uses_settings_attributes(self, framework):
        settings = Settings(
            candidates_to_css=framework.candidates_to_css,
            get_class_order=framework.get_class_order,
            attributes=("tw",),
            callees=(),
        )
        assert lint("<div className={`bogus`} />", settings) == []
        assert [d.token for d in lint("<div tw={`bogus`} />", settings)] == ["bogus"]


class TestLintOrRaise:
    def test_raises_on_errors(self, settings):
        with pytest.raises(LintError) as exc_info:
            lint_or_raise(SOURCE, settings)
        assert len(exc_info.value.diagnostics) == 2
        assert "2 error(s)" in str(exc_info.value)

    def test_returns_warnings(self, settings):
        diags = lint_or_raise("cn(`p-4 flex`)", settings)
        assert [d.rule for d in diags] == ["enforce-sort-order"]
