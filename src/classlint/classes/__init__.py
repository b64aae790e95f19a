from classlint.classes.detect import STRUCTURAL_CLASSES, Duplicate, find_duplicates, find_unknowns, is_structural
from classlint.classes.format import format_classes, group_classes, pack_lines, render
from classlint.classes.order import rank_key, sort_classes
from classlint.classes.parse import (
    nested_selectors,
    parse_prefix,
    parse_utility,
    property_names,
    signature,
    tokenize,
)

__all__ = [
    "tokenize",
    "parse_utility",
    "parse_prefix",
    "property_names",
    "nested_selectors",
    "signature",
    "STRUCTURAL_CLASSES",
    "Duplicate",
    "find_duplicates",
    "find_unknowns",
    "is_structural",
    "rank_key",
    "sort_classes",
    "group_classes",
    "pack_lines",
    "render",
    "format_classes",
]
