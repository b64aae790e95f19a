"""Class-list parsing: tokens, variant prefixes and duplicate signatures.

A class such as ``focus:hover:p-4`` is a chain of ``:``-separated segments.
The last segment is the utility (``p-4``); everything before it is the
variant prefix (``focus:hover``).
"""

from __future__ import annotations

import re

__all__ = [
    "tokenize",
    "parse_utility",
    "parse_prefix",
    "property_names",
    "nested_selectors",
    "signature",
]

# A declared property: `padding:`, `--tw-ring-color:`.
_PROPERTY_RE = re.compile(r"(?<![\\\w-])([\w-]+):(?!:)")

# A line that only opens a nested pseudo-selector block: `&:hover {`.
_NESTED_SELECTOR_RE = re.compile(r"^[ \t]*&?(:[^{\n]+?)[ \t]*\{[ \t]*$", re.MULTILINE)

# Everything that opens a block: selectors, `&:hover {`, `@media (...) {`.
_PRELUDE_RE = re.compile(r"[^{};]*\{")


def tokenize(text: str) -> list[str]:
    """Split a class list on runs of whitespace, dropping empty pieces."""
    return text.split()


def parse_utility(class_name: str) -> str:
    """``focus:hover:p-4`` -> ``p-4``"""
    return class_name.split(":")[-1]


def parse_prefix(class_name: str) -> str:
    """``focus:hover:p-4`` -> ``focus:hover``; empty when there is no variant."""
    return ":".join(class_name.split(":")[:-1])


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def property_names(declaration: str) -> list[str]:
    """Property names declared in *declaration*, in order of first appearance."""
    return _unique(_PROPERTY_RE.findall(_strip_preludes(declaration)))


def nested_selectors(declaration: str) -> list[str]:
    """Pseudo-selector blocks nested in *declaration*, in order of appearance."""
    return [match.group(1) for match in _NESTED_SELECTOR_RE.finditer(declaration)]


def _strip_preludes(declaration: str) -> str:
    return _PRELUDE_RE.sub("", declaration)


def signature(class_name: str, declaration: str | None) -> str:
    """Key under which two classes style the same thing.

    Joins the variant prefix, the nested selectors and the declared property
    names, skipping empty parts.  A class that declares nothing under a
    prefix gets the bare prefix as its signature.
    """
    parts = [parse_prefix(class_name)]
    if declaration:
        parts.append(" ".join(nested_selectors(declaration)))
        parts.append(" ".join(property_names(declaration)))
    return " ".join(part for part in parts if part)
