"""Canonical rendering of a class list.

Sorted classes are split into runs sharing a variant prefix, each run is
wrapped greedily to the available width, and runs are separated by a blank
line::

    className={`
      flex items-center p-4

      hover:bg-gray-100 hover:text-black
    `}
"""

from __future__ import annotations

from collections.abc import Sequence

from classlint.classes.order import sort_classes
from classlint.classes.parse import parse_prefix, tokenize
from classlint.model.settings import RankResolver

__all__ = ["group_classes", "pack_lines", "render", "format_classes"]


def group_classes(tokens: Sequence[str]) -> list[list[str]]:
    """Split *tokens* into maximal contiguous runs with the same variant prefix."""
    groups: list[list[str]] = []
    previous: str | None = None
    for token in tokens:
        prefix = parse_prefix(token)
        if groups and prefix == previous:
            groups[-1].append(token)
        else:
            groups.append([token])
        previous = prefix
    return groups


def pack_lines(group: Sequence[str], width: int) -> list[list[str]]:
    """Greedily fill lines of at most *width* characters.

    A line always takes its first token, even one wider than *width*.
    """
    lines: list[list[str]] = []
    current: list[str] = []
    current_width = 0
    for token in group:
        if current and current_width + 1 + len(token) > width:
            lines.append(current)
            current = []
        if current:
            current_width += 1 + len(token)
        else:
            current_width = len(token)
        current.append(token)
    if current:
        lines.append(current)
    return lines


def render(
    groups: Sequence[Sequence[str]],
    indent: str = "",
    width: int = 80,
    extra_indentation: int = 2,
) -> str:
    """Render grouped classes as the text between the literal's delimiters.

    *indent* is the indentation of the source line holding the literal.
    Class lines are indented *extra_indentation* further.  Output that fits
    on a single line is returned bare; otherwise it starts with a newline and
    ends with a newline plus *indent*, so the closing delimiter lines up with
    the opening one.
    """
    line_prefix = indent + " " * extra_indentation
    rendered_groups = []
    for group in groups:
        lines = pack_lines(group, width)
        rendered_groups.append("\n".join(line_prefix + " ".join(line) for line in lines))
    text = "\n\n".join(rendered_groups)
    if "\n" not in text:
        return text.strip()
    return f"\n{text}\n{indent}"


def format_classes(
    text: str,
    resolver: RankResolver,
    indent: str = "",
    width: int = 80,
    extra_indentation: int = 2,
) -> str:
    """Tokenize, sort, group and render *text* in one go."""
    ordered = sort_classes(tokenize(text), resolver)
    return render(group_classes(ordered), indent, width, extra_indentation)
