"""Find class lists in JSX/TSX source and map tokens back to positions.

Recognised sites::

    <div className={`flex p-4`} />       attribute in ``settings.attributes``
    cn(`flex p-4`, other)                call to a name in ``settings.callees``

Source is parsed with the tree-sitter TSX grammar, so comments and string
contents are never mistaken for class lists.  Only static template literals
are class lists; a literal containing a ``${...}`` substitution is skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

__all__ = ["ClassList", "find_class_lists", "token_positions", "locate"]

log = logging.getLogger("classlint.source")

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())
_parser = Parser(TSX_LANGUAGE)

_TOKEN_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class ClassList:
    """A static template literal holding a class list.

    Attributes:
        text: The literal's content, delimiters excluded.
        start: Offset of the opening backtick in the source.
        end: Offset just past the closing backtick.
        line: 1-based line of the first character of *text*.
        column: 0-based column of the first character of *text*.
        indent: Leading whitespace of the line holding the opening backtick.
    """

    text: str
    start: int
    end: int
    line: int
    column: int
    indent: str


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _walk(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _is_static_template(node: Node) -> bool:
    if node.type != "template_string" or node.has_error:
        return False
    return not any(child.type == "template_substitution" for child in node.children)


def _attribute_template(node: Node, attributes: set[str]) -> Node | None:
    """The template literal of ``name={`...`}`` when *name* is listed."""
    named = node.named_children
    if len(named) < 2 or _node_text(named[0]) not in attributes:
        return None
    value = named[-1]
    if value.type != "jsx_expression":
        return None
    inner = [child for child in value.named_children if child.type != "comment"]
    if len(inner) == 1 and inner[0].type == "template_string":
        return inner[0]
    return None


def _call_templates(node: Node, callees: set[str]) -> list[Node]:
    """Template literals passed directly to a listed callee."""
    function = node.child_by_field_name("function")
    arguments = node.child_by_field_name("arguments")
    if function is None or function.type != "identifier" or _node_text(function) not in callees:
        return []
    # A tagged template (cn`...`) is not a call with arguments.
    if arguments is None or arguments.type != "arguments":
        return []
    return [child for child in arguments.named_children if child.type == "template_string"]


def _position(source: str, offset: int) -> tuple[int, int, str]:
    line_start = source.rfind("\n", 0, offset) + 1
    line = source.count("\n", 0, offset) + 1
    line_end = source.find("\n", line_start)
    line_text = source[line_start:] if line_end == -1 else source[line_start:line_end]
    indent = line_text[: len(line_text) - len(line_text.lstrip(" \t"))]
    return line, offset - line_start, indent


def _class_list(source: str, data: bytes, node: Node) -> ClassList | None:
    # tree-sitter reports byte offsets; ClassList offsets index the str.
    start = len(data[: node.start_byte].decode("utf-8"))
    end = start + len(data[node.start_byte : node.end_byte].decode("utf-8"))
    literal = source[start:end]
    if len(literal) < 2 or not (literal.startswith("`") and literal.endswith("`")):
        return None
    _, _, indent = _position(source, start)
    line, column, _ = _position(source, start + 1)
    return ClassList(
        text=literal[1:-1],
        start=start,
        end=end,
        line=line,
        column=column,
        indent=indent,
    )


def find_class_lists(
    source: str,
    attributes: Iterable[str] = ("className", "class"),
    callees: Iterable[str] = ("cn", "cx", "className", "clsx", "classNames"),
) -> list[ClassList]:
    """Return every static class list in *source*, in source order."""
    attribute_names = set(attributes)
    callee_names = set(callees)
    data = source.encode("utf-8")
    tree = _parser.parse(data)

    templates: dict[int, Node] = {}
    for node in _walk(tree.root_node):
        if node.type == "jsx_attribute":
            template = _attribute_template(node, attribute_names)
            if template is not None:
                templates[template.start_byte] = template
        elif node.type == "call_expression":
            for template in _call_templates(node, callee_names):
                templates[template.start_byte] = template

    found: list[ClassList] = []
    for start_byte in sorted(templates):
        node = templates[start_byte]
        if not _is_static_template(node):
            continue
        class_list = _class_list(source, data, node)
        if class_list is not None:
            found.append(class_list)
    log.debug("Parsed %d byte(s), %d class list(s)", len(data), len(found))
    return found


def token_positions(text: str) -> list[tuple[int, int]]:
    """``(line_offset, column_offset)`` of each token of *text*, in order.

    Lines are scanned first, then columns within each line, so class lists
    that already span several lines are located correctly.
    """
    positions: list[tuple[int, int]] = []
    for line_offset, line in enumerate(text.split("\n")):
        for match in _TOKEN_RE.finditer(line):
            positions.append((line_offset, match.start()))
    return positions


def locate(class_list: ClassList, line_offset: int, column_offset: int) -> tuple[int, int]:
    """Translate an offset inside *class_list* to a source ``(line, column)``."""
    if line_offset == 0:
        return class_list.line, class_list.column + column_offset
    return class_list.line + line_offset, column_offset
