"""Duplicate and unknown class detection.

Both detectors walk tokens in their original order and call the
declaration resolver once for the whole list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from classlint.classes.parse import parse_utility, signature
from classlint.model.settings import DeclarationResolver
from classlint.resolvers.batch import resolve_declarations

__all__ = ["STRUCTURAL_CLASSES", "Duplicate", "find_duplicates", "find_unknowns", "is_structural"]

# Marker classes used for parent/sibling state (`group-hover:`, `peer-checked:`).
# They generate no CSS of their own.
STRUCTURAL_CLASSES = frozenset({"group", "peer"})


@dataclass(frozen=True)
class Duplicate:
    """A class that restyles what an earlier class in the list already styles."""

    token: str
    first: str
    index: int
    first_index: int


def find_duplicates(
    tokens: Sequence[str], resolver: DeclarationResolver
) -> list[Duplicate]:
    """Report every token whose signature was already claimed by an earlier one.

    The first holder of a signature is never reported.  Tokens without a
    declaration are left to :func:`find_unknowns`.
    """
    declarations = resolve_declarations(tokens, resolver)
    first_seen: dict[str, int] = {}
    duplicates: list[Duplicate] = []
    for index, (token, declaration) in enumerate(zip(tokens, declarations)):
        if declaration is None:
            continue
        key = signature(token, declaration)
        if key in first_seen:
            first_index = first_seen[key]
            duplicates.append(
                Duplicate(
                    token=token,
                    first=tokens[first_index],
                    index=index,
                    first_index=first_index,
                )
            )
        else:
            first_seen[key] = index
    return duplicates


def is_structural(token: str) -> bool:
    """True for ``group``, ``peer`` and their named forms (``group/card``)."""
    return parse_utility(token).split("/")[0] in STRUCTURAL_CLASSES


def find_unknowns(tokens: Sequence[str], resolver: DeclarationResolver) -> list[str]:
    """Distinct tokens that resolve to no utility, in order of first appearance."""
    declarations = resolve_declarations(tokens, resolver)
    unknown: dict[str, None] = {}
    for token, declaration in zip(tokens, declarations):
        if declaration is None and not is_structural(token):
            unknown.setdefault(token, None)
    return list(unknown)
