"""Canonical class order."""

from __future__ import annotations

from collections.abc import Sequence

from classlint.model.settings import RankResolver
from classlint.resolvers.batch import resolve_ranks

__all__ = ["rank_key", "sort_classes"]


def rank_key(rank: int | None) -> tuple[bool, int]:
    """Sort key: ranked classes ascend, unranked ones come last."""
    if rank is None:
        return (True, 0)
    return (False, rank)


def sort_classes(tokens: Sequence[str], resolver: RankResolver) -> list[str]:
    """Sort *tokens* by framework rank.

    Equal ranks (and unranked classes) keep their input order.
    """
    ranks = resolve_ranks(tokens, resolver)
    order = sorted(range(len(tokens)), key=lambda i: rank_key(ranks[i]))
    return [tokens[i] for i in order]
