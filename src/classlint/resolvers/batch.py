"""Batched calls into the utility-framework resolvers.

Each analysis pass calls a resolver exactly once with every token.
Declarations come back index-aligned with the input; ranks come back as
(token, rank) pairs.  An answer of the wrong length would silently attach
declarations and ranks to the wrong tokens, so it is raised instead of
being patched up.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from classlint.model.settings import DeclarationResolver, RankResolver

__all__ = ["ResolverContractError", "resolve_declarations", "resolve_ranks"]

log = logging.getLogger("classlint.resolvers")


class ResolverContractError(Exception):
    """Raised when a resolver's answer does not line up with its input."""

    def __init__(self, resolver: str, expected: int, actual: int, detail: str = "") -> None:
        self.resolver = resolver
        self.expected = expected
        self.actual = actual
        message = (
            f"{resolver} returned {actual} result(s) for {expected} class(es)"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def resolve_declarations(
    tokens: Sequence[str], resolver: DeclarationResolver
) -> list[str | None]:
    """Resolve the CSS declaration text of every token in one call."""
    if not tokens:
        return []
    declarations = list(resolver(list(tokens)))
    log.debug("candidatesToCss: %d token(s)", len(tokens))
    if len(declarations) != len(tokens):
        raise ResolverContractError("candidatesToCss", len(tokens), len(declarations))
    return declarations


def resolve_ranks(tokens: Sequence[str], resolver: RankResolver) -> list[int | None]:
    """Resolve the sort rank of every token in one call.

    The resolver echoes each token back next to its rank.  Ranks are taken
    from those pairs, so an answer in a different order is still valid; an
    echoed class that was never asked for, or an asked class missing from
    the answer, is a contract violation.
    """
    if not tokens:
        return []
    pairs = list(resolver(list(tokens)))
    log.debug("getClassOrder: %d token(s)", len(tokens))
    if len(pairs) != len(tokens):
        raise ResolverContractError("getClassOrder", len(tokens), len(pairs))
    asked = set(tokens)
    ranks_by_token: dict[str, int | None] = {}
    for echoed, rank in pairs:
        if echoed not in asked:
            raise ResolverContractError(
                "getClassOrder",
                len(tokens),
                len(pairs),
                detail=f"unexpected class {echoed!r}",
            )
        ranks_by_token[echoed] = rank
    missing = [token for token in tokens if token not in ranks_by_token]
    if missing:
        raise ResolverContractError(
            "getClassOrder",
            len(tokens),
            len(pairs),
            detail=f"no rank for {missing[0]!r}",
        )
    return [ranks_by_token[token] for token in tokens]
