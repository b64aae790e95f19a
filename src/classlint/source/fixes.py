"""Apply diagnostic fixes to source text."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from classlint.model.diagnostic import Diagnostic, Replacement

__all__ = ["apply_fixes"]

log = logging.getLogger("classlint.source")


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    """Return *source* with every non-overlapping fix applied.

    When two fixes overlap, the one starting first wins and the other is
    dropped; re-linting the result picks it up again.
    """
    replacements = sorted(
        (d.fix for d in diagnostics if d.fix is not None),
        key=lambda r: (r.start, r.end),
    )
    accepted: list[Replacement] = []
    for replacement in replacements:
        if accepted and replacement.start < accepted[-1].end:
            log.debug("Skipping overlapping fix at %d", replacement.start)
            continue
        accepted.append(replacement)

    for replacement in reversed(accepted):
        source = source[: replacement.start] + replacement.text + source[replacement.end :]
    return source
