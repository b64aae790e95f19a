"""File-backed resolvers: a JSON manifest of known utility classes.

Manifest format::

    {
      "classes": {
        "p-4": {"css": ".p-4 {\\n  padding: 1rem;\\n}", "order": 1204},
        "group": {"css": null, "order": 3}
      }
    }

Tokens absent from the manifest resolve to no declaration and no rank.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

__all__ = ["ManifestError", "ManifestEntry", "ManifestResolver", "load_manifest"]

log = logging.getLogger("classlint.resolvers")


class ManifestError(Exception):
    """Raised when a utility manifest cannot be read or is malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class ManifestEntry:
    """What the framework generates for a single class."""

    css: str | None = None
    order: int | None = None


@dataclass
class ManifestResolver:
    """Serve ``candidatesToCss`` / ``getClassOrder`` from a loaded manifest."""

    entries: dict[str, ManifestEntry] = field(default_factory=dict)

    def candidates_to_css(self, tokens: list[str]) -> list[str | None]:
        result: list[str | None] = []
        for token in tokens:
            entry = self.entries.get(token)
            result.append(entry.css if entry else None)
        return result

    def get_class_order(self, tokens: list[str]) -> list[tuple[str, int | None]]:
        result: list[tuple[str, int | None]] = []
        for token in tokens:
            entry = self.entries.get(token)
            result.append((token, entry.order if entry else None))
        return result

    @classmethod
    def from_dict(cls, data: Any, path: str | None = None) -> ManifestResolver:
        """Build a resolver from decoded manifest JSON."""
        if not isinstance(data, dict) or not isinstance(data.get("classes"), dict):
            raise ManifestError("manifest must be an object with a 'classes' object", path)
        entries: dict[str, ManifestEntry] = {}
        for name, raw in data["classes"].items():
            if not isinstance(raw, dict):
                raise ManifestError(f"entry for {name!r} must be an object", path)
            css = raw.get("css")
            order = raw.get("order")
            if css is not None and not isinstance(css, str):
                raise ManifestError(f"css for {name!r} must be a string or null", path)
            if order is not None and (not isinstance(order, int) or isinstance(order, bool)):
                raise ManifestError(f"order for {name!r} must be an integer or null", path)
            entries[name] = ManifestEntry(css=css, order=order)
        return cls(entries=entries)


def load_manifest(path: str | Path) -> ManifestResolver:
    """Read and validate a manifest file."""
    manifest_path = Path(path)
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ManifestError(f"cannot read manifest: {exc}", str(manifest_path)) from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"invalid JSON: {exc}", str(manifest_path)) from exc
    resolver = ManifestResolver.from_dict(data, str(manifest_path))
    log.debug("Loaded %d class(es) from %s", len(resolver.entries), manifest_path)
    return resolver
