"""CLI configuration: JSON config file plus command-line overrides."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from classlint.model.settings import Settings, SettingsError, parse_settings
from classlint.resolvers.manifest import load_manifest

log = logging.getLogger("classlint")


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a JSON config file.

    A relative ``manifest`` path is resolved against the config file's
    directory.
    """
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SettingsError(f"{config_path}: cannot read config: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SettingsError(f"{config_path}: invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsError(f"{config_path}: settings must be an object")
    manifest = data.get("manifest")
    if isinstance(manifest, str) and not Path(manifest).is_absolute():
        data["manifest"] = str(config_path.parent / manifest)
    return data


def build_settings(
    config: dict[str, Any] | None = None,
    manifest: str | None = None,
    print_width: int | None = None,
    extra_indentation: int | None = None,
) -> Settings:
    """Combine a config mapping and CLI overrides into :class:`Settings`.

    Resolvers come from the utility manifest named by *manifest* or by the
    config's ``manifest`` key.
    """
    raw = dict(config or {})
    manifest_path = manifest or raw.pop("manifest", None)
    if manifest_path is None:
        raise SettingsError(
            'a utility manifest is required (--manifest or "manifest" in the config file)'
        )
    resolver = load_manifest(manifest_path)
    raw["candidatesToCss"] = resolver.candidates_to_css
    raw["getClassOrder"] = resolver.get_class_order
    if print_width is not None:
        raw["printWidth"] = print_width
    if extra_indentation is not None:
        raw["extraIndentation"] = extra_indentation
    log.debug("Using manifest %s", manifest_path)
    return parse_settings(raw)
