"""Host settings: which call sites to lint and how to render class lists."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

DeclarationResolver = Callable[[list[str]], list[str | None]]
RankResolver = Callable[[list[str]], list[tuple[str, int | None]]]

DEFAULT_CALLEES = ("cn", "cx", "className", "clsx", "classNames")
DEFAULT_ATTRIBUTES = ("className", "class")
DEFAULT_PRINT_WIDTH = 80
DEFAULT_EXTRA_INDENTATION = 2


class SettingsError(ValueError):
    """Raised when host settings violate an invariant."""


def _invariant(condition: object, message: str) -> None:
    if not condition:
        raise SettingsError(message)


@dataclass(frozen=True)
class Settings:
    """Validated configuration consumed by the lint rules."""

    candidates_to_css: DeclarationResolver
    get_class_order: RankResolver
    callees: tuple[str, ...] = DEFAULT_CALLEES
    attributes: tuple[str, ...] = DEFAULT_ATTRIBUTES
    print_width: int = DEFAULT_PRINT_WIDTH
    extra_indentation: int = DEFAULT_EXTRA_INDENTATION

    def __post_init__(self) -> None:
        _invariant(self.print_width >= 1, "printWidth must be a positive integer")
        _invariant(
            self.extra_indentation >= 0,
            "extraIndentation must be a non-negative integer",
        )


def _lookup(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _string_list(value: Any, name: str) -> tuple[str, ...] | None:
    if not isinstance(value, (list, tuple)):
        return None
    _invariant(
        all(isinstance(item, str) for item in value),
        f"{name} must be an array of strings",
    )
    return tuple(value)


def _integer(value: Any) -> int | None:
    # bool is an int subclass; a flag is never a width.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def parse_settings(raw: Any) -> Settings:
    """Build :class:`Settings` from a host settings mapping.

    Accepts both the camelCase keys used by the editor integration
    (``printWidth``, ``candidatesToCss``...) and their snake_case spellings.
    Values of the wrong type fall back to the defaults, except the two
    resolvers, which are required.
    """
    if raw is None:
        raw = {}
    _invariant(isinstance(raw, Mapping), "settings must be an object")

    callees = _string_list(raw.get("callees"), "callees")
    if callees is None:
        callees = DEFAULT_CALLEES
    attributes = _string_list(raw.get("attributes"), "attributes")
    if attributes is None:
        attributes = DEFAULT_ATTRIBUTES

    print_width = _integer(_lookup(raw, "printWidth", "print_width"))
    extra_indentation = _integer(_lookup(raw, "extraIndentation", "extra_indentation"))

    candidates_to_css = _lookup(raw, "candidatesToCss", "candidates_to_css")
    _invariant(
        callable(candidates_to_css),
        "missing the candidatesToCss function in settings",
    )
    get_class_order = _lookup(raw, "getClassOrder", "get_class_order")
    _invariant(
        callable(get_class_order),
        "missing the getClassOrder function in settings",
    )

    return Settings(
        candidates_to_css=candidates_to_css,
        get_class_order=get_class_order,
        callees=callees,
        attributes=attributes,
        print_width=DEFAULT_PRINT_WIDTH if print_width is None else print_width,
        extra_indentation=(
            DEFAULT_EXTRA_INDENTATION if extra_indentation is None else extra_indentation
        ),
    )
