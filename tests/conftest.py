"""Shared fixtures: dict-backed stand-ins for the utility framework."""

from __future__ import annotations

import pytest

from classlint.model.settings import Settings

CSS: dict[str, str] = {
    "flex": ".flex {\n  display: flex;\n}",
    "block": ".block {\n  display: block;\n}",
    "hidden": ".hidden {\n  display: none;\n}",
    "p-2": ".p-2 {\n  padding: 0.5rem;\n}",
    "p-4": ".p-4 {\n  padding: 1rem;\n}",
    "px-4": ".px-4 {\n  padding-inline: 1rem;\n}",
    "m-2": ".m-2 {\n  margin: 0.5rem;\n}",
    "hover:p-4": (
        ".hover\\:p-4 {\n  &:hover {\n    @media (hover: hover) {\n"
        "      padding: 1rem;\n    }\n  }\n}"
    ),
    "hover:p-2": (
        ".hover\\:p-2 {\n  &:hover {\n    @media (hover: hover) {\n"
        "      padding: 0.5rem;\n    }\n  }\n}"
    ),
    "focus:p-4": ".focus\\:p-4 {\n  &:focus {\n    padding: 1rem;\n  }\n}",
    "aaaa": ".aaaa {\n  a-prop: 1;\n}",
    "bbbb": ".bbbb {\n  b-prop: 1;\n}",
    "cccc": ".cccc {\n  c-prop: 1;\n}",
    "dddd": ".dddd {\n  d-prop: 1;\n}",
}

RANKS: dict[str, int] = {
    "flex": 10,
    "block": 11,
    "hidden": 12,
    "m-2": 20,
    "p-2": 30,
    "p-4": 31,
    "px-4": 32,
    "aaaa": 40,
    "bbbb": 41,
    "cccc": 42,
    "dddd": 43,
    "hover:p-2": 100,
    "hover:p-4": 101,
    "focus:p-4": 110,
}


class FakeFramework:
    """Resolvers backed by plain dicts, counting how often they are called."""

    def __init__(self, css: dict[str, str] | None = None, ranks: dict[str, int] | None = None) -> None:
        self.css = CSS if css is None else css
        self.ranks = RANKS if ranks is None else ranks
        self.css_calls = 0
        self.order_calls = 0

    def candidates_to_css(self, tokens: list[str]) -> list[str | None]:
        self.css_calls += 1
        return [self.css.get(t) for t in tokens]

    def get_class_order(self, tokens: list[str]) -> list[tuple[str, int | None]]:
        self.order_calls += 1
        return [(t, self.ranks.get(t)) for t in tokens]


@pytest.fixture
def framework() -> FakeFramework:
    return FakeFramework()


@pytest.fixture
def settings(framework: FakeFramework) -> Settings:
    return Settings(
        candidates_to_css=framework.candidates_to_css,
        get_class_order=framework.get_class_order,
    )


@pytest.fixture
def make_framework() -> type[FakeFramework]:
    return FakeFramework
