"""Shared pytest fixtures for the Boilertowns generator test suite.

Provides reusable fixtures for:
- A temporary ``src/boilerplates`` root with existing entries
- A ``Config`` pointed at that root and the packaged templates
- A pass-through formatter standing in for the prettier subprocess
- A scripted prompt that replays canned operator replies
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from boilertowns.config import Config


class PassthroughFormatter:
    """Formatter double that records calls and returns the source unchanged."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def format(self, source: str, filepath: str = "index.ts") -> str:
        self.calls.append((filepath, source))
        return source


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def boilerplates_root(tmp_path: Path) -> Path:
    """Boilerplates root holding ``alpha`` and ``beta`` plus an old index."""
    root = tmp_path / "src" / "boilerplates"
    for name in ("alpha", "beta"):
        entry = root / name
        entry.mkdir(parents=True)
        (entry / "index.ts").write_text(f"export default {{ name: '{name}' }};\n", encoding="utf-8")
    (root / "index.ts").write_text("// stale, hand-edited index\n", encoding="utf-8")
    yield root


@pytest.fixture
def config(boilerplates_root: Path) -> Config:
    return Config(boilerplates_dir=boilerplates_root)


@pytest.fixture
def formatter() -> PassthroughFormatter:
    return PassthroughFormatter()


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def scripted_prompt() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Factory returning a prompt callable that replays *replies* in order.

    The returned callable keeps the messages it was asked in ``.asked``.
    """

    def factory(replies: Iterable[str]) -> Callable[[str], str]:
        pending = iter(replies)
        asked: list[str] = []

        def prompt(message: str) -> str:
            asked.append(message)
            try:
                return next(pending)
            except StopIteration:
                raise EOFError from None

        prompt.asked = asked  # type: ignore[attr-defined]
        return prompt

    return factory
