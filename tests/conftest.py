"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest

from scaffold_bridge.directives import DirectiveWriter


@pytest.fixture
def directives() -> DirectiveWriter:
    """Directive writer that prints into a buffer instead of stdout."""
    return DirectiveWriter(stream=io.StringIO())


@pytest.fixture
def clean_build_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OUT_DIR", raising=False)
    monkeypatch.delenv("CARGO_FEATURE_BUILTIN_BINDGEN", raising=False)
