"""Protocol for scaffolding production strategies."""

from __future__ import annotations

from typing import Protocol

from scaffold_bridge.models import ScaffoldingRequest, ScaffoldingResult


class ScaffoldingStrategy(Protocol):
    name: str

    def produce_scaffolding(self, request: ScaffoldingRequest) -> ScaffoldingResult:
        """Write the scaffolding for *request* into its output directory."""
