"""Typed dataclasses for scaffolding requests and results."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import cbor2

StrategyName = Literal["external", "inprocess"]

SCAFFOLDING_SUFFIX = ".uniffi.rs"


def scaffolding_filename(interface_file: str | Path) -> str:
    """Return the generated file name for *interface_file* (``example.udl`` -> ``example.uniffi.rs``)."""
    return f"{Path(interface_file).stem}{SCAFFOLDING_SUFFIX}"


@dataclass(frozen=True, slots=True)
class ScaffoldingRequest:
    interface_file: Path
    out_dir: Path

    @property
    def output_file(self) -> Path:
        return self.out_dir / scaffolding_filename(self.interface_file)


@dataclass(frozen=True, slots=True)
class ScaffoldingResult:
    strategy: StrategyName
    interface_file: Path
    out_dir: Path
    output_file: Path
    command: tuple[str, ...] = ()
    generator_version: str | None = None
    diagnostics: tuple[str, ...] = ()
    schema_version: int = 1

    @classmethod
    def for_request(
        cls,
        request: ScaffoldingRequest,
        *,
        strategy: StrategyName,
        command: tuple[str, ...] = (),
        generator_version: str | None = None,
        diagnostics: tuple[str, ...] = (),
    ) -> ScaffoldingResult:
        return cls(
            strategy=strategy,
            interface_file=request.interface_file,
            out_dir=request.out_dir,
            output_file=request.output_file,
            command=command,
            generator_version=generator_version,
            diagnostics=diagnostics,
        )

    def to_json(self, path: str | Path | None = None) -> str:
        encoded = json.dumps(self._payload(), indent=2, sort_keys=True) + "\n"
        if path is not None:
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        encoded = cbor2.dumps(self._payload(), canonical=True)
        if path is not None:
            Path(path).write_bytes(encoded)
        return encoded

    def _payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "schema_version": self.schema_version,
            "strategy": self.strategy,
            "interface_file": str(self.interface_file),
            "out_dir": str(self.out_dir),
            "output_file": str(self.output_file),
            "command": list(self.command),
        }
        if self.generator_version is not None:
            payload["generator_version"] = self.generator_version
        if self.diagnostics:
            payload["diagnostics"] = list(self.diagnostics)
        return payload
