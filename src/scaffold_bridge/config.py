"""Bridge configuration resolved from the build environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from scaffold_bridge.models import StrategyName

VersionPolicy = Literal["warn", "error", "allow"]

OUT_DIR_VAR = "OUT_DIR"
BUILTIN_BINDGEN_FEATURE_VAR = "CARGO_FEATURE_BUILTIN_BINDGEN"

DEFAULT_BINDGEN_EXECUTABLE = "uniffi-bindgen"
DEFAULT_INPROCESS_GENERATOR = "uniffi_bindgen:generate_component_scaffolding"


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    out_dir: Path | None = None
    strategy: StrategyName = "external"
    executable: str = DEFAULT_BINDGEN_EXECUTABLE
    generator: str = DEFAULT_INPROCESS_GENERATOR
    timeout: float | None = None
    required_version: str | None = None
    version_policy: VersionPolicy = "warn"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BridgeConfig:
        """Read the output directory and the builtin-bindgen feature switch.

        The orchestrator exports ``CARGO_FEATURE_<NAME>`` only for enabled
        features, so presence alone selects the in-process strategy. A missing
        or empty ``OUT_DIR`` leaves ``out_dir`` unset; the bridge reports it.
        """
        env = os.environ if environ is None else environ
        return cls(
            out_dir=out_dir_from_env(env),
            strategy="inprocess" if BUILTIN_BINDGEN_FEATURE_VAR in env else "external",
        )


def out_dir_from_env(environ: Mapping[str, str]) -> Path | None:
    raw = environ.get(OUT_DIR_VAR, "")
    if not raw:
        return None
    return Path(raw)
