"""Generate FFI scaffolding from a build hook.

Given ``example.udl``, the scaffolding is written to ``example.uniffi.rs`` in
the build output directory, where the compiling crate includes it. The
strategy is fixed when the bridge is built: the installed ``uniffi-bindgen``
executable by default, or the generator library in-process when the
builtin-bindgen feature is enabled.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from scaffold_bridge.config import OUT_DIR_VAR, BridgeConfig
from scaffold_bridge.directives import DirectiveWriter
from scaffold_bridge.errors import ConfigurationError, ValidationError
from scaffold_bridge.models import ScaffoldingRequest, ScaffoldingResult
from scaffold_bridge.observability import Level, Stage, StructuredLogger
from scaffold_bridge.strategies import (
    GeneratorVersionWarning,
    ScaffoldingStrategy,
    select_strategy,
)


@dataclass(frozen=True, slots=True)
class ScaffoldingBridge:
    strategy: ScaffoldingStrategy
    directives: DirectiveWriter = field(default_factory=DirectiveWriter)
    logger: StructuredLogger = field(default_factory=StructuredLogger)

    @classmethod
    def from_config(
        cls,
        config: BridgeConfig,
        *,
        directives: DirectiveWriter | None = None,
        logger: StructuredLogger | None = None,
    ) -> ScaffoldingBridge:
        return cls(
            strategy=select_strategy(config),
            directives=directives if directives is not None else DirectiveWriter(),
            logger=logger if logger is not None else StructuredLogger(),
        )

    def generate(
        self,
        interface_file: str | Path,
        out_dir: str | Path | None,
    ) -> ScaffoldingResult:
        # Path("") renders as ".", so reject it before any conversion.
        if not str(interface_file) or Path(interface_file) == Path(""):
            raise ValidationError(
                "generate() requires a non-empty interface file path.",
                context={"interface_file": repr(interface_file)},
            )
        interface_name = str(interface_file)

        # Emitted before anything can fail so edits always re-trigger the hook.
        self.directives.rerun_if_changed(interface_file)
        self._log("directives", interface_name, "Registered interface file for change tracking.")

        if out_dir is None or not str(out_dir):
            error = ConfigurationError(
                "Build output directory is not set.",
                hint=f"Run from a build hook that exports ${OUT_DIR_VAR}.",
                context={"stage": "configuration", "variable": OUT_DIR_VAR},
            )
            self._log("configuration", interface_name, str(error), level="error")
            raise error

        request = ScaffoldingRequest(interface_file=Path(interface_file), out_dir=Path(out_dir))
        try:
            result = self.strategy.produce_scaffolding(request)
        except Exception as exc:
            self._log(
                "generation",
                interface_name,
                str(exc),
                level="error",
                extra={"error": type(exc).__name__},
            )
            raise

        for notice in result.diagnostics:
            self.directives.warning(notice)
            self._log("generation", interface_name, notice, level="warning")
            warnings.warn(notice, GeneratorVersionWarning, stacklevel=2)

        self._log(
            "generation",
            interface_name,
            "Scaffolding generated.",
            extra={"output_file": str(result.output_file)},
        )
        return result

    def _log(
        self,
        stage: Stage,
        interface_file: str,
        message: str,
        *,
        level: Level = "info",
        extra: dict[str, str] | None = None,
    ) -> None:
        self.logger.log_stage(
            stage,
            strategy=self.strategy.name,
            interface_file=interface_file,
            message=message,
            level=level,
            extra=extra,
        )


def generate_scaffolding(
    interface_file: str | Path,
    *,
    environ: Mapping[str, str] | None = None,
    directives: DirectiveWriter | None = None,
    logger: StructuredLogger | None = None,
) -> ScaffoldingResult:
    """Generate scaffolding for *interface_file* from inside a build hook.

    Reads ``$OUT_DIR`` and the builtin-bindgen feature switch from *environ*
    (``os.environ`` by default) and delegates to :class:`ScaffoldingBridge`.
    """
    config = BridgeConfig.from_env(environ)
    bridge = ScaffoldingBridge.from_config(config, directives=directives, logger=logger)
    return bridge.generate(interface_file, config.out_dir)
