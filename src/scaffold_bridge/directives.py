"""Build orchestrator directives printed on stdout."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

DIRECTIVE_PREFIX = "cargo:"


@dataclass(slots=True)
class DirectiveWriter:
    """Write ``cargo:<key>=<value>`` lines and remember what was emitted."""

    stream: TextIO | None = None
    emitted: list[str] = field(default_factory=list)

    def rerun_if_changed(self, path: str | Path) -> str:
        return self._emit("rerun-if-changed", str(path))

    def warning(self, message: str) -> str:
        # Directives are line-oriented; a newline would end the warning early.
        return self._emit("warning", " ".join(message.splitlines()))

    def _emit(self, key: str, value: str) -> str:
        line = f"{DIRECTIVE_PREFIX}{key}={value}"
        stream = self.stream if self.stream is not None else sys.stdout
        print(line, file=stream, flush=True)
        self.emitted.append(line)
        return line
