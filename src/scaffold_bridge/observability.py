"""Per-stage records of what a scaffolding run did."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

Stage = Literal["directives", "configuration", "generation"]
Level = Literal["info", "warning", "error"]


@dataclass(frozen=True, slots=True)
class StageRecord:
    operation: str
    stage: Stage
    strategy: str
    interface_file: str
    message: str
    level: Level = "info"
    extra: Mapping[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "operation": self.operation,
            "stage": self.stage,
            "strategy": self.strategy,
            "interface_file": self.interface_file,
            "message": self.message,
            "level": self.level,
        }
        if self.extra is not None:
            payload["extra"] = dict(self.extra)
        return payload


@dataclass(slots=True)
class StructuredLogger:
    operation: str = "generate_scaffolding"
    records: list[StageRecord] = field(default_factory=list)

    def log_stage(
        self,
        stage: Stage,
        *,
        strategy: str,
        interface_file: str,
        message: str,
        level: Level = "info",
        extra: Mapping[str, str] | None = None,
    ) -> StageRecord:
        record = StageRecord(
            operation=self.operation,
            stage=stage,
            strategy=strategy,
            interface_file=interface_file,
            message=message,
            level=level,
            extra=extra,
        )
        self.records.append(record)
        return record

    def records_for(self, interface_file: str) -> list[StageRecord]:
        return [record for record in self.records if record.interface_file == interface_file]

    def failures(self) -> list[StageRecord]:
        return [record for record in self.records if record.level == "error"]

    def to_json_lines(self, path: str | Path) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        lines = [json.dumps(record.to_dict(), sort_keys=True) for record in self.records]
        output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return output_path
