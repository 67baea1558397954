from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.models import ProcessOutcome, SuccessOutput


@dataclass(frozen=True)
class ExecSpec:
    command: str            # chạy qua `sh -c <command>`
    workdir: Path
    stdin: Optional[str] = None


class Executor:
    def execute(self, spec: ExecSpec) -> ProcessOutcome: ...
    def run(self, spec: ExecSpec) -> SuccessOutput: ...
