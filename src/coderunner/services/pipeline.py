from __future__ import annotations
from pathlib import Path
from typing import Optional

import structlog

from ..core.errors import BuildError, CommandError, ExitFailure
from ..core.models import RunInstructions, RunResult, SuccessOutput
from ..executor.base import ExecSpec, Executor

log = structlog.get_logger(__name__)


def to_success_result(output: SuccessOutput) -> RunResult:
    return RunResult(
        stdout=output.stdout,
        stderr=output.stderr,
        error="",
        duration=output.duration_ns,
    )


def to_error_result(err: CommandError) -> RunResult:
    # exit != 0: vẫn trả stdout/stderr của chương trình
    if isinstance(err.cause, ExitFailure):
        out = err.cause.output
        return RunResult(
            stdout=out.stdout,
            stderr=out.stderr,
            error=f"Exit code: {out.exit_code}" if out.exit_code is not None else "",
            duration=err.duration_ns,
        )
    return RunResult(stdout="", stderr="", error=str(err), duration=err.duration_ns)


class Pipeline:
    """
    Build commands chạy tuần tự, dừng ở lỗi đầu tiên (raise BuildError).
    Build xong hết mới chạy run command; kết quả run luôn là RunResult.
    """

    def __init__(self, executor: Executor):
        self.executor = executor

    def run(self, workdir: Path, instructions: RunInstructions, stdin: Optional[str] = None) -> RunResult:
        for step, command in enumerate(instructions.build_commands):
            self.build(workdir, command, step)
        return self.run_command(workdir, instructions.run_command, stdin)

    def build(self, workdir: Path, command: str, step: int = 0) -> SuccessOutput:
        log.info("build.step", step=step, command=command)
        try:
            return self.executor.run(ExecSpec(command=command, workdir=workdir))
        except CommandError as e:
            log.warning("build.failed", step=step, command=command, error=str(e))
            raise BuildError(command, e, step=step) from e

    def run_command(self, workdir: Path, command: str, stdin: Optional[str] = None) -> RunResult:
        log.info("run.command", command=command, has_stdin=stdin is not None)
        try:
            output = self.executor.run(ExecSpec(command=command, workdir=workdir, stdin=stdin))
        except CommandError as e:
            result = to_error_result(e)
        else:
            result = to_success_result(output)
        log.info("run.finished", command=command, error=result.error, duration_ns=result.duration)
        return result
