from __future__ import annotations
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .pipeline import Pipeline, to_error_result
from .workspace import Workspace, default_work_path
from ..core.errors import BuildError
from ..core.models import RunResult
from ..core.settings import Settings
from ..executor.base import Executor
from ..executor.process import ProcessExecutor
from ..runners.languages import resolve
from ..schemas import RunRequestV1, RunRequestV2, parse_request

log = structlog.get_logger(__name__)


def build_error_result(err: BuildError) -> RunResult:
    """RunResult cho lỗi build, cùng schema với lỗi lúc chạy."""
    return to_error_result(err.err)


class RunService:
    """
    Orchestrator cho một request: work dir + bootstrap + ghi file + chọn đường chạy.
      - V2: runInstructions có sẵn -> Pipeline
      - V1 có command khác rỗng   -> chạy thẳng command
      - V1 còn lại                -> resolve theo language -> Pipeline
    """

    def __init__(self, settings: Settings, executor: Optional[Executor] = None):
        self.settings = settings
        self.executor = executor or ProcessExecutor(shell=settings.shell)
        self.pipeline = Pipeline(self.executor)

    def handle_raw(self, raw: Union[str, bytes, Any], work_path: Optional[Path] = None) -> RunResult:
        return self.handle(parse_request(raw), work_path=work_path)

    def handle(self, request: Union[RunRequestV1, RunRequestV2], work_path: Optional[Path] = None) -> RunResult:
        ws = Workspace(work_path or default_work_path(self.settings))
        log.info(
            "run.start",
            work_path=str(ws.work_path),
            kind="v2" if isinstance(request, RunRequestV2) else "v1",
            files=len(request.files),
        )
        # validate file trước khi spawn process hay ghi bất cứ thứ gì
        files = ws.source_files(request.files)
        ws.create()

        # bootstrap phải giải nén trước khi ghi file của user
        ws.unpack_bootstrap(self.executor, self.settings.bootstrap_file)
        ws.write(files)

        if isinstance(request, RunRequestV2):
            instructions = request.run_instructions.to_instructions()
            return self.pipeline.run(ws.work_path, instructions, request.stdin)

        command = request.command
        if command is not None and command != "":
            return self.pipeline.run_command(ws.work_path, command, request.stdin)

        paths = ws.relative_paths(files)
        log.info("run.resolve", language=request.language.value, main=paths.head, files=len(paths))
        instructions = resolve(request.language, paths)
        return self.pipeline.run(ws.work_path, instructions, request.stdin)
