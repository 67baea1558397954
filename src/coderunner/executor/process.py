from __future__ import annotations
import contextlib
import subprocess
import threading
import time
from typing import IO, List, Optional

from .base import ExecSpec, Executor
from .output import classify
from ..core.errors import (
    CaptureStdinError,
    CommandError,
    ExecuteError,
    OutputError,
    SpawnError,
    WaitForChildError,
    WriteStdinError,
)
from ..core.models import ProcessOutcome, SuccessOutput


class _Drain(threading.Thread):
    """Đọc hết một pipe ở thread riêng để child không bị block khi pipe đầy."""

    def __init__(self, pipe: IO[bytes], name: str):
        super().__init__(name=f"drain-{name}", daemon=True)
        self._pipe = pipe
        self._data = b""
        self._error: Optional[OSError] = None

    def run(self) -> None:
        try:
            self._data = self._pipe.read()
        except OSError as e:
            self._error = e
        finally:
            self._pipe.close()

    def result(self) -> bytes:
        self.join()
        if self._error is not None:
            raise self._error
        return self._data


class ProcessExecutor(Executor):
    """
    Chạy một command qua `sh -c` trong work dir, stdin/stdout/stderr đều là pipe.
    Không có timeout: child treo thì pipeline treo theo.
    """

    def __init__(self, shell: str = "sh"):
        self.shell = shell

    def execute(self, spec: ExecSpec) -> ProcessOutcome:
        start = time.monotonic_ns()
        try:
            proc = subprocess.Popen(
                [self.shell, "-c", spec.command],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=str(spec.workdir),
            )
        except (OSError, ValueError) as e:
            # ValueError: command hoặc cwd có NUL byte
            raise SpawnError(e) from e

        drains = [_Drain(proc.stdout, "stdout"), _Drain(proc.stderr, "stderr")]
        for d in drains:
            d.start()

        try:
            if spec.stdin is not None:
                self._write_stdin(proc, spec.stdin)
        except ExecuteError:
            self._reap(proc, drains)
            raise

        # EOF cho child (kể cả khi không có stdin)
        if proc.stdin is not None:
            proc.stdin.close()

        try:
            returncode = proc.wait()
            stdout, stderr = (d.result() for d in drains)
        except OSError as e:
            raise WaitForChildError(e) from e
        finally:
            for d in drains:
                d.join()

        return ProcessOutcome(
            stdout=stdout,
            stderr=stderr,
            returncode=returncode,
            duration_ns=time.monotonic_ns() - start,
        )

    def run(self, spec: ExecSpec) -> SuccessOutput:
        start = time.monotonic_ns()
        try:
            return classify(self.execute(spec))
        except (ExecuteError, OutputError) as e:
            raise CommandError(e, time.monotonic_ns() - start) from e

    @staticmethod
    def _write_stdin(proc: subprocess.Popen, text: str) -> None:
        if proc.stdin is None:
            raise CaptureStdinError()
        try:
            proc.stdin.write(text.encode("utf-8"))
            proc.stdin.flush()
        except (OSError, UnicodeEncodeError) as e:
            raise WriteStdinError(e) from e

    @staticmethod
    def _reap(proc: subprocess.Popen, drains: List[_Drain]) -> None:
        # dọn dẹp sau lỗi stdin; lỗi gốc vẫn được raise ở phía gọi
        if proc.stdin is not None:
            with contextlib.suppress(OSError):
                proc.stdin.close()
        with contextlib.suppress(OSError):
            proc.wait()
        for d in drains:
            d.join()
