"""Error taxonomy of the runner.

Command faults (execute / output) are turned into a RunResult by the pipeline.
Request faults abort the whole request, except BuildError which still carries a
result for the caller.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional

from .models import ErrorOutput


class RunnerError(RuntimeError):
    """Base exception for the code runner."""


# ---------- execute faults: không lấy được kết quả từ process ----------

class ExecuteError(RunnerError):
    pass


class SpawnError(ExecuteError):
    def __init__(self, err: Exception):
        super().__init__(str(err))
        self.err = err


class CaptureStdinError(ExecuteError):
    def __init__(self):
        super().__init__("Failed to capture stdin.")


class WriteStdinError(ExecuteError):
    def __init__(self, err: Exception):
        super().__init__(f"Failed to write to stdin. {err}")
        self.err = err


class WaitForChildError(ExecuteError):
    def __init__(self, err: OSError):
        super().__init__(f"Failed while waiting for child. {err}")
        self.err = err


# ---------- output faults: có kết quả nhưng không phải success ----------

class OutputError(RunnerError):
    pass


class ExitFailure(OutputError):
    def __init__(self, output: ErrorOutput):
        super().__init__(f"Exited with non-zero exit code. {output}")
        self.output = output


class ReadStdoutError(OutputError):
    def __init__(self, err: UnicodeDecodeError):
        super().__init__(f"Failed to read stdout. {err}")
        self.err = err


class ReadStderrError(OutputError):
    def __init__(self, err: UnicodeDecodeError):
        super().__init__(f"Failed to read stderr. {err}")
        self.err = err


class CommandError(RunnerError):
    """A single command that did not finish cleanly, with the time it took."""

    def __init__(self, cause: RunnerError, duration_ns: int):
        if isinstance(cause, ExecuteError):
            msg = f"Error while executing command. {cause}"
        else:
            msg = f"Error in output from command. {cause}"
        super().__init__(msg)
        self.cause = cause
        self.duration_ns = duration_ns


# ---------- request faults ----------

class RequestError(RunnerError):
    pass


class ParseRequestError(RequestError):
    def __init__(self, detail: str):
        super().__init__(f"Failed to parse request json, {detail}")


class NoFilesError(RequestError):
    def __init__(self):
        super().__init__("Error, no files were given")


class StripWorkPathError(RequestError):
    def __init__(self, path: Path, work_path: Path):
        super().__init__(f"Failed to strip work path of file. '{path}' is not inside '{work_path}'")


class EmptyFileNameError(RequestError):
    def __init__(self):
        super().__init__("Error, file with empty name")


class EmptyFileContentError(RequestError):
    def __init__(self):
        super().__init__("Error, file with empty content")


class CreateWorkDirError(RequestError):
    def __init__(self, path: Path, err: Exception):
        super().__init__(f"Failed to create work dir '{path}'. {err}")


class GetParentDirError(RequestError):
    def __init__(self, path: Path):
        super().__init__(f"Failed to get parent dir for file: '{path}'")


class CreateParentDirError(RequestError):
    def __init__(self, path: Path, err: Exception):
        super().__init__(f"Failed to create parent dir for file '{path}'. {err}")


class WriteFileError(RequestError):
    def __init__(self, path: Path, err: Exception):
        super().__init__(f"Failed to write file: '{path}'. {err}")


class BootstrapError(RequestError):
    def __init__(self, err: CommandError):
        super().__init__(f"Failed to unpack bootstrap file: {err}")
        self.err = err


class BuildError(RequestError):
    """A build command failed; remaining build steps and the run step were skipped."""

    def __init__(self, command: str, err: CommandError, step: Optional[int] = None):
        super().__init__(f"Failed to compile: {err}")
        self.command = command
        self.err = err
        self.step = step
