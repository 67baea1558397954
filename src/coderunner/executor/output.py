from __future__ import annotations
from typing import Type

from ..core.errors import ExitFailure, OutputError, ReadStderrError, ReadStdoutError
from ..core.models import ErrorOutput, ProcessOutcome, SuccessOutput


def _decode(data: bytes, error_cls: Type[OutputError]) -> str:
    # UTF-8 không hợp lệ là lỗi thật, không thay bằng U+FFFD
    try:
        return data.decode("utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise error_cls(e) from e


def classify(outcome: ProcessOutcome) -> SuccessOutput:
    """
    Giải mã stdout/stderr rồi phân loại theo exit status.
    - exit 0           -> SuccessOutput
    - exit != 0/signal -> raise ExitFailure (exit_code=None nếu bị signal)
    """
    stdout = _decode(outcome.stdout, ReadStdoutError)
    stderr = _decode(outcome.stderr, ReadStderrError)

    if outcome.success:
        return SuccessOutput(stdout=stdout, stderr=stderr, duration_ns=outcome.duration_ns)

    raise ExitFailure(ErrorOutput(stdout=stdout, stderr=stderr, exit_code=outcome.exit_code))
