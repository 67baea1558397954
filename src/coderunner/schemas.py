from __future__ import annotations
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from .core.errors import ParseRequestError
from .core.language import Language
from .core.models import RunInstructions


class _Wire(BaseModel):
    # JSON dùng camelCase (runInstructions, buildCommands, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --------- Request ---------

class RequestFile(_Wire):
    name: str
    content: str


class RunInstructionsIn(_Wire):
    build_commands: List[str]
    run_command: str

    def to_instructions(self) -> RunInstructions:
        return RunInstructions(build_commands=tuple(self.build_commands), run_command=self.run_command)


class RunRequestV1(_Wire):
    language: Language
    files: List[RequestFile]
    stdin: Optional[str] = None
    # None / "" -> dispatch theo language; khác rỗng -> chạy thẳng command
    command: Optional[str] = None


class RunRequestV2(_Wire):
    run_instructions: RunInstructionsIn
    files: List[RequestFile]
    stdin: Optional[str] = None


# thử V1 trước rồi mới tới V2
RunRequest = Annotated[Union[RunRequestV1, RunRequestV2], Field(union_mode="left_to_right")]

_request_adapter: TypeAdapter = TypeAdapter(RunRequest)


def _check_utf8(value: Any, loc: str = "request") -> None:
    # json.loads (FastAPI) chấp nhận lone surrogate như "\ud800", validate_json thì không
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParseRequestError(f"invalid unicode in {loc}: {e.reason}") from e
    elif isinstance(value, dict):
        for key, item in value.items():
            _check_utf8(item, f"{loc}.{key}")
    elif isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_utf8(item, f"{loc}[{i}]")


def parse_request(raw: Union[str, bytes, Any]) -> Union[RunRequestV1, RunRequestV2]:
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return _request_adapter.validate_json(raw)
        _check_utf8(raw)
        return _request_adapter.validate_python(raw)
    except ValidationError as e:
        raise ParseRequestError(str(e)) from e


# --------- Response ---------

class RunResultRes(BaseModel):
    stdout: str
    stderr: str
    error: str
    duration: int   # nanoseconds
