from __future__ import annotations
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SourceFile:
    path: Path      # đường dẫn tuyệt đối trong work dir
    content: str


@dataclass(frozen=True)
class NonEmptyList(Generic[T]):
    """
    Danh sách có ít nhất một phần tử: head là file chính (entry), tail là các file phụ.
    """
    head: T
    tail: Tuple[T, ...] = ()

    @classmethod
    def from_sequence(cls, items: Sequence[T]) -> "NonEmptyList[T]":
        if not items:
            raise ValueError("cannot build a NonEmptyList from an empty sequence")
        return cls(head=items[0], tail=tuple(items[1:]))

    def parts(self) -> Tuple[T, List[T]]:
        return self.head, list(self.tail)

    def __len__(self) -> int:
        return 1 + len(self.tail)


@dataclass(frozen=True)
class RunInstructions:
    build_commands: Tuple[str, ...]
    run_command: str


@dataclass(frozen=True)
class ProcessOutcome:
    stdout: bytes
    stderr: bytes
    returncode: int   # âm = bị kill bởi signal (quy ước của subprocess)
    duration_ns: int

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def exit_code(self) -> Optional[int]:
        return self.returncode if self.returncode >= 0 else None


@dataclass(frozen=True)
class SuccessOutput:
    stdout: str
    stderr: str
    duration_ns: int


@dataclass(frozen=True)
class ErrorOutput:
    stdout: str
    stderr: str
    exit_code: Optional[int]

    def __str__(self) -> str:
        messages = []
        if self.exit_code is not None:
            messages.append(f"code: {self.exit_code}")
        if self.stdout:
            messages.append(f"stdout: {self.stdout}")
        if self.stderr:
            messages.append(f"stderr: {self.stderr}")
        return ", ".join(messages)


@dataclass
class RunResult:
    stdout: str = ""
    stderr: str = ""
    error: str = ""
    duration: int = 0   # nanoseconds

    def to_dict(self) -> dict:
        return asdict(self)
