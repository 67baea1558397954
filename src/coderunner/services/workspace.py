from __future__ import annotations
import time
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

import structlog

from ..core.errors import (
    BootstrapError,
    CommandError,
    CreateParentDirError,
    CreateWorkDirError,
    EmptyFileContentError,
    EmptyFileNameError,
    GetParentDirError,
    NoFilesError,
    StripWorkPathError,
    WriteFileError,
)
from ..core.models import NonEmptyList, SourceFile
from ..core.settings import Settings
from ..executor.base import ExecSpec, Executor

log = structlog.get_logger(__name__)


class FileEntry(Protocol):
    name: str
    content: str


def default_work_path(settings: Settings, now: Optional[float] = None) -> Path:
    # <work_root>/<prefix>-<unix seconds>
    ts = int(time.time() if now is None else now)
    return settings.work_root / f"{settings.work_dir_prefix}-{ts}"


class Workspace:
    """
    Work dir của một request:
      <work_path>/
        ├─ (nội dung bootstrap archive, nếu có)
        └─ các file user gửi (giữ nguyên đường dẫn tương đối)
    """

    def __init__(self, work_path: Path):
        self.work_path = work_path

    def create(self) -> Path:
        try:
            self.work_path.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise CreateWorkDirError(self.work_path, e) from e
        return self.work_path

    def unpack_bootstrap(self, executor: Executor, archive: Path) -> bool:
        if not archive.exists():
            return False
        log.info("bootstrap.unpack", archive=str(archive), work_path=str(self.work_path))
        try:
            executor.run(ExecSpec(command=f"tar -zxf {archive}", workdir=self.work_path))
        except CommandError as e:
            raise BootstrapError(e) from e
        return True

    def source_files(self, entries: Iterable[FileEntry]) -> List[SourceFile]:
        """Validate hết rồi mới ghi: một entry lỗi thì không file nào được ghi."""
        files = []
        for entry in entries:
            if not entry.name:
                raise EmptyFileNameError()
            if not entry.content:
                raise EmptyFileContentError()
            files.append(SourceFile(path=self.work_path / entry.name, content=entry.content))
        return files

    def write(self, files: Iterable[SourceFile]) -> None:
        count = 0
        for f in files:
            write_file(f)
            count += 1
        log.info("files.written", count=count, work_path=str(self.work_path))

    def relative_paths(self, files: List[SourceFile]) -> NonEmptyList[str]:
        names = []
        for f in files:
            try:
                names.append(f.path.relative_to(self.work_path).as_posix())
            except ValueError as e:
                raise StripWorkPathError(f.path, self.work_path) from e
        try:
            return NonEmptyList.from_sequence(names)
        except ValueError as e:
            raise NoFilesError() from e


def write_file(f: SourceFile) -> None:
    parent = f.path.parent
    if parent == f.path:
        raise GetParentDirError(f.path)
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise CreateParentDirError(parent, e) from e
    try:
        f.path.write_text(f.content, encoding="utf-8")
    except (OSError, ValueError) as e:
        # ValueError: NUL trong tên file, hoặc content không encode được UTF-8
        raise WriteFileError(f.path, e) from e
