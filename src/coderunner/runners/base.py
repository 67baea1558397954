"""Declarative build/run recipes.

Every recipe turns (main file, other files) into RunInstructions. Command
templates are `str.format` strings using the placeholders:
  {main}     main file path
  {sources}  other files filtered by extension, space-joined
  {file}     a single other file (PerFileBuild)
  {entry}    class name derived from the main file stem (NamedEntry)
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import List, Sequence, Tuple

from ..core.models import RunInstructions


def file_extension(path: str) -> str:
    # "util.c" -> "c", ".bashrc" -> "", "a/b" -> ""
    return PurePosixPath(path).suffix[1:]


def filter_by_extension(files: Sequence[str], extension: str) -> List[str]:
    return [f for f in files if file_extension(f) == extension]


def space_separated(files: Sequence[str]) -> str:
    return " ".join(files)


def titlecase_ascii(s: str) -> str:
    """Upper-case the first letter of an ASCII name of at least 2 characters."""
    if not s.isascii() or len(s) < 2:
        return s
    return s[0].upper() + s[1:]


class Recipe:
    def instructions(self, main_file: str, other_files: Sequence[str]) -> RunInstructions:
        raise NotImplementedError


@dataclass(frozen=True)
class Interpreted(Recipe):
    """Không build, chạy thẳng file chính bằng interpreter."""
    run: str

    def instructions(self, main_file, other_files):
        return RunInstructions(build_commands=(), run_command=self.run.format(main=main_file))


@dataclass(frozen=True)
class Compiled(Recipe):
    """Chỉ compile file chính; các bước build chạy tuần tự."""
    build: Tuple[str, ...]
    run: str

    def instructions(self, main_file, other_files):
        return RunInstructions(
            build_commands=tuple(cmd.format(main=main_file) for cmd in self.build),
            run_command=self.run.format(main=main_file),
        )


@dataclass(frozen=True)
class MultiFile(Recipe):
    """
    File chính + các file phụ có đúng extension.
    reverse=True: đảo thứ tự file phụ (F#, OCaml cần khai báo trước khi dùng).
    """
    build: Tuple[str, ...]
    run: str
    extension: str
    reverse: bool = False

    def instructions(self, main_file, other_files):
        sources = filter_by_extension(other_files, self.extension)
        if self.reverse:
            sources.reverse()
        fields = {"main": main_file, "sources": space_separated(sources)}
        return RunInstructions(
            build_commands=tuple(cmd.format(**fields) for cmd in self.build),
            run_command=self.run.format(**fields),
        )


@dataclass(frozen=True)
class PerFileBuild(Recipe):
    """Mỗi file phụ đúng extension là một build command riêng."""
    build: str
    run: str
    extension: str

    def instructions(self, main_file, other_files):
        return RunInstructions(
            build_commands=tuple(
                self.build.format(file=f) for f in filter_by_extension(other_files, self.extension)
            ),
            run_command=self.run.format(main=main_file),
        )


@dataclass(frozen=True)
class NamedEntry(Recipe):
    """JVM: tên class chạy được suy ra từ stem của file chính."""
    build: str
    run: str

    def instructions(self, main_file, other_files):
        stem = PurePosixPath(main_file).stem or "Main"
        return RunInstructions(
            build_commands=(self.build.format(main=main_file),),
            run_command=self.run.format(entry=titlecase_ascii(stem)),
        )
