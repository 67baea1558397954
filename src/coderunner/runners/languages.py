from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

from .base import Compiled, Interpreted, MultiFile, NamedEntry, PerFileBuild, Recipe
from ..core.language import Language
from ..core.models import NonEmptyList, RunInstructions

# Bảng build/run theo ngôn ngữ. Thêm ngôn ngữ = thêm một dòng.
RECIPES: Mapping[Language, Recipe] = MappingProxyType({
    Language.ASSEMBLY: Compiled(
        build=("nasm -f elf64 -o a.o {main}", "ld -o a.out a.o"),
        run="./a.out",
    ),
    Language.ATS: MultiFile(build=("patscc -o a.out {main} {sources}",), run="./a.out", extension="dats"),
    Language.BASH: Interpreted(run="bash {main}"),
    Language.C: MultiFile(build=("clang -o a.out -lm {main} {sources}",), run="./a.out", extension="c"),
    Language.CLISP: Interpreted(run="sbcl --noinform --non-interactive --load {main}"),
    Language.CLOJURE: Interpreted(run="clj -M {main}"),
    Language.COBOL: MultiFile(build=("cobc -x -o a.out {main} {sources}",), run="./a.out", extension="cob"),
    Language.COFFEESCRIPT: Interpreted(run="coffee {main}"),
    # C++ gom cả file phụ ".c"
    Language.CPP: MultiFile(build=("clang++ -std=c++11 -o a.out {main} {sources}",), run="./a.out", extension="c"),
    Language.CRYSTAL: Interpreted(run="crystal run {main}"),
    Language.CSHARP: MultiFile(build=("mcs -out:a.exe {main} {sources}",), run="mono a.exe", extension="cs"),
    Language.D: MultiFile(build=("dmd -ofa.out {main} {sources}",), run="./a.out", extension="d"),
    Language.DART: Interpreted(run="dart {main}"),
    Language.ELIXIR: MultiFile(build=(), run="elixirc {main} {sources}", extension="ex"),
    Language.ELM: Compiled(build=("elm make --output a.js {main}",), run="elm-runner a.js"),
    Language.ERLANG: PerFileBuild(build="erlc {file}", run="escript {main}", extension="erl"),
    Language.FSHARP: MultiFile(
        build=("fsharpc --out:a.exe {sources} {main}",), run="mono a.exe", extension="fs", reverse=True,
    ),
    Language.GO: Compiled(build=("go build -o a.out {main}",), run="./a.out"),
    Language.GROOVY: Interpreted(run="groovy {main}"),
    Language.GUILE: Interpreted(run="guile --no-debug --fresh-auto-compile --no-auto-compile -s {main}"),
    Language.HARE: Compiled(build=("hare build -o a.out {main}",), run="./a.out"),
    Language.HASKELL: Interpreted(run="runghc {main}"),
    Language.IDRIS: Compiled(build=("idris2 -o a.out --output-dir . {main}",), run="./a.out"),
    Language.JAVA: NamedEntry(build="javac {main}", run="java {entry}"),
    Language.JAVASCRIPT: Interpreted(run="node {main}"),
    Language.JULIA: Interpreted(run="julia {main}"),
    Language.KOTLIN: NamedEntry(build="kotlinc {main}", run="kotlin {entry}Kt"),
    Language.LUA: Interpreted(run="lua {main}"),
    Language.MERCURY: MultiFile(build=("mmc -o a.out {main} {sources}",), run="./a.out", extension="m"),
    Language.NIM: Interpreted(run="nim --hints:off --verbosity:0 compile --run {main}"),
    Language.NIX: Interpreted(run="nix-instantiate --eval {main}"),
    Language.OCAML: MultiFile(
        build=("ocamlc -o a.out {sources} {main}",), run="./a.out", extension="ml", reverse=True,
    ),
    Language.PASCAL: Compiled(build=("fpc -oa.out {main}",), run="./a.out"),
    Language.PERL: Interpreted(run="perl {main}"),
    Language.PHP: Interpreted(run="php {main}"),
    Language.PYTHON: Interpreted(run="python {main}"),
    Language.RAKU: Interpreted(run="raku {main}"),
    Language.RUBY: Interpreted(run="ruby {main}"),
    Language.RUST: Compiled(build=("rustc -o a.out {main}",), run="./a.out"),
    Language.SAC: MultiFile(build=("sac2c -t seq -o a.out {main} {sources}",), run="./a.out", extension="c"),
    Language.SCALA: MultiFile(build=("scalac {main} {sources}",), run="scala Main", extension="scala"),
    Language.SWIFT: MultiFile(build=("swiftc -o a.out {main} {sources}",), run="./a.out", extension="swift"),
    Language.TYPESCRIPT: MultiFile(build=("tsc -outFile a.js {main} {sources}",), run="node a.js", extension="ts"),
    Language.ZIG: Interpreted(run="zig run {main}"),
})


def resolve(language: Language, files: NonEmptyList[str]) -> RunInstructions:
    """
    Trả về build commands + run command cho một ngôn ngữ.
    files.head là file chính; thứ tự files.tail được giữ nguyên.
    """
    main_file, other_files = files.parts()
    return RECIPES[Language(language)].instructions(main_file, other_files)
