import pytest

from coderunner.core.language import Language
from coderunner.core.models import NonEmptyList, RunInstructions
from coderunner.runners.base import filter_by_extension, titlecase_ascii
from coderunner.runners.languages import RECIPES, resolve


def files(*names):
    return NonEmptyList.from_sequence(list(names))


def test_every_language_has_a_recipe():
    assert set(RECIPES) == set(Language)
    assert len(RECIPES) == 44


@pytest.mark.parametrize("language", list(Language))
def test_resolve_is_deterministic(language):
    fs = files("main.x", "b.c", "a.fs", "c.erl")
    first = resolve(language, fs)
    second = resolve(language, fs)
    assert first == second
    assert isinstance(first.build_commands, tuple)
    assert first.run_command


def test_python_single_file():
    assert resolve(Language.PYTHON, files("main.py")) == RunInstructions(
        build_commands=(), run_command="python main.py"
    )


@pytest.mark.parametrize(
    "language,run",
    [
        (Language.BASH, "bash main.sh"),
        (Language.RUBY, "ruby main.sh"),
        (Language.HASKELL, "runghc main.sh"),
        (Language.CLISP, "sbcl --noinform --non-interactive --load main.sh"),
        (Language.CRYSTAL, "crystal run main.sh"),
        (Language.NIM, "nim --hints:off --verbosity:0 compile --run main.sh"),
        (Language.ZIG, "zig run main.sh"),
    ],
)
def test_interpreters_ignore_other_files(language, run):
    result = resolve(language, files("main.sh", "lib.sh"))
    assert result.build_commands == ()
    assert result.run_command == run


def test_c_compiles_main_and_c_sources_only():
    result = resolve(Language.C, files("main.c", "util.c", "notes.txt"))
    assert result.build_commands == ("clang -o a.out -lm main.c util.c",)
    assert result.run_command == "./a.out"


def test_c_single_file_keeps_trailing_space():
    result = resolve(Language.C, files("main.c"))
    assert result.build_commands == ("clang -o a.out -lm main.c ",)


def test_multi_file_keeps_original_order():
    result = resolve(Language.CSHARP, files("Main.cs", "b.cs", "a.cs", "c.txt"))
    assert result.build_commands == ("mcs -out:a.exe Main.cs b.cs a.cs",)
    assert result.run_command == "mono a.exe"


def test_cpp_collects_c_sources():
    result = resolve(Language.CPP, files("main.cpp", "helper.c", "other.cpp"))
    assert result.build_commands == ("clang++ -std=c++11 -o a.out main.cpp helper.c",)


def test_fsharp_reverses_sources_before_main():
    result = resolve(Language.FSHARP, files("main.fs", "a.fs", "b.fs", "c.txt"))
    assert result.build_commands == ("fsharpc --out:a.exe b.fs a.fs main.fs",)
    assert result.run_command == "mono a.exe"


def test_ocaml_reverses_sources_before_main():
    result = resolve(Language.OCAML, files("main.ml", "x.ml", "y.ml", "z.ml"))
    assert result.build_commands == ("ocamlc -o a.out z.ml y.ml x.ml main.ml",)


def test_ocaml_without_sources():
    result = resolve(Language.OCAML, files("main.ml"))
    assert result.build_commands == ("ocamlc -o a.out  main.ml",)


def test_assembly_assembles_then_links():
    result = resolve(Language.ASSEMBLY, files("main.asm"))
    assert result.build_commands == ("nasm -f elf64 -o a.o main.asm", "ld -o a.out a.o")
    assert result.run_command == "./a.out"


def test_erlang_one_build_per_erl_file():
    result = resolve(Language.ERLANG, files("main.erl", "a.erl", "notes.md", "b.erl"))
    assert result.build_commands == ("erlc a.erl", "erlc b.erl")
    assert result.run_command == "escript main.erl"


def test_erlang_without_other_files_has_no_build():
    assert resolve(Language.ERLANG, files("main.erl")).build_commands == ()


def test_elixir_compiles_in_run_command():
    result = resolve(Language.ELIXIR, files("main.ex", "lib.ex", "lib.exs"))
    assert result.build_commands == ()
    assert result.run_command == "elixirc main.ex lib.ex"


@pytest.mark.parametrize(
    "main,run",
    [
        ("HelloWorld.java", "java HelloWorld"),
        ("hello.java", "java Hello"),
        ("src/hello.java", "java Hello"),
        ("é.java", "java é"),
        ("a.java", "java a"),
    ],
)
def test_java_entry_from_stem(main, run):
    result = resolve(Language.JAVA, files(main))
    assert result.build_commands == (f"javac {main}",)
    assert result.run_command == run


def test_kotlin_appends_kt():
    result = resolve(Language.KOTLIN, files("main.kt"))
    assert result.build_commands == ("kotlinc main.kt",)
    assert result.run_command == "kotlin MainKt"


def test_scala_runs_main_class():
    result = resolve(Language.SCALA, files("main.scala", "lib.scala"))
    assert result.build_commands == ("scalac main.scala lib.scala",)
    assert result.run_command == "scala Main"


def test_typescript_outputs_single_js():
    result = resolve(Language.TYPESCRIPT, files("main.ts", "lib.ts"))
    assert result.build_commands == ("tsc -outFile a.js main.ts lib.ts",)
    assert result.run_command == "node a.js"


def test_resolve_accepts_wire_tag():
    assert resolve("python", files("main.py")).run_command == "python main.py"


def test_extension_filter_is_exact_and_case_sensitive():
    assert filter_by_extension(["a.c", "b.C", "c.cc", ".c", "d.h.c", "dir.c/e"], "c") == ["a.c", "d.h.c"]


@pytest.mark.parametrize(
    "value,expected",
    [("hello", "Hello"), ("Hello", "Hello"), ("a", "a"), ("ab", "Ab"), ("", ""), ("élan", "élan"), ("1abc", "1abc")],
)
def test_titlecase_ascii(value, expected):
    assert titlecase_ascii(value) == expected
