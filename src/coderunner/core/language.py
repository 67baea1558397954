from __future__ import annotations
from enum import Enum


class Language(str, Enum):
    """Wire tag of every language the runner knows how to build and run."""
    ASSEMBLY = "assembly"
    ATS = "ats"
    BASH = "bash"
    C = "c"
    CLISP = "clisp"
    CLOJURE = "clojure"
    COBOL = "cobol"
    COFFEESCRIPT = "coffeescript"
    CPP = "cpp"
    CRYSTAL = "crystal"
    CSHARP = "csharp"
    D = "d"
    DART = "dart"
    ELIXIR = "elixir"
    ELM = "elm"
    ERLANG = "erlang"
    FSHARP = "fsharp"
    GO = "go"
    GROOVY = "groovy"
    GUILE = "guile"
    HARE = "hare"
    HASKELL = "haskell"
    IDRIS = "idris"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    JULIA = "julia"
    KOTLIN = "kotlin"
    LUA = "lua"
    MERCURY = "mercury"
    NIM = "nim"
    NIX = "nix"
    OCAML = "ocaml"
    PASCAL = "pascal"
    PERL = "perl"
    PHP = "php"
    PYTHON = "python"
    RAKU = "raku"
    RUBY = "ruby"
    RUST = "rust"
    SAC = "sac"
    SCALA = "scala"
    SWIFT = "swift"
    TYPESCRIPT = "typescript"
    ZIG = "zig"
