import pytest

from tatu.errors import TatuIncludeError, TatuNameError
from tatu.interpreter import Interpreter
from tatu.reader.builder import ProgramBuilder, include_target
from tatu.reader.parser import parse_source


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_include_target():
    include, other, bad = parse_source('(include "lib.tatu") (print 1) (begin 1)')
    assert include_target(include) == "lib.tatu"
    assert include_target(other) is None
    assert include_target(bad) is None


def test_include_is_spliced_in_place(tmp_path):
    write(tmp_path / "lib.tatu", "(var x 40)\n(def add2 (n) (+ n 2))")
    main = write(tmp_path / "main.tatu", '(include "lib.tatu")\n(add2 x)')
    assert Interpreter().eval_file(main) == 42.0


def test_included_locations_name_the_included_file(tmp_path):
    lib = write(tmp_path / "lib.tatu", "(var x 1)")
    main = write(tmp_path / "main.tatu", '(var y 0)\n(include "lib.tatu")')
    tokens, program = ProgramBuilder(roots=[]).build_from_file(main)

    assert [expr.location.file for expr in program] == [str(main.resolve()), str(lib.resolve())]
    assert tokens[-1].location.file == str(lib.resolve())


def test_repeated_include_is_built_once(tmp_path):
    write(tmp_path / "lib.tatu", "(var x 1)")
    main = write(tmp_path / "main.tatu", '(include "lib.tatu")\n(include "./lib.tatu")\nx')
    # a second (var x 1) would raise "already defined"
    assert Interpreter().eval_file(main) == 1.0


def test_include_cycles_terminate(tmp_path):
    write(tmp_path / "a.tatu", '(include "b.tatu")\n(var a 1)')
    write(tmp_path / "b.tatu", '(include "a.tatu")\n(var b 2)')
    main = write(tmp_path / "main.tatu", '(include "a.tatu")\n(+ a b)')
    assert Interpreter().eval_file(main) == 3.0


def test_file_including_itself(tmp_path):
    main = write(tmp_path / "main.tatu", '(include "main.tatu")\n7')
    assert Interpreter().eval_file(main) == 7.0


def test_nested_directories_resolve_relative_to_the_including_file(tmp_path):
    write(tmp_path / "lib" / "util.tatu", '(include "helpers.tatu")')
    write(tmp_path / "lib" / "helpers.tatu", "(var helper 5)")
    main = write(tmp_path / "main.tatu", '(include "lib/util.tatu")\nhelper')
    assert Interpreter().eval_file(main) == 5.0


def test_include_roots_from_environment(tmp_path, monkeypatch):
    write(tmp_path / "shared" / "std.tatu", '(var greeting "hi")')
    main = write(tmp_path / "app" / "main.tatu", '(include "std.tatu")\ngreeting')
    monkeypatch.setenv("TATU_PATH", str(tmp_path / "shared"))
    assert Interpreter().eval_file(main) == "hi"


def test_local_file_wins_over_include_roots(tmp_path):
    write(tmp_path / "shared" / "lib.tatu", '(var who "shared")')
    write(tmp_path / "app" / "lib.tatu", '(var who "local")')
    main = write(tmp_path / "app" / "main.tatu", '(include "lib.tatu")\nwho')
    _, program = ProgramBuilder(roots=[tmp_path / "shared"]).build_from_file(main)
    assert Interpreter().eval_program(program) == "local"


def test_source_without_a_file_resolves_from_cwd(tmp_path, monkeypatch):
    write(tmp_path / "lib.tatu", "(var x 3)")
    monkeypatch.chdir(tmp_path)
    assert Interpreter().eval('(include "lib.tatu")\n(* x x)') == 9.0


def test_missing_include(tmp_path):
    main = write(tmp_path / "main.tatu", '(var a 1)\n  (include "nope.tatu")')
    with pytest.raises(TatuIncludeError) as info:
        ProgramBuilder(roots=[]).build_from_file(main)

    err = info.value
    assert err.message == f"missing file `nope.tatu` included from `{main.resolve()}`"
    assert (err.location.start.line, err.location.start.column) == (2, 3)


def test_missing_include_deep_in_the_tree_points_at_its_include(tmp_path):
    write(tmp_path / "a.tatu", '\n(include "gone.tatu")')
    main = write(tmp_path / "main.tatu", '(include "a.tatu")')
    with pytest.raises(TatuIncludeError) as info:
        ProgramBuilder(roots=[]).build_from_file(main)

    loc = info.value.location
    assert loc.file == str((tmp_path / "a.tatu").resolve())
    assert loc.start.line == 2


def test_missing_main_file(tmp_path):
    with pytest.raises(TatuIncludeError, match="missing file"):
        ProgramBuilder(roots=[]).build_from_file(tmp_path / "absent.tatu")


def test_definitions_in_included_files_follow_scope_rules(tmp_path):
    write(tmp_path / "lib.tatu", "(var x 1)")
    main = write(tmp_path / "main.tatu", '(var x 0)\n(include "lib.tatu")')
    with pytest.raises(TatuNameError, match="symbol `x` already defined"):
        Interpreter().eval_file(main)


def test_include_of_a_file_that_is_not_utf8(tmp_path):
    (tmp_path / "bad.tatu").write_bytes(b"(var x \"\xff\xfe\")")
    main = write(tmp_path / "main.tatu", '(include "bad.tatu")\n')
    with pytest.raises(TatuIncludeError, match="cannot read file") as info:
        ProgramBuilder(roots=[]).build_from_file(main)
    assert info.value.location.start.line == 1
