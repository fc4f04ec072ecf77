import io

import pytest

from schemer.__main__ import main
from schemer.interpreter import Interpreter
from schemer.repl import eval_string, run_repl
from schemer.types import Number, NIL


def test_eval_string_renders_results(env):
    assert eval_string(env, "(+ 1 2)") == "3"
    assert eval_string(env, '"hi"') == '"hi"'
    assert eval_string(env, "'(a . b)") == "(a . b)"
    assert eval_string(env, "car") == "<primitive>"


def test_eval_string_renders_errors(env):
    assert eval_string(env, "undefined") == "Getting an unbound variable: undefined"
    assert eval_string(env, "(+ 1)") == "Expected 2 args; found values 1"
    assert eval_string(env, "(").startswith("Parse error")
    assert eval_string(env, '(load "does-not-exist.scm")').startswith("[Errno")


def test_eval_string_survives_deep_recursion(env):
    eval_string(env, "(define (loop n) (loop n))")
    assert eval_string(env, "(loop 1)") == "Recursion depth exceeded"
    assert eval_string(env, "(+ 1 1)") == "2"


def test_run_repl_until_quit(env, monkeypatch):
    monkeypatch.setenv("SCHEMER_PROMPT", "> ")
    stdin = io.StringIO("(define x 2)\nx\n\nquit\n(+ 1 1)\n")
    stdout = io.StringIO()
    run_repl(env, stdin, stdout)
    assert stdout.getvalue() == "> 2\n> 2\n> > "


def test_run_repl_until_eof(env, monkeypatch):
    monkeypatch.setenv("SCHEMER_PROMPT", "> ")
    stdout = io.StringIO()
    run_repl(env, io.StringIO("(car 1)\n"), stdout)
    assert stdout.getvalue() == "> Invalid type: expected pair, found 1\n> "


def test_interpreter_session():
    itp = Interpreter()
    assert itp.eval("(define x 3) (+ x 1)") == Number(4)
    assert itp.eval("x") == Number(3)
    assert itp.eval("") == NIL


def test_interpreter_load(tmp_path):
    path = tmp_path / "prog.scm"
    path.write_text("(define (sq x) (* x x))\n(sq 5)\n")
    itp = Interpreter()
    assert itp.load(str(path)) == Number(25)
    assert itp.eval("(sq 2)") == Number(4)


def test_main_loads_file(tmp_path, capsys):
    path = tmp_path / "prog.scm"
    path.write_text("(cons 1 '(2 3))\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "(1 2 3)\n"


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "prog.scm"
    path.write_text("(car 1)\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == "Invalid type: expected pair, found 1\n"


def test_main_without_file_starts_repl(monkeypatch, capsys):
    monkeypatch.setenv("SCHEMER_PROMPT", "")
    monkeypatch.setattr("sys.stdin", io.StringIO("(* 6 7)\nquit\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "42\n"


def test_eval_string_reports_reader_and_decoding_errors(env, tmp_path, monkeypatch):
    assert eval_string(env, "1" * 5000).startswith("Parse error")
    monkeypatch.chdir(tmp_path)
    (tmp_path / "binary.scm").write_bytes(b"\xff\xfe")
    assert eval_string(env, '(load "binary.scm")').startswith("Cannot decode binary.scm")
    assert eval_string(env, "(+ 1 1)") == "2"


def test_main_reports_deep_recursion(tmp_path, capsys):
    path = tmp_path / "loop.scm"
    path.write_text("(define (loop n) (loop n))\n(loop 1)\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == "Recursion depth exceeded\n"


def test_main_reports_undecodable_file(tmp_path, capsys):
    path = tmp_path / "binary.scm"
    path.write_bytes(b"\xff")
    assert main([str(path)]) == 1
    assert "Cannot decode" in capsys.readouterr().err
