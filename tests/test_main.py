from lispy.__main__ import main


def test_eval_flag(capsys):
    assert main(["--no-prelude", "-e", "+ 1 2"]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_eval_flag_with_prelude(capsys):
    assert main(["-e", "sum {1 2 3}"]) == 0
    assert capsys.readouterr().out.strip() == "6"


def test_scripts_then_eval(tmp_path, capsys):
    script = tmp_path / "defs.lspy"
    script.write_text("(def {x} 5)\n(head {})\n", encoding="utf-8")
    assert main(["--no-prelude", str(script), "-e", "* x x"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Error: Function 'head' passed {} for argument 0.", "25"]


def test_syntax_error_exit_status(capsys):
    assert main(["--no-prelude", "-e", "(+ 1"]) == 1
    assert "Syntax error" in capsys.readouterr().err


def test_missing_script(tmp_path, capsys):
    assert main(["--no-prelude", str(tmp_path / "missing.lspy")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_repl_reads_until_eof(monkeypatch, capsys):
    lines = iter(["+ 2 2", "", "(", "x"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["--no-prelude"]) == 0
    out = capsys.readouterr().out
    assert "4" in out
    assert "Syntax error" in out
    assert "Error: Unbound Symbol 'x'" in out


def test_repl_survives_runaway_recursion(monkeypatch, capsys):
    lines = iter(["def {loop} (\\ {n} {loop n})", "loop 1", "+ 1 2"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["--no-prelude"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Error: maximum recursion depth exceeded" in out[-3]
    assert out[-2].endswith("3")


def test_script_reports_runaway_recursion(tmp_path, capsys):
    script = tmp_path / "loop.lspy"
    script.write_text("(def {loop} (\\ {n} {loop n}))\n(loop 1)\n", encoding="utf-8")
    assert main(["--no-prelude", str(script), "-e", "+ 1 2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Error: maximum recursion depth exceeded", "3"]
