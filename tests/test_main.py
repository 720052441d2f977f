import json

from main import process_program, run, main


def test_process_program_prints_result_and_scope(capsys):
    result = process_program("BEGIN b := 2; a := b * 3 END.")
    out = capsys.readouterr().out.splitlines()
    assert result == 0
    assert out == ["a = 6", "b = 2", "0"]


def test_process_program_expression(capsys):
    assert process_program("2 + 3 * 4") == 14
    assert capsys.readouterr().out.strip() == "14"


def test_process_program_reports_each_error_kind(capsys):
    assert process_program("2 : 3") is None
    assert process_program("BEGIN a := 1 b := 2 END.") is None
    assert process_program("4 / 0") is None
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Lexical error:")
    assert out[1].startswith("Syntax error:")
    assert out[2].startswith("Evaluation error:")


def test_process_program_shared_scope(capsys):
    session = {}
    process_program("BEGIN a := 3 END.", global_scope=session, show_scope=False)
    assert process_program("a * 2", global_scope=session, show_scope=False) == 6
    assert capsys.readouterr().out.splitlines() == ["0", "6"]


def test_process_program_print_ast(capsys):
    process_program("-1", print_ast=True)
    out = capsys.readouterr().out
    assert "AST:" in out
    assert "UnaryOp(-)" in out


def test_process_program_dump_ast(tmp_path, capsys):
    path = tmp_path / "ast.json"
    process_program("1 + 2", dump_ast_path=str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["node_type"] == "BinaryOp"
    assert f"Wrote AST JSON to {path}" in capsys.readouterr().out


def test_run_returns_result_and_scope():
    assert run("BEGIN x := 5 END.") == (0, {"x": 5})
    assert run("x + 1", {"x": 5}) == (6, {"x": 5})


def test_main_eval_exit_codes(capsys):
    assert main(["--eval", "1 + 1"]) == 0
    assert main(["-e", "1 / 0"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "2"
    assert out[1].startswith("Evaluation error:")


def test_interactive_mode_keeps_session(monkeypatch, capsys):
    lines = iter(["BEGIN a := 4 END.", "", "a * a", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main(["-i", "--no-scope"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["0", "16", "Goodbye!"]


def test_interactive_mode_fresh_scope(monkeypatch, capsys):
    lines = iter(["BEGIN a := 4 END.", "a"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    main(["--fresh-scope"])
    out = capsys.readouterr().out
    assert "Evaluation error: Undefined variable 'a'" in out


def test_process_program_reports_deep_nesting(capsys):
    assert process_program("(" * 1000 + "1" + ")" * 1000) is None
    assert process_program("-" * 3000 + "5") is None
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Syntax error: Expression nested too deeply",
        "Syntax error: Expression nested too deeply",
    ]


def test_interactive_mode_failed_line_does_not_leak(monkeypatch, capsys):
    lines = iter(["BEGIN a := 1; b := 1 / 0 END.", "a", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    main(["-i"])
    out = capsys.readouterr().out.splitlines()
    assert out[1].startswith("Evaluation error: Division by zero")
    assert out[2].startswith("Evaluation error: Undefined variable 'a'")
    assert out[3] == "Goodbye!"


def test_interactive_mode_survives_unexpected_errors(monkeypatch, capsys):
    import main as main_module

    real_process = main_module.process_program
    calls = []

    def flaky_process(text, **kwargs):
        calls.append(text)
        if len(calls) == 1:
            raise RuntimeError("boom")
        return real_process(text, **kwargs)

    lines = iter(["1 + 1", "2 + 2", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    monkeypatch.setattr(main_module, "process_program", flaky_process)
    main(["-i"])
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["Unexpected error: boom", "4", "Goodbye!"]
