from pathlib import Path

from minijs.cli import main


#run prints the final value when it is not undefined
def test_run_code_prints_result(capsys) -> None:
    assert main(["run", "-c", "let x = 5; let y = 3; x + y;"]) == 0
    assert capsys.readouterr().out == "8\n"


#run executes files and waits for deferred callbacks
def test_run_file_with_timer(tmp_path: Path, capsys) -> None:
    script = tmp_path / "hello.js"
    script.write_text('setTimeout(fn() { console.log("tick"); }, 10);\nconsole.log("start");\n')
    assert main(["run", str(script), "--tick", "0.002"]) == 0
    assert capsys.readouterr().out == "start\ntick\n"


#host-contract failures become an error message and exit status 1
def test_run_empty_source(capsys) -> None:
    assert main(["run", "-c", ""]) == 1
    assert "empty code string" in capsys.readouterr().err


#tokens dumps one token per line ending with EOF
def test_tokens_command(capsys) -> None:
    assert main(["tokens", "-c", "a >= 1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[1] for line in lines] == ["IDENT", "GTE", "NUMBER", "EOF"]


#parse prints the parenthesised tree
def test_parse_command(capsys) -> None:
    assert main(["parse", "-c", "1 + 2 * 3; let f = fn(a) { a };"]) == 0
    assert capsys.readouterr().out == "(1 + (2 * 3))\nlet f = fn(a) { a; };\n"


#parse reports dropped constructs and exits non-zero
def test_parse_command_reports_errors(capsys) -> None:
    assert main(["parse", "-c", "let = 1;"]) == 1
    assert "parse error" in capsys.readouterr().err
