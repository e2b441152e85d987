from pathlib import Path

from typer.testing import CliRunner

from message_expander.cli import app

runner = CliRunner()


def test_cli_entries_lists_decoded_kinds():
    r = runner.invoke(app, ["entries", "messages/main.json", "--root", "examples"])
    assert r.exit_code == 0, r.output
    assert r.stdout.splitlines() == [
        "note",
        'message: "You are a careful reviewer."',
        "message_json_file: parts/style.json",
        "message_text_file: parts/context.txt",
        "file: parts/sample.py",
        "file: parts/missing.c",
    ]


def test_cli_entries_does_not_bootstrap(tmp_path: Path):
    r = runner.invoke(app, ["entries", "absent.json", "--root", str(tmp_path)])
    assert r.exit_code == 1
    assert "E_FILE_READ" in r.output
    assert not (tmp_path / "absent.json").exists()
