import json
from pathlib import Path

from typer.testing import CliRunner

from message_expander.cli import app
from message_expander.core.expand.bootstrap import TEMPLATE_ENTRIES

runner = CliRunner()


def test_cli_init_creates_template(tmp_path: Path):
    r = runner.invoke(app, ["init", "deep/dir/start.json", "--root", str(tmp_path)])
    assert r.exit_code == 0, r.output
    assert "OK: created" in r.stdout

    created = tmp_path / "deep" / "dir" / "start.json"
    assert json.loads(created.read_text(encoding="utf-8")) == TEMPLATE_ENTRIES


def test_cli_init_leaves_existing_file(tmp_path: Path):
    target = tmp_path / "keep.json"
    target.write_text('[{"message": "mine"}]', encoding="utf-8")
    r = runner.invoke(app, ["init", str(target)])
    assert r.exit_code == 0, r.output
    assert "OK: exists" in r.stdout
    assert target.read_text(encoding="utf-8") == '[{"message": "mine"}]'
