import json

from typer.testing import CliRunner

from kata_toolkit.cli import app

runner = CliRunner()


def test_cli_expand_text():
    r = runner.invoke(app, ["expand", "thumbnail.{png,jp{e,}g}"])
    assert r.exit_code == 0
    assert sorted(r.stdout.splitlines()) == ["thumbnail.jpeg", "thumbnail.jpg", "thumbnail.png"]


def test_cli_expand_json_keep_duplicates():
    r = runner.invoke(app, ["expand", "{a,a}", "--keep-duplicates", "--format", "json"])
    assert r.exit_code == 0
    payload = json.loads(r.stdout)
    assert payload["command"] == "expand"
    assert payload["ok"] is True
    assert payload["result"] == {"count": 2, "expansions": ["a", "a"]}


def test_cli_expand_unbalanced():
    r = runner.invoke(app, ["expand", "a{b"])
    assert r.exit_code == 2
    assert "E_UNBALANCED_BRACES" in (r.stdout + r.stderr)


def test_cli_expand_unbalanced_json():
    r = runner.invoke(app, ["expand", "a}b", "--format", "json"])
    assert r.exit_code == 2
    payload = json.loads(r.stdout)
    assert payload["ok"] is False
    assert payload["error_count"] == 1
    assert payload["errors"][0]["code"] == "E_UNBALANCED_BRACES"
    assert payload["errors"][0]["path"] == "text[1]"


def test_cli_unknown_format():
    r = runner.invoke(app, ["expand", "abc", "--format", "xml"])
    assert r.exit_code == 2
    assert "E_UNKNOWN_FORMAT" in (r.stdout + r.stderr)
