from __future__ import annotations

import logging
from pathlib import Path

import pytest

from goat import cli
from goat.cli import main
from goat.resources import InMemoryTemplateSource


@pytest.fixture()
def build_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[Path, list[str]]]:
    calls: list[tuple[Path, list[str]]] = []
    monkeypatch.setattr(cli, "run_command", lambda directory, command: calls.append((directory, command)))
    return calls


def _answers(*values: str):
    iterator = iter(values)
    return lambda prompt: next(iterator)


def test_cli_create_generates_project(tmp_path: Path, build_calls):
    exit_code = main(
        ["create", "--stack", "gin", "-n", "demo", "-m", "example.com/demo", "-d", str(tmp_path)]
    )
    assert exit_code == 0
    project_dir = tmp_path / "demo"
    assert sorted(path.name for path in project_dir.iterdir()) == [".gitignore", "go.mod", "main.go"]
    assert "example.com/demo" in (project_dir / "go.mod").read_text(encoding="utf-8")
    assert build_calls == [(project_dir, ["go", "mod", "tidy"])]


def test_cli_create_skip_build(tmp_path: Path, build_calls):
    exit_code = main(
        ["create", "-n", "demo", "-m", "example.com/demo", "-d", str(tmp_path), "--skip-build"]
    )
    assert exit_code == 0
    assert build_calls == []


def test_cli_create_existing_directory_fails(tmp_path: Path, build_calls, capsys):
    (tmp_path / "demo").mkdir()
    exit_code = main(["create", "-n", "demo", "-m", "example.com/demo", "-d", str(tmp_path)])
    assert exit_code == 1
    assert "already exists" in capsys.readouterr().err
    assert build_calls == []


def test_cli_create_unknown_stack(tmp_path: Path, capsys):
    exit_code = main(["create", "-s", "echo", "-n", "demo", "-m", "x", "-d", str(tmp_path)])
    assert exit_code == 1
    assert "unknown stack" in capsys.readouterr().err


def test_cli_create_blank_name(tmp_path: Path, capsys):
    exit_code = main(["create", "-n", " ", "-m", "example.com/demo", "-d", str(tmp_path)])
    assert exit_code == 1
    assert "project name is required" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_wizard_generates_project(tmp_path: Path, build_calls, capsys):
    exit_code = main(
        ["create-fiber", "-d", str(tmp_path)],
        read_line=_answers("demo", "example.com/demo"),
    )
    assert exit_code == 0
    assert (tmp_path / "demo" / "main.go").exists()
    output = capsys.readouterr().out
    assert "Project 'demo' created successfully!" in output
    assert "go run main.go" in output


def test_cli_wizard_cancelled(tmp_path: Path, build_calls):
    def cancel(prompt: str) -> str:
        raise KeyboardInterrupt

    exit_code = main(["create-gin", "-d", str(tmp_path)], read_line=cancel)
    assert exit_code == 1
    assert list(tmp_path.iterdir()) == []
    assert build_calls == []


def test_cli_render_writes_to_output(tmp_path: Path):
    output_path = tmp_path / "go.mod"
    exit_code = main(
        ["render", "templates/fiber/go.mod.tmpl", "-m", "example.com/demo", "-o", str(output_path)]
    )
    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8").startswith("module example.com/demo\n")


def test_cli_render_to_stdout(capsys):
    exit_code = main(["render", "templates/gin/main.go.tmpl", "-n", "demo"])
    assert exit_code == 0
    assert 'Hello from demo!' in capsys.readouterr().out


def test_cli_render_unknown_template(capsys):
    assert main(["render", "templates/does/not/exist.tmpl"]) == 1
    assert "templates/does/not/exist.tmpl" in capsys.readouterr().err


def test_cli_stacks(capsys):
    assert main(["stacks"]) == 0
    output = capsys.readouterr().out
    assert "fiber" in output
    assert "gin" in output


def test_cli_render_invalid_utf8_template(capsys):
    source = InMemoryTemplateSource({"x/a.tmpl": b"\xff{{.ProjectName}}"})
    assert main(["render", "x/a.tmpl", "-n", "d"], source=source) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_cli_reports_project_creation_once(tmp_path: Path, build_calls, capsys, caplog):
    caplog.set_level(logging.INFO, logger="goat")
    exit_code = main(["-v", "create", "-n", "demo", "-m", "example.com/demo", "-d", str(tmp_path)])
    assert exit_code == 0
    assert "Creating project" not in capsys.readouterr().out
    messages = [record.getMessage() for record in caplog.records]
    assert sum(message.startswith("Creating project") for message in messages) == 1
