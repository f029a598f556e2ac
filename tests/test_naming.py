from __future__ import annotations

from pathlib import Path

import pytest

from goat.errors import DuplicateDestinationError
from goat.naming import destination_name, is_invisible_file, map_templates, strip_template_suffix


@pytest.mark.parametrize(
    "value, expected",
    [
        ("gitignore", True),
        ("go.mod", False),
        (".gitignore", False),
        ("gitignore.bak", False),
    ],
)
def test_is_invisible_file(value, expected):
    assert is_invisible_file(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("gitignore", ".gitignore"),
        ("go.mod", "go.mod"),
        ("main.go", "main.go"),
    ],
)
def test_destination_name(value, expected):
    assert destination_name(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("templates/fiber/main.go.tmpl", "main.go"),
        ("templates/base/gitignore.tmpl", "gitignore"),
        ("go.mod.tmpl", "go.mod"),
        ("templates/fiber/invalidtemplate", None),
        ("templates/fiber/main.tmpl.go", None),
        ("templates/fiber/.tmpl", None),
    ],
)
def test_strip_template_suffix(value, expected):
    assert strip_template_suffix(value) == expected


def test_map_templates(tmp_path: Path):
    mapping = map_templates(
        [
            "templates/base/gitignore.tmpl",
            "templates/fiber/main.go.tmpl",
            "templates/fiber/go.mod.tmpl",
        ],
        tmp_path,
    )
    assert mapping == {
        "templates/base/gitignore.tmpl": tmp_path / ".gitignore",
        "templates/fiber/main.go.tmpl": tmp_path / "main.go",
        "templates/fiber/go.mod.tmpl": tmp_path / "go.mod",
    }


def test_map_templates_keeps_caller_order(tmp_path: Path):
    templates = ["b/go.mod.tmpl", "a/main.go.tmpl", "c/gitignore.tmpl"]
    assert list(map_templates(templates, tmp_path)) == templates


def test_map_templates_empty_and_skipped(tmp_path: Path):
    assert map_templates([], tmp_path) == {}
    assert map_templates(["templates/fiber/invalidtemplate"], tmp_path) == {}


def test_map_templates_repeated_identifier_is_kept_once(tmp_path: Path):
    mapping = map_templates(["x/main.go.tmpl", "x/main.go.tmpl"], tmp_path)
    assert mapping == {"x/main.go.tmpl": tmp_path / "main.go"}


def test_map_templates_rejects_colliding_destinations(tmp_path: Path):
    with pytest.raises(DuplicateDestinationError) as excinfo:
        map_templates(["fiber/main.go.tmpl", "gin/main.go.tmpl"], tmp_path)

    assert excinfo.value.template_id == "gin/main.go.tmpl"
    assert excinfo.value.path == tmp_path / "main.go"
