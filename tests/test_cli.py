from __future__ import annotations

import json
from pathlib import Path

import pytest

from bin_fit.cli import EXIT_DOES_NOT_FIT, EXIT_FITS, EXIT_INVALID_INPUT, load_input, main
from bin_fit.main import run_case
from bin_fit.models import Container, Item


def write_input(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "input.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_input(tmp_path: Path) -> None:
    path = write_input(
        tmp_path,
        {
            "container": {"length": 600, "width": 400, "height": 400},
            "items": [{"length": 380, "width": 320, "height": 100, "quantity": 2}],
        },
    )

    container, items = load_input(path)

    assert container.dimensions == (600, 400, 400)
    assert items[0].quantity == 2


def test_load_input_requires_container(tmp_path: Path) -> None:
    path = write_input(tmp_path, {"items": []})

    with pytest.raises(ValueError, match="container"):
        load_input(path)


def test_fits_writes_visualization(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_input(
        tmp_path,
        {
            "container": {"length": 4, "width": 2, "height": 2},
            "items": [{"length": 2, "width": 2, "height": 2, "quantity": 2}],
        },
    )
    output = tmp_path / "viz.json"

    code = main([str(path), "--output", str(output)])

    assert code == EXIT_FITS
    assert "can fit" in capsys.readouterr().out
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["stats"]["totalItems"] == 2


def test_does_not_fit(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_input(
        tmp_path,
        {
            "container": {"length": 10, "width": 10, "height": 10},
            "items": [{"length": 6, "width": 6, "height": 6, "quantity": 2}],
        },
    )

    code = main([str(path), "--ordering", "dimensions", "--warning-budget", "1"])

    assert code == EXIT_DOES_NOT_FIT
    assert "cannot fit" in capsys.readouterr().out


def test_invalid_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_input(
        tmp_path,
        {
            "container": {"length": 10, "width": 10, "height": 10},
            "items": [{"length": 1, "width": 1, "height": 1, "quantity": -1}],
        },
    )

    assert main([str(path)]) == EXIT_INVALID_INPUT
    assert "quantity" in capsys.readouterr().err


def test_missing_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.json")]) == EXIT_INVALID_INPUT


def test_run_case_writes_both_outputs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    fits = run_case(Container(length=4, width=2, height=2), [Item(length=2, width=2, height=2, quantity=2)])

    assert fits is True
    assert (tmp_path / "bin_packing_3d.json").exists()
    assert (tmp_path / "bin_packing_viewer.html").exists()
