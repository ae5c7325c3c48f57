"""Tests for the screenshots command line."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from screenshot_studio.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def log_dir(tmp_path: Path, monkeypatch) -> Path:
    """Keep CLI log files inside the test's temp directory."""
    path = tmp_path / "logs"
    monkeypatch.setenv("SCREENSHOTS_LOG_DIR", str(path))
    monkeypatch.delenv("SCREENSHOTS_FONTS_DIR", raising=False)
    return path


class TestPresetsCommand:
    """Tests for `screenshots presets`."""

    def test_lists_presets(self):
        result = runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        assert "Android Phone" in result.output
        assert "1290x2796" in result.output

    def test_lists_palettes(self):
        result = runner.invoke(app, ["presets"])
        assert "Word colors" in result.output
        assert "#FBBC04" in result.output


class TestExportCommand:
    """Tests for `screenshots export`."""

    def test_writes_one_png_per_slide(self, project_dir: Path, tmp_path: Path):
        out = tmp_path / "out"
        result = runner.invoke(app, ["export", str(project_dir / "project.yaml"), "--out", str(out)])

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out.iterdir()) == [
            "screenshot_1_200x400.png",
            "screenshot_2_200x400.png",
        ]

    def test_zip(self, project_dir: Path, tmp_path: Path):
        out = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(project_dir / "project.yaml"), "--out", str(out), "--zip"]
        )

        assert result.exit_code == 0, result.output
        with zipfile.ZipFile(out / "screenshots_200x400.zip") as archive:
            assert archive.namelist() == ["screenshot_1_200x400.png", "screenshot_2_200x400.png"]

    def test_only_one_slide(self, project_dir: Path, tmp_path: Path):
        out = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(project_dir / "project.yaml"), "-o", str(out), "--only", "2"]
        )

        assert result.exit_code == 0, result.output
        assert [p.name for p in out.iterdir()] == ["screenshot_2_200x400.png"]

    def test_only_out_of_range(self, project_dir: Path, tmp_path: Path):
        result = runner.invoke(
            app, ["export", str(project_dir / "project.yaml"), "-o", str(tmp_path / "out"), "--only", "3"]
        )
        assert result.exit_code == 1

    def test_invalid_project_exits_with_error(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text("output: {width: 50, height: 400}\n", encoding="utf-8")

        result = runner.invoke(app, ["export", str(path), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not (tmp_path / "out").exists()

    def test_missing_project_exits_with_error(self, tmp_path: Path):
        result = runner.invoke(app, ["export", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_project_without_slides(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text("output: {width: 200, height: 400}\n", encoding="utf-8")

        result = runner.invoke(app, ["export", str(path), "-o", str(tmp_path / "out")])

        assert result.exit_code == 0
        assert not (tmp_path / "out").exists()

    def test_logs_to_file(self, project_dir: Path, tmp_path: Path, log_dir: Path):
        runner.invoke(app, ["export", str(project_dir / "project.yaml"), "-o", str(tmp_path / "out")])
        log_text = (log_dir / "screenshots.log").read_text(encoding="utf-8")
        assert "Loaded 2 slide(s)" in log_text
