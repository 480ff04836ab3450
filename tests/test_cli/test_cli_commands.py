"""Tests for the semantic-css CLI commands."""
from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from semantic_css import __version__
from semantic_css.cli.main import cli
from semantic_css.compiler import tailwind

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def src(tmp_path) -> Path:
    root = tmp_path / "src"
    root.mkdir()
    shutil.copy(FIXTURES / "product-card.html", root / "product-card.html")
    (root / "layer.html").write_text('<div class="flex z-10">x</div>')
    (root / "empty.html").write_text("<p>plain</p>")
    return root


@pytest.fixture(autouse=True)
def no_api_keys(monkeypatch) -> None:
    monkeypatch.delenv("SEMANTIC_CSS_AI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "convert" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"semantic-css, version {__version__}" in result.output


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


class TestConvertCommand:
    def test_requires_input_and_output(self) -> None:
        result = CliRunner().invoke(cli, ["convert"])
        assert result.exit_code != 0
        assert "Missing option" in result.output

    def test_converts_tree(self, src, tmp_path) -> None:
        out = tmp_path / "out"
        result = CliRunner().invoke(cli, ["convert", "-i", str(src), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "Converted 2 file(s), skipped 1." in result.output
        assert "Conversion completed successfully!" in result.output
        assert (out / "product-card.module.css").exists()

    def test_reports_unresolved_classes(self, src, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["convert", "-i", str(src), "-o", str(tmp_path / "out")])
        assert "Unresolved classes: z-10" in result.output

    def test_verbose_echoes_progress(self, src, tmp_path) -> None:
        result = CliRunner().invoke(
            cli, ["convert", "-i", str(src), "-o", str(tmp_path / "out"), "--verbose"]
        )
        assert result.exit_code == 0
        assert "Files found: 3" in result.output
        assert "skipped" in result.output

    def test_missing_input_exits_with_error(self, tmp_path) -> None:
        result = CliRunner().invoke(
            cli, ["convert", "-i", str(tmp_path / "nope"), "-o", str(tmp_path / "out")]
        )
        assert result.exit_code == 1
        assert "Error processing files" in result.output

    def test_report_flag(self, src, tmp_path) -> None:
        out = tmp_path / "out"
        result = CliRunner().invoke(cli, ["convert", "-i", str(src), "-o", str(out), "--report"])
        assert result.exit_code == 0
        assert "File: " in result.output
        assert "[import-added] line 1" in result.output
        assert (out / "layer.report.json").exists()

    def test_ai_flag_without_key(self, src, tmp_path) -> None:
        out = tmp_path / "out"
        result = CliRunner().invoke(cli, ["convert", "-i", str(src), "-o", str(out), "--ai"])
        assert result.exit_code == 0
        assert "Unresolved classes" not in result.output
        assert "/* Add manual conversion */" in (out / "layer.module.css").read_text()

    def test_compile_without_node_falls_back(self, src, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(tailwind.shutil, "which", lambda exe: None)
        out = tmp_path / "out"
        result = CliRunner().invoke(
            cli, ["convert", "-i", str(src), "-o", str(out), "--compile", "-v"]
        )
        assert result.exit_code == 0
        assert "Warning:" in result.output
        assert "Compilation fell back to plain CSS for 2 file(s)" in result.output
        assert (out / "vanilla" / "layer.module.css").exists()

    def test_compile_fallback_is_quiet_without_verbose(self, src, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(tailwind.shutil, "which", lambda exe: None)
        out = tmp_path / "out"
        result = CliRunner().invoke(cli, ["convert", "-i", str(src), "-o", str(out), "--compile"])
        assert result.exit_code == 0
        assert "Warning:" not in result.output
        assert "fell back" not in result.output
        assert "Conversion completed successfully!" in result.output
        assert (out / "vanilla" / "layer.module.css").exists()


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_prints_css(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(FIXTURES / "product-card.html")])
        assert result.exit_code == 0
        assert result.output.startswith("/* Component: card */")
        assert ".card-button {" in result.output
        assert ".card-button:hover {" in result.output

    def test_mappings(self) -> None:
        result = CliRunner().invoke(
            cli, ["inspect", str(FIXTURES / "product-card.html"), "--mappings"]
        )
        assert "Mappings:" in result.output
        assert "  .card-heading <- font-bold text-2xl text-gray-900" in result.output

    def test_no_utility_classes(self, src) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(src / "empty.html")])
        assert result.exit_code == 0
        assert "No utility classes found." in result.output

    def test_missing_file(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(tmp_path / "nope.html")])
        assert result.exit_code != 0

    def test_writes_nothing(self, src) -> None:
        before = sorted(p.name for p in src.iterdir())
        CliRunner().invoke(cli, ["inspect", str(src / "product-card.html")])
        assert sorted(p.name for p in src.iterdir()) == before
