"""Comprehensive CLI tests for aumai-testdatagen."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from aumai_testdatagen.cli import main


# ---------------------------------------------------------------------------
# Version / help
# ---------------------------------------------------------------------------


class TestCliMeta:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.output


# ---------------------------------------------------------------------------
# `generate` command
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    def test_generate_requires_template(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["generate"])
        assert result.exit_code != 0

    def test_generate_writes_fixture(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                main,
                ["generate", "user", "--count", "3", "--seed", "42", "--fixtures-dir", "out"],
            )
            assert result.exit_code == 0, result.output
            records = json.loads(Path("out/users.json").read_text(encoding="utf-8"))
            assert len(records) == 3
            assert "email" in records[0]
            assert "Generated 3 user records" in result.output
            assert "Seed: 42" in result.output
            assert "users.json" in result.output

    def test_generate_custom_output_name(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                main,
                ["generate", "product", "--output", "catalog.json", "--fixtures-dir", "fx"],
            )
            assert result.exit_code == 0, result.output
            records = json.loads(Path("fx/catalog.json").read_text(encoding="utf-8"))
            assert len(records) == 1

    def test_generate_reports_generated_seed(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["generate", "order", "--fixtures-dir", "fx"])
            assert result.exit_code == 0, result.output
            assert "Seed: " in result.output

    def test_generate_unique_and_variations(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                main,
                [
                    "generate", "user",
                    "--count", "4",
                    "--unique",
                    "--variations",
                    "--seed", "7",
                    "--fixtures-dir", "fx",
                ],
            )
            assert result.exit_code == 0, result.output
            assert "All records are unique" in result.output
            assert "Variations enabled" in result.output

    def test_generate_unknown_template_fails(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["generate", "nonexistent", "--fixtures-dir", "fx"])
            assert result.exit_code != 0
            assert "nonexistent" in result.output
            assert "user" in result.output

    def test_generate_count_min_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "user", "--count", "0"])
        assert result.exit_code != 0

    def test_generate_fixtures_dir_from_env(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                main,
                ["generate", "user", "--seed", "1"],
                env={"AUMAI_TESTDATAGEN_FIXTURES_DIR": "from-env"},
            )
            assert result.exit_code == 0, result.output
            assert Path("from-env/users.json").is_file()

    def test_generate_from_templates_dir(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("tpl").mkdir()
            Path("tpl/widget.json").write_text(
                json.dumps({"schema": {"size": "enum"}, "enums": {"size": ["S"]}}),
                encoding="utf-8",
            )
            result = runner.invoke(
                main,
                ["generate", "widget", "--templates-dir", "tpl", "--fixtures-dir", "fx"],
            )
            assert result.exit_code == 0, result.output
            records = json.loads(Path("fx/widgets.json").read_text(encoding="utf-8"))
            assert records == [{"size": "S"}]

    def test_generate_malformed_template_fails(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("tpl").mkdir()
            Path("tpl/broken.json").write_text("{", encoding="utf-8")
            result = runner.invoke(
                main,
                ["generate", "broken", "--templates-dir", "tpl", "--fixtures-dir", "fx"],
            )
            assert result.exit_code != 0
            assert "broken" in result.output

    @pytest.mark.parametrize("template", ["user", "product", "order"])
    def test_all_builtin_templates_generate(self, template: str) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                main, ["generate", template, "--count", "2", "--fixtures-dir", "fx"]
            )
            assert result.exit_code == 0, result.output
            records = json.loads(Path(f"fx/{template}s.json").read_text(encoding="utf-8"))
            assert len(records) == 2


# ---------------------------------------------------------------------------
# `templates` command
# ---------------------------------------------------------------------------


class TestTemplatesCommand:
    def test_templates_requires_list(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["templates"])
        assert result.exit_code != 0

    def test_templates_list_builtins(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["templates", "--list"])
        assert result.exit_code == 0
        assert "user" in result.output
        assert "product" in result.output
        assert "order" in result.output
        assert "fields" in result.output

    def test_templates_list_includes_templates_dir(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("tpl").mkdir()
            Path("tpl/gadget.json").write_text(
                json.dumps({"schema": {"a": "string", "b": "number"}}), encoding="utf-8"
            )
            result = runner.invoke(main, ["templates", "--list", "--templates-dir", "tpl"])
            assert result.exit_code == 0
            assert "gadget  (2 fields)" in result.output
