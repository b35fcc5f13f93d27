"""Tests für die Kommandozeile (click)."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "school_config.yaml"


def _invoke(runner: CliRunner, config_path: Path, *args: str):
    return runner.invoke(cli, ["--config", str(config_path), *args])


class TestClassCommands:
    def test_name(self, runner, config_path):
        result = _invoke(runner, config_path, "class", "name", "B", "2018",
                         "--date", "2020-10-10")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "3B"

    def test_name_graduated(self, runner, config_path):
        result = _invoke(runner, config_path, "class", "name", "B", "2000",
                         "--date", "2020-10-10")
        assert result.exit_code == 1

    @pytest.mark.parametrize("year", ["0", "10000"])
    def test_name_year_out_of_range(self, runner, config_path, year):
        result = _invoke(runner, config_path, "class", "name", "B", year,
                         "--date", "2020-10-10")
        assert result.exit_code == 2
        assert "YEAR_FORMED" in result.output

    def test_name_letter_not_in_alphabet(self, runner, config_path):
        result = _invoke(runner, config_path, "class", "name", "Б", "2018",
                         "--date", "2020-10-10")
        assert result.exit_code == 1
        assert "Alphabet" in result.output

    def test_parse(self, runner, config_path):
        result = _invoke(runner, config_path, "class", "parse", "3B",
                         "--date", "2020-10-10")
        assert result.exit_code == 0, result.output
        assert "2018" in result.output
        assert "B" in result.output

    def test_parse_invalid(self, runner, config_path):
        result = _invoke(runner, config_path, "class", "parse", "12B",
                         "--date", "2020-10-10")
        assert result.exit_code == 1


class TestSearchCommand:
    def test_search(self, runner, config_path):
        result = _invoke(runner, config_path, "search", "iv id 3B 213bas",
                         "--date", "2020-10-10")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "iv:* & id:* & (3B:* | 2018B:*) & 213bas:*"

    def test_search_plain(self, runner, config_path):
        result = _invoke(runner, config_path, "search", "Altpapier 3B", "--plain")
        assert result.output.strip() == "Altpapier:* & 3B:*"

    def test_search_invalid(self, runner, config_path):
        result = _invoke(runner, config_path, "search", "iv i&d 3",
                         "--date", "2020-10-10")
        assert result.exit_code == 0
        assert "Leerer Ausdruck" in result.output


class TestPupilCommand:
    def test_search_document(self, runner, config_path):
        result = _invoke(runner, config_path, "pupil", "Ivan", "Ivanov", "3B",
                         "--date", "2020-10-10")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Ivan Ivanov 2018B B 2018"

    def test_class_without_letter(self, runner, config_path):
        result = _invoke(runner, config_path, "pupil", "Ivan", "Ivanov", "3",
                         "--date", "2020-10-10")
        assert result.exit_code == 1


class TestConfigCommands:
    def test_init_and_show(self, runner, config_path):
        result = _invoke(runner, config_path, "config", "init")
        assert result.exit_code == 0, result.output
        assert config_path.exists()

        result = _invoke(runner, config_path, "config", "show")
        assert result.exit_code == 0, result.output
        assert "Muster-Schule" in result.output

    def test_init_refuses_overwrite(self, runner, config_path):
        _invoke(runner, config_path, "config", "init")
        result = _invoke(runner, config_path, "config", "init")
        assert result.exit_code == 1
        result = _invoke(runner, config_path, "config", "init", "--force")
        assert result.exit_code == 0

    def test_cyrillic_config_accepts_cyrillic_letter(self, runner, config_path):
        config_path.write_text("alphabet: cyrillic\n", encoding="utf-8")
        result = _invoke(runner, config_path, "class", "name", "б", "2018",
                         "--date", "2020-10-10")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "3Б"

    def test_show_invalid_config(self, runner, config_path):
        config_path.write_text("alphabet: greek\n", encoding="utf-8")
        result = _invoke(runner, config_path, "config", "show")
        assert result.exit_code == 1
        assert "ungültig" in result.output

    def test_init_force_repairs_broken_file(self, runner, config_path):
        """Kaputtes YAML lässt sich mit init --force ersetzen."""
        config_path.write_text("alphabet: [\n", encoding="utf-8")
        result = _invoke(runner, config_path, "config", "show")
        assert result.exit_code == 1
        assert "ungültig" in result.output

        result = _invoke(runner, config_path, "config", "init", "--force")
        assert result.exit_code == 0, result.output
        result = _invoke(runner, config_path, "config", "show")
        assert result.exit_code == 0, result.output
        assert "Muster-Schule" in result.output
