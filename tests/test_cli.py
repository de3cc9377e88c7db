"""Tests for the command-line interface."""

import pytest
import yaml
from click.testing import CliRunner

from setsim import __version__
from setsim.cli import format_index, main, parse_numbers
from setsim.config import CONFIG_ENV_VAR


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return CliRunner()


class TestCompare:
    """Test the compare command."""

    def test_text_jaccard(self, runner):
        result = runner.invoke(main, ["compare", "abcd", "bcde"])

        assert result.exit_code == 0
        assert "0.5000" in result.output

    def test_numbers(self, runner):
        result = runner.invoke(main, ["compare", "1,2,3", "2,3,4", "--numbers"])

        assert result.exit_code == 0
        assert "0.5000" in result.output

    @pytest.mark.parametrize("method", ["minhash", "lsh"])
    def test_identical_inputs(self, runner, method):
        result = runner.invoke(main, ["compare", "same text", "same text", "-m", method])

        assert result.exit_code == 0
        assert "1.0000" in result.output

    def test_invalid_numbers(self, runner):
        result = runner.invoke(main, ["compare", "1,x", "2", "--numbers"])

        assert result.exit_code == 2

    def test_invalid_threshold(self, runner):
        result = runner.invoke(main, ["compare", "a", "b", "-m", "lsh", "--threshold", "1.5"])

        assert result.exit_code == 2
        assert "threshold" in result.output

    def test_too_small_domain(self, runner):
        result = runner.invoke(main, ["compare", "1", "1", "--numbers", "-m", "minhash"])

        assert result.exit_code == 2
        assert "domain size" in result.output

    def test_empty_inputs(self, runner):
        result = runner.invoke(main, ["compare", "", "", "--numbers"])

        assert result.exit_code == 0
        assert "nan" in result.output

    def test_config_file_is_used(self, runner, tmp_path):
        path = tmp_path / "c.yml"
        path.write_text(yaml.safe_dump({"shingle_length": 3}))

        result = runner.invoke(main, ["compare", "abcd", "bcde", "--config", str(path)])

        assert result.exit_code == 0
        assert "0.3333" in result.output

    def test_config_file_with_wrong_type(self, runner, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text(yaml.safe_dump({"bands": "x"}))

        result = runner.invoke(main, ["compare", "abcd", "bcde", "--config", str(path)])

        assert result.exit_code == 2
        assert "bands" in result.output
        assert not isinstance(result.exception, TypeError)

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert __version__ in result.output


class TestConfigCommands:
    """Test config init/show."""

    def test_init_and_show(self, runner, tmp_path):
        path = tmp_path / "setsim.yml"

        result = runner.invoke(main, ["config", "init", "--path", str(path)])
        assert result.exit_code == 0
        assert yaml.safe_load(path.read_text())["bands"] == 20

        result = runner.invoke(main, ["config", "show", "--path", str(path)])
        assert result.exit_code == 0
        assert "signature_size" in result.output
        assert "auto" in result.output

    def test_init_declined_overwrite(self, runner, tmp_path):
        path = tmp_path / "setsim.yml"
        path.write_text("bands: 4\n")

        result = runner.invoke(main, ["config", "init", "--path", str(path)], input="n\n")

        assert "Aborted" in result.output
        assert path.read_text() == "bands: 4\n"

    def test_init_force(self, runner, tmp_path):
        path = tmp_path / "setsim.yml"
        path.write_text("bands: 4\n")

        result = runner.invoke(main, ["config", "init", "--path", str(path), "--force"])

        assert result.exit_code == 0
        assert yaml.safe_load(path.read_text())["bands"] == 20


class TestHelpers:

    def test_parse_numbers(self):
        assert parse_numbers("1, 2,3,") == [1, 2, 3]
        assert parse_numbers("") == []

    def test_format_index(self):
        assert format_index(0.25) == "0.2500"
        assert format_index(float("nan")).startswith("nan")
