"""
Tests for the command-line interface.
"""

import json
import logging

import pytest
import typer
from typer.testing import CliRunner

from pcset.cli.main import app, format_set
from pcset.cli.errors import SetParseError, parse_set, handle_cli_error, EXIT_CODES
from pcset.config import set_config
from pcset.exceptions import ConfigError, EmptySetError, LengthMismatchError
from pcset.logger import get_file_handler


@pytest.fixture
def cli_runner():
    """Create CLI runner for testing."""
    return CliRunner()


class TestParseSet:
    """Test set argument parsing."""
    
    def test_separators(self):
        """Test commas, spaces and mixtures of both."""
        assert parse_set("0,3,5,6,9") == [0, 3, 5, 6, 9]
        assert parse_set("1 4 6 7 10") == [1, 4, 6, 7, 10]
        assert parse_set(" 4, 7 ,9,A , B ") == [4, 7, 9, 10, 11]
    
    def test_letter_names(self):
        """Test lower and upper case letter names."""
        assert parse_set("a,b,c") == [10, 11, 12]
    
    def test_typo_is_reported(self):
        """Test that unreadable symbols are errors, not zero."""
        with pytest.raises(SetParseError) as exc_info:
            parse_set("0,x,4")
        
        error = exc_info.value
        assert error.exit_code == EXIT_CODES["invalid_usage"]
        assert error.suggestions
    
    def test_empty_argument(self):
        """Test that an argument without pitch classes is rejected."""
        with pytest.raises(SetParseError, match="No pitch classes"):
            parse_set(" , ")


class TestFormatSet:
    """Test set rendering."""
    
    def test_numeric(self):
        assert format_set([4, 7, 9, 10, 1]) == "[4, 7, 9, 10, 1]"
    
    def test_alpha(self):
        assert format_set([4, 7, 9, 10, 1], alpha=True) == "[4, 7, 9, A, 1]"
    
    def test_configured_notation(self):
        """Test notation and separator taken from config."""
        set_config('display', 'notation', 'alpha')
        set_config('display', 'separator', ' ')
        assert format_set([10, 11, 0]) == "[A B 0]"


class TestSetCommands:
    """Test the set operation commands."""
    
    def test_transform(self, cli_runner):
        result = cli_runner.invoke(app, ["transform", "0,3,5,6,9", "-t", "4"])
        assert result.exit_code == 0
        assert "[4, 7, 9, 10, 1]" in result.stdout
    
    def test_transform_alpha(self, cli_runner):
        result = cli_runner.invoke(app, ["transform", "0,3,5,6,9", "--transpose", "4", "--alpha"])
        assert result.exit_code == 0
        assert "[4, 7, 9, A, 1]" in result.stdout
    
    def test_transform_invert(self, cli_runner):
        result = cli_runner.invoke(app, ["transform", "4 7 9 A 1", "--invert"])
        assert result.exit_code == 0
        assert "[8, 5, 3, 2, 11]" in result.stdout
    
    @pytest.mark.parametrize("command, expected", [
        ("normal", "[4, 6, 7, 10, 1]"),
        ("reduce", "[0, 2, 3, 6, 9]"),
        ("prime", "[0, 1, 3, 6, 9]"),
        ("zero", "[0, 3, 5, 6, 9]"),
        ("complement", "[0, 2, 3, 5, 8, 9, 11]"),
    ])
    def test_forms(self, cli_runner, command, expected):
        """Test each single-set command on T1 of the base set."""
        result = cli_runner.invoke(app, [command, "1,4,6,7,10"])
        assert result.exit_code == 0
        assert expected in result.stdout
    
    def test_names(self, cli_runner):
        result = cli_runner.invoke(app, ["names", "0,3,7"])
        assert result.exit_code == 0
        assert "C D#/Eb G" in result.stdout
    
    def test_analyze(self, cli_runner):
        result = cli_runner.invoke(app, ["analyze", "1,4,6,7,10"])
        assert result.exit_code == 0
        assert "Set Analysis" in result.stdout
        assert "Prime form" in result.stdout
        assert "[0, 1, 3, 6, 9]" in result.stdout
    
    def test_subsets(self, cli_runner):
        result = cli_runner.invoke(
            app, ["subsets", "2,3,4,6,7,9", "3,0,9", "2,3,7", "1,5,8", "2,7,8", "4,6,9"]
        )
        assert result.exit_code == 0
        assert "2 of 5 found" in result.stdout
    
    def test_pairs(self, cli_runner):
        result = cli_runner.invoke(app, ["pairs", "0,1,2", "2,1,0", "3,4,5"])
        assert result.exit_code == 0
        assert "[0, 1, 2] [3, 4, 5]" in result.stdout
        assert "4 pairs" in result.stdout


class TestErrorHandling:
    """Test error reporting from commands."""
    
    def test_parse_error(self, cli_runner):
        result = cli_runner.invoke(app, ["prime", "0,x,4"])
        assert result.exit_code == EXIT_CODES["invalid_usage"]
        assert "SetParseError" in result.stdout
        assert "Suggestions" in result.stdout
    
    def test_empty_set(self, cli_runner):
        result = cli_runner.invoke(app, ["normal", ","])
        assert result.exit_code == EXIT_CODES["invalid_usage"]
    
    def test_missing_argument(self, cli_runner):
        result = cli_runner.invoke(app, ["prime"])
        assert result.exit_code != 0


class TestGlobalOptions:
    """Test global options and auxiliary commands."""
    
    def test_help(self, cli_runner):
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("transform", "normal", "prime", "subsets", "pairs"):
            assert command in result.stdout
    
    def test_config_file_option(self, cli_runner, tmp_path):
        """Test that --config changes the output notation."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({'display': {'notation': 'alpha'}}))
        
        result = cli_runner.invoke(app, ["--config", str(config_file), "transform", "0,4,7", "-t", "3"])
        assert result.exit_code == 0
        assert "[3, 7, A]" in result.stdout
    
    def test_invalid_config_file(self, cli_runner, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{broken")
        
        result = cli_runner.invoke(app, ["--config", str(config_file), "prime", "0,4,7"])
        assert result.exit_code == EXIT_CODES["config_error"]
    
    def test_config_show(self, cli_runner):
        result = cli_runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "strict_parsing" in result.stdout
    
    def test_config_save(self, cli_runner, tmp_path):
        output_file = tmp_path / "saved.json"
        result = cli_runner.invoke(app, ["config", "save", str(output_file)])
        assert result.exit_code == 0
        assert json.loads(output_file.read_text())['display']['notation'] == 'numeric'
    
    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "PCSet Version" in result.stdout
    
    def test_config_file_logging_section(self, cli_runner, tmp_path):
        """Test that the logging section of --config takes effect."""
        log_file = tmp_path / "cli.log"
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            'logging': {'level': 'INFO', 'file_logging': True, 'log_file': str(log_file)}
        }))
        
        result = cli_runner.invoke(app, ["--config", str(config_file), "prime", "0,4,7"])
        
        assert result.exit_code == 0
        assert logging.getLogger('pcset').level == logging.INFO
        assert get_file_handler() is not None
        assert log_file.exists()
    
    def test_flags_override_config_level(self, cli_runner, tmp_path):
        """Test that --quiet wins over the level in the config file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({'logging': {'level': 'DEBUG'}}))
        
        result = cli_runner.invoke(app, ["--quiet", "--config", str(config_file), "prime", "0,4,7"])
        
        assert result.exit_code == 0
        assert logging.getLogger('pcset').level == logging.ERROR


class TestExitCodes:
    """Test the exit code chosen for each kind of error."""
    
    @pytest.mark.parametrize("error, expected", [
        (SetParseError("bad set"), EXIT_CODES["invalid_usage"]),
        (EmptySetError("Cannot normalize an empty set"), EXIT_CODES["set_error"]),
        (LengthMismatchError("length mismatch"), EXIT_CODES["set_error"]),
        (ConfigError("bad config"), EXIT_CODES["config_error"]),
        (RuntimeError("boom"), EXIT_CODES["general_error"]),
    ])
    def test_exit_code(self, error, expected):
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(error, "prime")
        assert exc_info.value.exit_code == expected
    
    def test_documented_values(self):
        assert EXIT_CODES["general_error"] == 1
        assert EXIT_CODES["invalid_usage"] == 2
        assert EXIT_CODES["set_error"] == 10
        assert EXIT_CODES["config_error"] == 13
