"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from advisory_shield.cli.main import EXIT_ERROR, EXIT_VULNERABLE, app
from advisory_shield.config import DATABASE_ENV_VAR


@pytest.fixture
def runner():
    return CliRunner()


class TestCheckCommand:
    """Test the check command."""

    def test_vulnerable_version(self, runner, database_path):
        """Test that vulnerable advisories are listed with exit code 1."""
        result = runner.invoke(app, ["check", "rack", "1.4.1", "--database", str(database_path)])

        assert result.exit_code == EXIT_VULNERABLE
        assert "CVE-2013-0263 [high] Timing attack in Rack::Session::Cookie" in result.output
        assert "CVE-2012-6109" not in result.output

    def test_advisory_without_score(self, runner, database_path):
        """Test that an advisory without a score is shown as unknown."""
        result = runner.invoke(app, ["check", "rack", "1.4.0", "--database", str(database_path)])

        assert result.exit_code == EXIT_VULNERABLE
        assert "CVE-2012-6109 [unknown]" in result.output

    def test_patched_version(self, runner, database_path):
        """Test that a patched version exits cleanly."""
        result = runner.invoke(app, ["check", "rack", "1.5.2", "--database", str(database_path)])

        assert result.exit_code == 0
        assert "no known vulnerabilities" in result.output

    def test_database_from_environment(self, runner, database_path, monkeypatch):
        """Test that the database path can come from the environment."""
        monkeypatch.setenv(DATABASE_ENV_VAR, str(database_path))
        result = runner.invoke(app, ["check", "actionpack", "3.1.11"])

        assert result.exit_code == 0

    def test_invalid_version(self, runner, database_path):
        """Test that an invalid version is an error."""
        result = runner.invoke(app, ["check", "rack", "latest", "--database", str(database_path)])

        assert result.exit_code == EXIT_ERROR
        assert "Malformed version" in result.output

    def test_markup_in_gem_name(self, runner, database_path):
        """Test that a gem name with bracketed text is printed literally."""
        result = runner.invoke(app, ["check", "[/red]rack", "1.0", "--database", str(database_path)])

        assert result.exit_code == 0
        assert "[/red]rack 1.0: no known vulnerabilities" in result.output

    def test_log_file(self, runner, database_path, tmp_path, reset_logging):
        """Test that --log-file captures the debug output of a check."""
        log_file = tmp_path / "check.log"
        result = runner.invoke(app, [
            "check", "rack", "1.4.1",
            "--database", str(database_path),
            "--verbose",
            "--log-file", str(log_file),
        ])

        assert result.exit_code == EXIT_VULNERABLE
        assert "rack 1.4.1 is vulnerable to 1 advisories" in log_file.read_text()

    def test_missing_database(self, runner, tmp_path):
        """Test that a missing database directory is an error."""
        result = runner.invoke(app, ["check", "rack", "1.0", "--database", str(tmp_path / "missing")])

        assert result.exit_code == EXIT_ERROR
        assert "does not exist" in result.output


class TestAdvisoryCommand:
    """Test the advisory command."""

    def test_patched(self, runner, advisory_file):
        """Test classifying a patched version."""
        result = runner.invoke(app, ["advisory", str(advisory_file), "3.1.11"])

        assert result.exit_code == 0
        assert "patched: true" in result.output
        assert "vulnerable: false" in result.output

    def test_vulnerable(self, runner, advisory_file):
        """Test classifying a vulnerable version."""
        result = runner.invoke(app, ["advisory", str(advisory_file), "3.0.9"])

        assert result.exit_code == EXIT_VULNERABLE
        assert "OSVDB-84243 [medium]" in result.output
        assert "unaffected: false" in result.output
        assert "vulnerable: true" in result.output

    def test_malformed_advisory(self, runner, tmp_path):
        """Test that a malformed advisory file is an error."""
        path = tmp_path / "CVE-0000-0000.yml"
        path.write_text('patched_versions:\n  - "?? 1.0"\n')

        result = runner.invoke(app, ["advisory", str(path), "1.0"])

        assert result.exit_code == EXIT_ERROR

    def test_markup_in_error_message(self, runner, tmp_path):
        """Test that bracketed text in a bad expression is printed literally."""
        path = tmp_path / "CVE-0000-0000.yml"
        path.write_text('patched_versions:\n  - "[/bold] 1.0"\n')

        result = runner.invoke(app, ["advisory", str(path), "1.0"])

        assert result.exit_code == EXIT_ERROR
        assert "[/bold]" in result.output


class TestStatsCommand:
    """Test the stats command."""

    def test_stats(self, runner, database_path):
        """Test reporting database size."""
        result = runner.invoke(app, ["stats", "--database", str(database_path)])

        assert result.exit_code == 0
        assert "gems: 2" in result.output
        assert "advisories: 3" in result.output
