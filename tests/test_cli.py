"""Tests for the command-line interface."""

import json
from pathlib import Path

import pandas as pd
import pytest

from anchorstat.cli import main


@pytest.fixture
def responses_csv(tmp_path: Path) -> Path:
    """Write a small response table to CSV."""
    path = tmp_path / "responses.csv"
    pd.DataFrame({
        "q1": [10, 25, 40, 55, 70, 85, 95],
        "q2": [35, 42, 50, 48, 61, 66, 72],
    }).to_csv(path, index=False)
    return path


class TestAnalyzeCommand:
    """Tests for the analyze subcommand."""

    def test_text_output(self, responses_csv: Path, capsys: pytest.CaptureFixture) -> None:
        """Test human-readable output."""
        assert main(["analyze", str(responses_csv)]) == 0
        out = capsys.readouterr().out
        assert "Pearson r" in out
        assert "The actual answer is 54." in out

    def test_json_output(self, responses_csv: Path, capsys: pytest.CaptureFixture) -> None:
        """Test JSON output."""
        assert main(["analyze", str(responses_csv), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is True
        assert data["correlation"]["n"] == 7

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test an unreadable file returns a non-zero code."""
        assert main(["analyze", str(tmp_path / "missing.csv")]) == 1
        assert "could not read" in capsys.readouterr().err

    def test_invalid_column(self, responses_csv: Path) -> None:
        """Test a missing column returns a non-zero code."""
        assert main(["analyze", str(responses_csv), "--y-col", "estimate"]) == 1


class TestGenerateCommand:
    """Tests for the generate subcommand."""

    def test_writes_csv(self, tmp_path: Path) -> None:
        """Test synthetic responses are written to a file."""
        output = tmp_path / "synthetic.csv"
        assert main(["generate", "--count", "12", "--seed", "1", "-o", str(output)]) == 0

        df = pd.read_csv(output)
        assert list(df.columns) == ["q1", "q2"]
        assert len(df) == 12

    def test_stdout(self, capsys: pytest.CaptureFixture) -> None:
        """Test CSV goes to stdout without --output."""
        assert main(["generate", "--count", "3", "--mode", "random", "--seed", "2"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "q1,q2"
        assert len(lines) == 4

    def test_invalid_strength(self, capsys: pytest.CaptureFixture) -> None:
        """Test an invalid anchor strength returns a non-zero code."""
        assert main(["generate", "--anchor-strength", "3"]) == 1
        assert "anchor_strength" in capsys.readouterr().err


class TestMain:
    """Tests for top-level options."""

    def test_help_without_command(self, capsys: pytest.CaptureFixture) -> None:
        """Test help is printed when no command is given."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out
