"""Tests for CLI argument validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from main import CLIArgs


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text("")
    return path


def test_delete_requires_score_id(config_path: Path) -> None:
    with pytest.raises(ValidationError, match="score id"):
        CLIArgs(command="delete", config=config_path)


def test_delete_with_score_id(config_path: Path) -> None:
    args = CLIArgs(command="delete", config=config_path, score_id="score-abc")
    assert args.score_id == "score-abc"


def test_other_commands_need_no_score_id(config_path: Path) -> None:
    assert CLIArgs(command="scores", config=config_path).score_id is None


def test_missing_config_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="Config file not found"):
        CLIArgs(command="fact", config=tmp_path / "nope.yaml")
