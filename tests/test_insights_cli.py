# ABOUTME: Verifies the insights CLI exposes gap and story commands.
# ABOUTME: Runs both commands through Typer's runner on small synthetic inputs.

import pandas as pd
from typer.testing import CliRunner

from scripts import insights_cli

runner = CliRunner()


def test_cli_has_gaps_and_story_commands():
    app = insights_cli.app
    command_names = {cmd.name or cmd.callback.__name__ for cmd in app.registered_commands}
    assert {"gaps", "story"} <= command_names


def test_gaps_command_prints_and_writes_report(tmp_path):
    history = tmp_path / "history.csv"
    pd.DataFrame(
        {
            "subject": ["Algebra"] * 4 + ["History"] * 5,
            "accuracy": [0.5] * 4 + [0.9] * 5,
        }
    ).to_csv(history, index=False)
    output = tmp_path / "gaps.csv"

    result = runner.invoke(insights_cli.app, ["gaps", "--history", str(history), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "Algebra" in result.output
    report = pd.read_csv(output)
    assert report["subject"].tolist() == ["Algebra"]
    assert report["priority"].tolist() == ["medium"]


def test_gaps_command_reports_when_nothing_qualifies(tmp_path):
    history = tmp_path / "history.csv"
    pd.DataFrame({"subject": ["History"] * 3, "accuracy": [0.95] * 3}).to_csv(history, index=False)

    result = runner.invoke(insights_cli.app, ["gaps", "--history", str(history)])

    assert result.exit_code == 0
    assert "No knowledge gaps detected" in result.output


def test_gaps_command_fails_on_missing_history(tmp_path):
    result = runner.invoke(insights_cli.app, ["gaps", "--history", str(tmp_path / "absent.csv")])

    assert result.exit_code == 1


def test_story_command_prints_recommendation():
    result = runner.invoke(
        insights_cli.app,
        ["story", "--topic", "space", "--topic", "ocean", "--reading-level", "2", "--session-minutes", "10"],
    )

    assert result.exit_code == 0, result.output
    assert "space" in result.output
    assert "650s" in result.output


def test_story_command_rejects_invalid_config(tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("story:\n  pace: 3\n")

    result = runner.invoke(insights_cli.app, ["story", "--session-minutes", "5", "--config", str(config)])

    assert result.exit_code == 1
    assert "Invalid config" in result.output


def test_gaps_command_rejects_quoted_numbers_in_config(tmp_path):
    history = tmp_path / "history.csv"
    pd.DataFrame({"subject": ["Algebra"] * 4, "accuracy": [0.5] * 4}).to_csv(history, index=False)
    config = tmp_path / "quoted.yaml"
    config.write_text('knowledge_gaps:\n  min_attempts: "3"\n')

    result = runner.invoke(insights_cli.app, ["gaps", "--history", str(history), "--config", str(config)])

    assert result.exit_code == 1
    assert "Invalid config" in result.output
