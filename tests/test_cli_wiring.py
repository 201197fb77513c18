"""CLI wiring tests ensuring the Typer command maps every outcome correctly.

What:
  Invoke ``postbayes`` through :class:`typer.testing.CliRunner` for training
  reports, test reports, and each failure kind.

Why:
  The command is the only place errors become user-facing messages and exit
  codes; regressions here break scripted comparisons of report output.

How:
  Run the app against the CSV fixtures under ``tests/data`` (and temporary
  files) and assert on exit codes and stdout.
"""
from __future__ import annotations

import json

from typer.testing import CliRunner

from postbayes.cli import app


runner = CliRunner()

TRAINING_REPORT = """\
training data:
  label = spam, content = buy now
  label = ham, content = meeting now
  label = spam, content = buy buy
trained on 3 examples
vocabulary size = 3

classifier parameters:
  ham, 1 examples, log-prior = -1.1
  ham:meeting, count = 1, log-likelihood = 0
  ham:now, count = 1, log-likelihood = 0
  spam, 2 examples, log-prior = -0.405
  spam:buy, count = 2, log-likelihood = 0
  spam:now, count = 1, log-likelihood = -0.693

"""


def test_training_only_report(train_csv) -> None:
    result = runner.invoke(app, [str(train_csv)])

    assert result.exit_code == 0
    assert result.stdout == TRAINING_REPORT


def test_training_report_without_echo(train_csv) -> None:
    result = runner.invoke(app, [str(train_csv), "--quiet-training-data"])

    assert result.exit_code == 0
    assert result.stdout.startswith("trained on 3 examples\n")
    assert "training data:" not in result.stdout


def test_test_report(train_csv, test_csv) -> None:
    result = runner.invoke(app, [str(train_csv), str(test_csv)])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[:3] == ["trained on 3 examples", "", "test data:"]
    assert "  correct = ham, predicted = ham, log-probability score = -1.1" in lines
    assert lines[-1] == "performance: 2 / 3 posts predicted correctly"


def test_precision_override(train_csv, test_csv) -> None:
    result = runner.invoke(app, [str(train_csv), str(test_csv), "--precision", "5"])

    assert result.exit_code == 0
    assert "log-probability score = -1.0986" in result.stdout


def test_wrong_argument_count_prints_usage() -> None:
    for args in ([], ["a", "b", "c"]):
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert result.stdout.strip() == "Usage: postbayes TRAIN_FILE [TEST_FILE]"


def test_unopenable_training_file(tmp_path) -> None:
    missing = tmp_path / "missing.csv"
    result = runner.invoke(app, [str(missing)])

    assert result.exit_code == 1
    assert result.stdout.strip() == f"Error opening file: {missing}"


def test_unopenable_test_file_prints_nothing_else(train_csv, tmp_path) -> None:
    missing = tmp_path / "missing.csv"
    result = runner.invoke(app, [str(train_csv), str(missing)])

    assert result.exit_code == 1
    assert f"Error opening file: {missing}" in result.stdout
    assert "trained on" not in result.stdout


def test_malformed_training_row_aborts_without_report(data_dir) -> None:
    result = runner.invoke(app, [str(data_dir / "train_malformed.csv")])

    assert result.exit_code == 1
    assert "Malformed input:" in result.stdout
    assert "line 3" in result.stdout
    assert "training data:" not in result.stdout


def test_malformed_test_row_aborts_without_report(train_csv, data_dir) -> None:
    result = runner.invoke(app, [str(train_csv), str(data_dir / "train_malformed.csv")])

    assert result.exit_code == 1
    assert "Malformed input:" in result.stdout
    assert "performance:" not in result.stdout


def test_empty_training_set_cannot_classify(tmp_path, test_csv) -> None:
    empty = tmp_path / "empty.csv"
    empty.write_text("tag,content\n", encoding="utf-8")

    result = runner.invoke(app, [str(empty), str(test_csv)])

    assert result.exit_code == 1
    assert "Error:" in result.stdout


def test_invalid_configuration(train_csv, tmp_path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("report:\n  precision: -1\n", encoding="utf-8")

    result = runner.invoke(app, [str(train_csv), "--config", str(config)])

    assert result.exit_code == 1
    assert result.stdout.startswith("Error loading configuration:")


def test_configured_columns_and_stdout_logging(tmp_path) -> None:
    """Column names come from the config file; INFO logs can target stdout."""

    config = tmp_path / "postbayes.yaml"
    config.write_text(
        "csv:\n  label_field: label\n  content_field: text\n"
        "report:\n  show_training_data: false\n"
        "logging:\n  level: INFO\n  stream: stdout\n",
        encoding="utf-8",
    )
    train = tmp_path / "train.csv"
    train.write_text("label,text\nham,hi\n", encoding="utf-8")

    result = runner.invoke(app, [str(train), "--config", str(config)])

    assert result.exit_code == 0
    logs = [json.loads(line) for line in result.stdout.splitlines() if line.startswith("{")]
    assert [entry["msg"] for entry in logs] == ["run_started", "training_completed", "run_completed"]
    assert logs[-1]["train_checksum"].startswith("sha256:")
    assert "  ham, 1 examples, log-prior = 0" in result.stdout


def test_unknown_option_exits_with_one(train_csv) -> None:
    result = runner.invoke(app, [str(train_csv), "--bogus"])

    assert result.exit_code == 1
    assert "Usage: postbayes TRAIN_FILE [TEST_FILE]" in result.stdout
    assert "trained on" not in result.stdout


def test_non_integer_precision_exits_with_one(train_csv) -> None:
    result = runner.invoke(app, [str(train_csv), "--precision", "abc"])

    assert result.exit_code == 1
    assert "Usage: postbayes TRAIN_FILE [TEST_FILE]" in result.stdout


def test_empty_training_and_test_sets(tmp_path) -> None:
    """Header-only files on both sides still report the missing model."""

    empty = tmp_path / "empty.csv"
    empty.write_text("tag,content\n", encoding="utf-8")

    result = runner.invoke(app, [str(empty), str(empty)])

    assert result.exit_code == 1
    assert "Error:" in result.stdout
    assert "performance:" not in result.stdout


def test_unreadable_checksum_fails_before_report(train_csv, monkeypatch) -> None:
    def _vanished(path):
        raise FileNotFoundError(path)

    monkeypatch.setattr("postbayes.cli.file_checksum", _vanished)

    result = runner.invoke(app, [str(train_csv)])

    assert result.exit_code == 1
    assert result.stdout.strip() == f"Error opening file: {train_csv}"
