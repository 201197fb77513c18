"""End-to-end tests running the CLI as a separate process.

What:
  Launch ``python -m postbayes.cli`` with the fixture CSV files and check exit
  codes and stdout.

Why:
  Confirms the module entry point and path bootstrapping work the way users
  invoke the tool, beyond what the in-process runner covers.

How:
  Build subprocess invocations with ``PYTHONPATH`` pointing at the in-repo
  source tree and compare the captured output.

Invariants & Safety:
  - Tests run against the local source tree, not an installed package.
  - Diagnostics stay on stderr so stdout is exactly the report.
"""

import os
import pathlib
import subprocess
import sys


PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[2]
DATA_DIR = PROJECT_ROOT / "tests" / "data"


def _run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    """Execute ``python -m postbayes.cli`` with ``args`` and capture its output."""

    cmd = [sys.executable, "-m", "postbayes.cli", *args]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(PROJECT_ROOT / "postbayes" / "src"), env.get("PYTHONPATH", "")) if part
    )
    return subprocess.run(cmd, text=True, capture_output=True, cwd=PROJECT_ROOT, env=env)


def test_cli_train_and_test() -> None:
    """Classify the fixture test set and report two of three correct."""

    result = _run_cli(str(DATA_DIR / "train_small.csv"), str(DATA_DIR / "test_small.csv"))

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "trained on 3 examples",
        "",
        "test data:",
        "  correct = ham, predicted = ham, log-probability score = -1.1",
        "  content = meeting",
        "",
        "  correct = spam, predicted = spam, log-probability score = -1.5",
        "  content = buy cheap",
        "",
        "  correct = spam, predicted = ham, log-probability score = -1.1",
        "  content = meeting now",
        "",
        "performance: 2 / 3 posts predicted correctly",
    ]


def test_cli_usage_error() -> None:
    result = _run_cli()

    assert result.returncode == 1
    assert result.stdout.strip() == "Usage: postbayes TRAIN_FILE [TEST_FILE]"


def test_cli_missing_file(tmp_path: pathlib.Path) -> None:
    missing = tmp_path / "nope.csv"
    result = _run_cli(str(missing))

    assert result.returncode == 1
    assert result.stdout.strip() == f"Error opening file: {missing}"
