import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run_cli(*args, **env_overrides):
    """Run `python -m main` from the project root with the given arguments."""
    env = {k: v for k, v in os.environ.items() if k != "TEXTECHO_LOG_LEVEL"}
    env.update(env_overrides)
    return subprocess.run(
        [sys.executable, "-m", "main", *args],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
    )


def test_dies_on_no_args():
    result = run_cli()
    assert result.returncode != 0
    assert "Usage" in result.stderr
    assert result.stdout == ""


def test_prints_joined_text():
    result = run_cli("hello", "world")
    assert result.returncode == 0
    assert result.stdout == "hello world\n"
    assert result.stderr == ""


def test_omit_newline():
    result = run_cli("-n", "hello", "world")
    assert result.returncode == 0
    assert result.stdout == "hello world"


def test_debug_logging_goes_to_stderr_only():
    result = run_cli("hello", "world", TEXTECHO_LOG_LEVEL="DEBUG")
    assert result.returncode == 0
    assert result.stdout == "hello world\n"
    assert "DEBUG" in result.stderr


def test_escape_sequences_are_written_verbatim():
    """Piped stdout keeps ANSI escapes inside tokens untouched."""
    result = run_cli("\x1b[31mred\x1b[0m", "x")
    assert result.returncode == 0
    assert result.stdout == "\x1b[31mred\x1b[0m x\n"
