import subprocess
import pytest
from unittest.mock import patch
from growl.services.runner import ShellCommandRunner, resolve_shell, run_process
from growl.errors import CommandError


def test_resolve_shell_defaults_per_platform():
    assert resolve_shell(None, "linux") == ["bash", "-c"]
    assert resolve_shell(None, "darwin") == ["bash", "-c"]
    assert resolve_shell(None, "win32") == ["cmd", "/C"]


def test_resolve_shell_configured_value_wins():
    assert resolve_shell("sh -c", "linux") == ["sh", "-c"]
    assert resolve_shell("pwsh -Command", "win32") == ["pwsh", "-Command"]


def test_resolve_shell_blank_value_falls_back():
    assert resolve_shell("  ", "linux") == ["bash", "-c"]


def test_runner_passes_line_as_single_argument():
    runner = ShellCommandRunner("sh -c", platform="linux")

    with patch("growl.services.runner.subprocess.run") as mock_run:
        runner.run("echo a && echo b", {"A": "1"})

    mock_run.assert_called_once_with(["sh", "-c", "echo a && echo b"], env={"A": "1"}, check=True)


def test_runner_skips_empty_line():
    runner = ShellCommandRunner("sh -c", platform="linux")

    with patch("growl.services.runner.subprocess.run") as mock_run:
        runner.run("", {})

    mock_run.assert_not_called()


def test_runner_raises_with_exit_code():
    runner = ShellCommandRunner("sh -c", platform="linux")

    with patch("growl.services.runner.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(3, ["sh"])
        with pytest.raises(CommandError) as excinfo:
            runner.run("false", {})

    assert excinfo.value.returncode == 3
    assert "'false'" in str(excinfo.value)


def test_run_process_missing_executable():
    with patch("growl.services.runner.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("No such file")
        with pytest.raises(CommandError) as excinfo:
            run_process(["go", "run", "."])

    assert excinfo.value.returncode is None
    assert "Could not start 'go'" in str(excinfo.value)
