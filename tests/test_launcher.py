import sys

import pytest

from scenario.launcher import LaunchError, SubprocessLauncher


def test_spawn_returns_exit_status(tmp_path):
    launcher = SubprocessLauncher()

    assert launcher.spawn(sys.executable, ["-c", "raise SystemExit(4)"], tmp_path) == 4


def test_spawn_runs_in_given_directory(tmp_path):
    SubprocessLauncher().spawn(sys.executable, ["-c", "open('here.txt', 'w').close()"], tmp_path)

    assert (tmp_path / "here.txt").is_file()


def test_missing_executable_raises_launch_error(tmp_path):
    with pytest.raises(LaunchError, match="definitely-not-a-binary"):
        SubprocessLauncher().spawn("definitely-not-a-binary", [], tmp_path)


def test_null_byte_argument_raises_launch_error(tmp_path):
    with pytest.raises(LaunchError):
        SubprocessLauncher().spawn(sys.executable, ["a\0b"], tmp_path)
