"""Tests for the subprocess wrapper, prompts and tool checks."""

from unittest.mock import MagicMock, patch

import pytest

from ck_tool.dependencies import check_dependencies
from ck_tool.errors import CommandFailed
from ck_tool.prompts import ask, confirm
from ck_tool.runner import Runner

# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def _result(returncode=0, stdout=None):
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    return result


def test_run_capture_returns_stripped_stdout(tmp_path):
    with patch("subprocess.run", return_value=_result(stdout="4.20.1\n")) as mock_run:
        out = Runner().run(["git", "describe"], cwd=tmp_path, capture=True)

    assert out == "4.20.1"
    assert mock_run.call_args[0][0] == ["git", "describe"]
    assert mock_run.call_args[1]["cwd"] == str(tmp_path)


def test_run_failure_raises_with_exit_status():
    with patch("subprocess.run", return_value=_result(returncode=128)):
        with pytest.raises(CommandFailed) as exc:
            Runner().run(["git", "am", "0001.patch"])

    assert exc.value.returncode == 128
    assert exc.value.exit_code == 128
    assert "git am 0001.patch" in exc.value.message


def test_run_stringifies_paths(tmp_path):
    with patch("subprocess.run", return_value=_result()) as mock_run:
        Runner().run(["unzip", tmp_path / "a.zip"])
    assert mock_run.call_args[0][0] == ["unzip", str(tmp_path / "a.zip")]


@pytest.mark.parametrize("returncode, expected", [(0, True), (1, False)])
def test_succeeds(returncode, expected):
    with patch("subprocess.run", return_value=_result(returncode=returncode)):
        assert Runner().succeeds(["git", "rev-parse", "--verify", "x"]) is expected


def test_verbose_echoes_commands(capsys):
    with patch("subprocess.run", return_value=_result()):
        Runner(verbose=True).run(["git", "fetch"])
    assert "$ git fetch" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# prompts
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "reply, expected",
    [("y", True), ("Yes", True), ("n", False), ("", False), ("sure", False)],
)
def test_confirm(reply, expected):
    with patch("builtins.input", return_value=reply):
        assert confirm("Continue?") is expected


def test_confirm_eof_is_no():
    with patch("builtins.input", side_effect=EOFError):
        assert confirm("Continue?") is False


def test_ask_strips():
    with patch("builtins.input", return_value="  4.20.1 \n"):
        assert ask("Tag?") == "4.20.1"


# ---------------------------------------------------------------------------
# check_dependencies
# ---------------------------------------------------------------------------


def test_check_dependencies_all_present():
    with patch("shutil.which", return_value="/usr/bin/git"):
        check_dependencies({"git": "https://git-scm.com/"})


def test_check_dependencies_missing_exits(capsys):
    with patch("shutil.which", return_value=None):
        with pytest.raises(SystemExit) as exc:
            check_dependencies({"unzip": "https://example.com"})

    assert exc.value.code == 1
    assert "unzip" in capsys.readouterr().err
