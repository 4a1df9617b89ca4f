"""Tests for tick2paper/sinks.py — clipboard, file and stdout delivery."""

import subprocess
from unittest.mock import patch

import pytest

from tick2paper.errors import SinkError
from tick2paper.sinks import clipboard_sink, copy_to_clipboard, file_sink, stdout_sink


def test_copy_uses_first_available_command():
    with patch("tick2paper.sinks.shutil.which", side_effect=lambda c: "/usr/bin/xclip" if c == "xclip" else None), \
         patch("tick2paper.sinks.subprocess.run") as mock_run:
        assert copy_to_clipboard("outline") == "xclip"
        args, kwargs = mock_run.call_args
        assert args[0] == ("xclip", "-selection", "clipboard")
        assert kwargs["input"] == "outline"


def test_copy_skips_failing_command():
    def fake_run(command, **kwargs):
        if command[0] == "pbcopy":
            raise subprocess.CalledProcessError(1, command)

    with patch("tick2paper.sinks.shutil.which", return_value="/bin/x"), \
         patch("tick2paper.sinks.subprocess.run", side_effect=fake_run):
        assert copy_to_clipboard("outline") == "wl-copy"


def test_clipboard_sink_without_backend():
    with patch("tick2paper.sinks.shutil.which", return_value=None):
        assert copy_to_clipboard("outline") is None
        with pytest.raises(SinkError):
            clipboard_sink("outline")


def test_file_sink(tmp_path):
    path = tmp_path / "out" / "tasks.taskpaper"
    file_sink(path)("\nInbox:\n\n\t- Buy milk")
    assert path.read_text(encoding="utf-8") == "\nInbox:\n\n\t- Buy milk"


def test_file_sink_unwritable(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(SinkError):
        file_sink(blocker / "tasks.taskpaper")("text")


def test_stdout_sink(capsys):
    stdout_sink("\nInbox:")
    assert capsys.readouterr().out == "\nInbox:\n"
