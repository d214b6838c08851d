"""Tests for the command line driver."""

import logging

import pytest

from edgetile.__main__ import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMain:

    def test_runs_commands(self, capsys):
        code = main([
            "--work-area", "0,0,1000,800",
            "--frame", "100,100,400,300",
            "tile-window-to-left",
            "shortcut-tile-window-to-left",
            "tile-window-restore",
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "Rect(500x800+0+0)" in out
        assert "Rect(250x800+0+0)" not in out  # default side steps: 0.5, 0.333
        assert "Rect(333x800+0+0)" in out
        assert out.strip().splitlines()[-1].endswith("Rect(400x300+100+100)")

    def test_gap_and_custom_steps(self, capsys):
        code = main([
            "--work-area", "0,0,1000,800",
            "--gap", "2",
            "--steps-center", "0.5",
            "tile-window-to-center",
        ])
        out = capsys.readouterr().out

        assert code == 0
        # 980x784 gapped area, half size, centered
        assert "Rect(490x392+255+204)" in out

    def test_gap_commands_print_notifications(self, capsys):
        main(["increase-gap-size"])
        out = capsys.readouterr().out

        assert "[edgetile] Gap size is now at 1 percent" in out

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        assert "shortcut-tile-window-to-bottom-right" in capsys.readouterr().out

    def test_unknown_command_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["tile-window-to-nowhere"])

        assert exc_info.value.code == 2

    def test_bad_rect_exits(self):
        with pytest.raises(SystemExit):
            main(["--frame", "1,2,3", "tile-window-to-left"])
