"""Tests for command dispatch."""

import pytest

from edgetile.core.commands import (
    TILE_INTENTS,
    Command,
    CommandDispatcher,
    build_default_commands,
)
from edgetile.tiling.directional import DirectionalIntent as I
from edgetile.tiling.rect import Rect

from tests.conftest import FRAME


@pytest.fixture
def dispatcher(engine, gaps) -> CommandDispatcher:
    d = CommandDispatcher()
    build_default_commands(d, engine, gaps)
    return d


class TestCommand:

    def test_from_name_with_prefix(self):
        assert Command.from_name("shortcut-tile-window-to-left") is Command.TILE_LEFT

    def test_from_name_without_prefix(self):
        assert Command.from_name("increase-gap-size") is Command.INCREASE_GAP

    def test_from_name_unknown(self):
        with pytest.raises(ValueError):
            Command.from_name("tile-window-to-nowhere")

    def test_tile_intents_are_the_nine_presets(self):
        assert len(TILE_INTENTS) == 9
        assert len(set(TILE_INTENTS.values())) == 9
        assert TILE_INTENTS[Command.TILE_TOP_RIGHT] == I(True, False, False, True)
        assert TILE_INTENTS[Command.TILE_BOTTOM] == I(False, True, True, True)
        assert TILE_INTENTS[Command.TILE_LEFT] == I(True, True, True, False)
        assert TILE_INTENTS[Command.TILE_CENTER].is_center


class TestCommandDispatcher:

    def test_all_commands_registered(self, dispatcher):
        assert dispatcher.count == len(Command)
        assert dispatcher.command_names == sorted(c.value for c in Command)

    def test_execute_by_name(self, dispatcher, host):
        assert dispatcher.execute("shortcut-tile-window-to-right") is True
        assert host.get_window(1).frame == Rect(500, 0, 500, 800)

    def test_execute_by_enum(self, dispatcher, host):
        assert dispatcher.execute(Command.TILE_BOTTOM_LEFT) is True
        assert host.get_window(1).frame == Rect(0, 400, 500, 400)

    def test_restore_command(self, dispatcher, host):
        dispatcher.execute(Command.TILE_TOP)
        dispatcher.execute(Command.RESTORE)

        assert host.get_window(1).frame == FRAME

    def test_gap_commands(self, dispatcher, settings):
        dispatcher.execute(Command.INCREASE_GAP)
        dispatcher.execute(Command.INCREASE_GAP)
        dispatcher.execute(Command.DECREASE_GAP)

        assert settings.get_gap_size() == 1

    def test_align_command(self, dispatcher, host):
        dispatcher.execute("align-window-to-center")

        assert host.get_window(1).frame == Rect(300, 250, 400, 300)

    def test_unknown_command(self, dispatcher, caplog):
        assert dispatcher.execute("shortcut-make-coffee") is False
        assert "Unknown command" in caplog.text

    def test_handler_error_is_logged(self, caplog):
        d = CommandDispatcher()

        def boom():
            raise RuntimeError("window vanished")

        d.register(Command.RESTORE, boom)

        assert d.execute(Command.RESTORE) is False
        assert "Error executing command" in caplog.text

    def test_register_replaces(self):
        d = CommandDispatcher()
        calls = []
        d.register(Command.RESTORE, lambda: calls.append("a"))
        d.register(Command.RESTORE, lambda: calls.append("b"))

        d.execute(Command.RESTORE)

        assert d.count == 1
        assert calls == ["b"]

    def test_list_commands_by_category(self, dispatcher):
        tile = dispatcher.list_commands("tile")

        assert len(tile) == 9
        assert {e.command for e in dispatcher.list_commands("gap")} == {
            Command.INCREASE_GAP,
            Command.DECREASE_GAP,
        }

    def test_dump_state(self, dispatcher):
        dump = dispatcher.dump_state()

        assert "13 commands" in dump
        assert "shortcut-tile-window-restore" in dump
