"""
edgetile.core.commands - Dispatcher de comandos de tiling.

Cada atajo del host se identifica con un string (por ejemplo
"shortcut-tile-window-to-left"). El enum Command recoge esos nombres y
el CommandDispatcher los resuelve a la operacion del motor:

    dispatcher = CommandDispatcher()
    build_default_commands(dispatcher, engine, gaps)
    dispatcher.execute("shortcut-tile-window-to-left")

Nueve de los comandos son el mismo tiling con distinta
DirectionalIntent; el resto no recibe argumentos.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from edgetile.tiling.directional import DirectionalIntent

if TYPE_CHECKING:
    from edgetile.tiling.engine import TilingEngine
    from edgetile.tiling.gaps import GapSizeController

log = logging.getLogger(__name__)


# Type for command functions: called with no arguments
CommandFn = Callable[[], object]


class Command(enum.Enum):
    """Atajos que el host puede despachar, por su nombre."""

    ALIGN_CENTER = "shortcut-align-window-to-center"
    TILE_CENTER = "shortcut-tile-window-to-center"
    TILE_LEFT = "shortcut-tile-window-to-left"
    TILE_RIGHT = "shortcut-tile-window-to-right"
    TILE_TOP = "shortcut-tile-window-to-top"
    TILE_TOP_LEFT = "shortcut-tile-window-to-top-left"
    TILE_TOP_RIGHT = "shortcut-tile-window-to-top-right"
    TILE_BOTTOM = "shortcut-tile-window-to-bottom"
    TILE_BOTTOM_LEFT = "shortcut-tile-window-to-bottom-left"
    TILE_BOTTOM_RIGHT = "shortcut-tile-window-to-bottom-right"
    RESTORE = "shortcut-tile-window-restore"
    INCREASE_GAP = "shortcut-increase-gap-size"
    DECREASE_GAP = "shortcut-decrease-gap-size"

    @classmethod
    def from_name(cls, name: str) -> Command:
        """
        Resuelve un nombre de atajo, con o sin el prefijo "shortcut-".

        Raises:
            ValueError: si el nombre no corresponde a ningun comando.
        """
        if not name.startswith("shortcut-"):
            name = f"shortcut-{name}"
        return cls(name)


# Comando de tiling -> intencion direccional
TILE_INTENTS: dict[Command, DirectionalIntent] = {
    Command.TILE_CENTER: DirectionalIntent.CENTER,
    Command.TILE_LEFT: DirectionalIntent.LEFT,
    Command.TILE_RIGHT: DirectionalIntent.RIGHT,
    Command.TILE_TOP: DirectionalIntent.TOP,
    Command.TILE_TOP_LEFT: DirectionalIntent.TOP_LEFT,
    Command.TILE_TOP_RIGHT: DirectionalIntent.TOP_RIGHT,
    Command.TILE_BOTTOM: DirectionalIntent.BOTTOM,
    Command.TILE_BOTTOM_LEFT: DirectionalIntent.BOTTOM_LEFT,
    Command.TILE_BOTTOM_RIGHT: DirectionalIntent.BOTTOM_RIGHT,
}


@dataclass(frozen=True, slots=True)
class CommandEntry:
    """Metadata for a registered command."""

    command: Command
    fn: CommandFn
    description: str
    category: str


class CommandDispatcher:
    """
    Registry that maps Command values to callable functions.

    The host only knows the shortcut names; the dispatcher resolves
    them to engine operations at runtime.
    """

    def __init__(self) -> None:
        self._commands: dict[Command, CommandEntry] = {}

    @property
    def count(self) -> int:
        return len(self._commands)

    @property
    def command_names(self) -> list[str]:
        """All registered shortcut names, sorted."""
        return sorted(c.value for c in self._commands)

    def register(
        self,
        command: Command,
        fn: CommandFn,
        description: str = "",
        category: str = "general",
    ) -> None:
        """
        Register a handler for a command.

        If the command already has a handler, it is replaced.
        """
        if command in self._commands:
            log.info("Command replaced: %s", command.value)

        self._commands[command] = CommandEntry(
            command=command,
            fn=fn,
            description=description,
            category=category,
        )
        log.debug("Command registered: %s (%s)", command.value, category)

    def get(self, command: Command | str) -> CommandEntry | None:
        """Look up a command by enum value or shortcut name."""
        resolved = self._resolve(command)
        if resolved is None:
            return None
        return self._commands.get(resolved)

    def has(self, command: Command | str) -> bool:
        return self.get(command) is not None

    def execute(self, command: Command | str) -> bool:
        """
        Execute a command.

        Args:
            command: A Command or its shortcut name.

        Returns:
            True if the command was found and executed successfully.
        """
        entry = self.get(command)
        if entry is None:
            log.warning("Unknown command: %s", command)
            return False

        log.debug("Executing command: %s", entry.command.value)
        try:
            entry.fn()
        except Exception:
            log.exception("Error executing command: %s", entry.command.value)
            return False

        return True

    def list_commands(self, category: str | None = None) -> list[CommandEntry]:
        """List registered commands, optionally filtered by category."""
        entries = list(self._commands.values())
        if category is not None:
            entries = [e for e in entries if e.category == category]
        return sorted(entries, key=lambda e: e.command.value)

    def dump_state(self) -> str:
        """Return a formatted string of all commands for debugging."""
        lines = [
            f"=== CommandDispatcher: {len(self._commands)} commands ===",
            "",
        ]
        for entry in self.list_commands():
            desc = f"  {entry.description}" if entry.description else ""
            lines.append(f"  [{entry.category}] {entry.command.value}{desc}")
        return "\n".join(lines)

    @staticmethod
    def _resolve(command: Command | str) -> Command | None:
        if isinstance(command, Command):
            return command
        try:
            return Command.from_name(command)
        except ValueError:
            return None


def build_default_commands(
    dispatcher: CommandDispatcher,
    engine: TilingEngine,
    gaps: GapSizeController,
) -> None:
    """
    Register all built-in commands into the dispatcher.

    This is the single place that maps shortcut names to engine
    operations. Called during startup.
    """
    for command, intent in TILE_INTENTS.items():
        dispatcher.register(
            command,
            lambda intent=intent: engine.tile(intent),
            description=f"Tile window to {intent}",
            category="tile",
        )

    dispatcher.register(
        Command.ALIGN_CENTER,
        engine.align_to_center,
        description="Center window without resizing",
        category="window",
    )
    dispatcher.register(
        Command.RESTORE,
        engine.restore,
        description="Restore geometry from before tiling",
        category="window",
    )
    dispatcher.register(
        Command.INCREASE_GAP,
        gaps.increase,
        description="Increase gap size",
        category="gap",
    )
    dispatcher.register(
        Command.DECREASE_GAP,
        gaps.decrease,
        description="Decrease gap size",
        category="gap",
    )

    log.info("Commands registered: %d", dispatcher.count)
