"""
edgetile.core.host - Interfaz con el entorno de ventanas.

El motor de tiling no habla directamente con el gestor de ventanas: todo
pasa por un objeto que cumple el protocolo Host. Este modulo define ese
protocolo y VirtualHost, una implementacion en memoria usada por la CLI
y por los tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Protocol

from edgetile.core.window import WindowInfo
from edgetile.tiling.rect import Rect

log = logging.getLogger(__name__)


class Host(Protocol):
    """Colaborador que expone la ventana enfocada y aplica geometria."""

    def focused_window(self) -> Optional[WindowInfo]:
        """Ventana con foco, o None si no hay ninguna."""
        ...

    def work_area(self, window: WindowInfo) -> Rect:
        """Area de trabajo del monitor/workspace de la ventana."""
        ...

    def unmaximize(self, window: WindowInfo) -> None:
        ...

    def move_resize(self, window: WindowInfo, animate: bool, rect: Rect) -> None:
        ...

    def notify(self, title: str, message: str) -> None:
        ...


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Una llamada a move_resize registrada por VirtualHost."""

    window_id: int
    animate: bool
    rect: Rect


class VirtualHost:
    """
    Host en memoria.

    Mantiene una tabla de ventanas, cual tiene el foco, el area de trabajo
    de cada (monitor, workspace) y un registro de movimientos y
    notificaciones. move_resize actualiza el frame de la ventana, de modo
    que la siguiente lectura ve la geometria aplicada.
    """

    def __init__(self, work_area: Rect | None = None) -> None:
        self._windows: dict[int, WindowInfo] = {}
        self._maximized: set[int] = set()
        self._work_areas: dict[tuple[int, int], Rect] = {}
        self._default_work_area = work_area or Rect(0, 0, 1920, 1080)
        self._focused: Optional[int] = None
        self.moves: list[MoveRecord] = []
        self.notifications: list[tuple[str, str]] = []

    # ------------------------------------------------------------------
    # Configuracion del entorno simulado
    # ------------------------------------------------------------------
    def add_window(
        self,
        window_id: int,
        frame: Rect,
        monitor: int = 0,
        workspace: int = 0,
        *,
        focus: bool = True,
        maximized: bool = False,
    ) -> WindowInfo:
        window = WindowInfo(window_id, frame, monitor, workspace)
        self._windows[window_id] = window
        if maximized:
            self._maximized.add(window_id)
        if focus:
            self._focused = window_id
        return window

    def remove_window(self, window_id: int) -> None:
        self._windows.pop(window_id, None)
        self._maximized.discard(window_id)
        if self._focused == window_id:
            self._focused = None

    def focus(self, window_id: Optional[int]) -> None:
        if window_id is not None and window_id not in self._windows:
            raise KeyError(window_id)
        self._focused = window_id

    def set_work_area(self, rect: Rect, monitor: int = 0, workspace: int = 0) -> None:
        self._work_areas[(monitor, workspace)] = rect

    def get_window(self, window_id: int) -> WindowInfo:
        return self._windows[window_id]

    def is_maximized(self, window_id: int) -> bool:
        return window_id in self._maximized

    # ------------------------------------------------------------------
    # Protocolo Host
    # ------------------------------------------------------------------
    def focused_window(self) -> Optional[WindowInfo]:
        if self._focused is None:
            return None
        return self._windows.get(self._focused)

    def work_area(self, window: WindowInfo) -> Rect:
        return self._work_areas.get(
            (window.monitor, window.workspace), self._default_work_area
        )

    def unmaximize(self, window: WindowInfo) -> None:
        self._maximized.discard(window.id)

    def move_resize(self, window: WindowInfo, animate: bool, rect: Rect) -> None:
        current = self._windows.get(window.id)
        if current is None:
            log.warning("move_resize: window %#x is gone", window.id)
            return
        self._windows[window.id] = replace(current, frame=rect)
        self.moves.append(MoveRecord(window.id, animate, rect))

    def notify(self, title: str, message: str) -> None:
        log.info("NOTIFY [%s] %s", title, message)
        self.notifications.append((title, message))
