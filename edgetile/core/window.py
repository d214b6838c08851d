"""
edgetile.core.window - Snapshot de la ventana enfocada.

El host entrega un WindowInfo por cada operacion. Es un valor inmutable
(no un handle vivo): el motor nunca consulta al host a traves de el.
"""

from __future__ import annotations

from dataclasses import dataclass

from edgetile.tiling.rect import Rect


@dataclass(frozen=True, slots=True)
class WindowInfo:
    """
    Datos de una ventana en el momento de la operacion.

    Atributos:
        id:        Identidad opaca de la ventana en el host.
        frame:     Rectangulo actual del marco de la ventana.
        monitor:   Indice del monitor donde esta la ventana.
        workspace: Indice del workspace donde esta la ventana.
    """

    id: int
    frame: Rect
    monitor: int = 0
    workspace: int = 0

    def __str__(self) -> str:
        return f"Window({self.id:#x} {self.frame})"
