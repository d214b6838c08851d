"""
edgetile.tiling.history - Geometria previa de las ventanas tileadas.

Guarda, por ventana, el rectangulo que tenia antes del primer tiling de
una secuencia. Los tilings siguientes no lo sobreescriben, asi restore
siempre vuelve a la geometria original y no al paso anterior.
"""

from __future__ import annotations

import logging
from typing import Optional

from edgetile.tiling.rect import Rect

log = logging.getLogger(__name__)


class GeometryHistory:
    """Mapa window_id -> Rect previo al tiling."""

    def __init__(self) -> None:
        self._rects: dict[int, Rect] = {}

    def __contains__(self, window_id: int) -> bool:
        return window_id in self._rects

    def __len__(self) -> int:
        return len(self._rects)

    def get(self, window_id: int) -> Optional[Rect]:
        return self._rects.get(window_id)

    def remember(self, window_id: int, frame: Rect) -> bool:
        """
        Guarda *frame* si la ventana aun no tiene entrada.

        Returns:
            True si se guardo, False si ya habia una entrada.
        """
        if window_id in self._rects:
            return False
        self._rects[window_id] = frame
        log.debug("History: window %#x saved at %s", window_id, frame)
        return True

    def pop(self, window_id: int) -> Optional[Rect]:
        """Elimina y retorna la entrada de la ventana, o None."""
        rect = self._rects.pop(window_id, None)
        if rect is not None:
            log.debug("History: window %#x released (%s)", window_id, rect)
        return rect

    def clear(self) -> None:
        self._rects.clear()
