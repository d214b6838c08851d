"""
edgetile.tiling.gaps - Ajuste interactivo del tamano del gap.
"""

from __future__ import annotations

import logging
from gettext import ngettext
from typing import TYPE_CHECKING

from edgetile.config.defaults import (
    GAP_SIZE_INCREMENTS,
    GAP_SIZE_MAX,
    NOTIFICATION_TITLE,
)

if TYPE_CHECKING:
    from edgetile.config.settings import SettingsStore
    from edgetile.core.host import Host

log = logging.getLogger(__name__)


class GapSizeController:
    """
    Sube o baja el gap en GAP_SIZE_INCREMENTS, saturando en
    [0, GAP_SIZE_MAX], y avisa al usuario del nuevo valor.
    """

    def __init__(
        self,
        settings: SettingsStore,
        host: Host,
        increment: int = GAP_SIZE_INCREMENTS,
        maximum: int = GAP_SIZE_MAX,
    ) -> None:
        self._settings = settings
        self._host = host
        self._increment = increment
        self._maximum = maximum

    @property
    def gap_size(self) -> int:
        return self._settings.get_gap_size()

    def increase(self) -> int:
        """Incrementa el gap. Retorna el nuevo valor."""
        return self._set(min(self.gap_size + self._increment, self._maximum))

    def decrease(self) -> int:
        """Reduce el gap. Retorna el nuevo valor."""
        return self._set(max(self.gap_size - self._increment, 0))

    def _set(self, value: int) -> int:
        self._settings.set_gap_size(value)
        log.info("Gap size: %d%%", value)
        self._notify(value)
        return value

    def _notify(self, value: int) -> None:
        message = ngettext(
            "Gap size is now at %d percent",
            "Gap size is now at %d percent",
            value,
        ) % value
        self._host.notify(NOTIFICATION_TITLE, message)
