"""
edgetile.tiling.engine - Motor principal de tiling.

El TilingEngine es el corazon del sistema. Para cada comando direccional:
    1. Lee la ventana enfocada y su area de trabajo desde el host.
    2. Aplica el gap configurado al area (compute_work_area).
    3. Decide que paso de la secuencia toca segun la operacion anterior
       (pulsaciones sucesivas del mismo comando ciclan los tamanos).
    4. Calcula el rectangulo destino (plan_tile).
    5. Guarda la geometria previa en el historial si es el primer tiling.
    6. Pide al host que desmaximice y mueva la ventana.
    7. Registra la operacion para la siguiente pulsacion.

El calculo (pasos 3 y 4) es la funcion pura plan_tile(); el motor solo
orquesta el estado y las llamadas al host.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from edgetile.config.defaults import (
    TILING_STEPS_CENTER,
    TILING_STEPS_SIDE,
    TILING_SUCCESSIVE_TIMEOUT,
)
from edgetile.tiling.directional import DirectionalIntent, place_axis
from edgetile.tiling.history import GeometryHistory
from edgetile.tiling.rect import Rect, WorkArea, round_half_up
from edgetile.tiling.steps import StepSequence, parse_tiling_steps
from edgetile.tiling.workarea import compute_work_area

if TYPE_CHECKING:
    from edgetile.config.settings import SettingsStore
    from edgetile.core.host import Host

log = logging.getLogger(__name__)


# ============================================================================
# Registro de la ultima operacion
# ============================================================================
@dataclass(frozen=True, slots=True)
class TilingOperation:
    """
    Ultima operacion de tiling aplicada.

    ``iteration`` es el indice del paso que usara la proxima pulsacion
    si resulta sucesiva.
    """

    window_id: int
    intent: DirectionalIntent
    time_ms: int
    iteration: int

    def is_successive(
        self,
        window_id: int,
        intent: DirectionalIntent,
        now_ms: int,
        step_count: int,
        timeout_ms: int = TILING_SUCCESSIVE_TIMEOUT,
    ) -> bool:
        return (
            self.window_id == window_id
            and self.intent == intent
            and now_ms - self.time_ms <= timeout_ms
            and self.iteration < step_count
        )


@dataclass(frozen=True, slots=True)
class TilePlan:
    """Resultado de plan_tile: rectangulo destino y nuevo registro."""

    rect: Rect
    iteration: int
    operation: TilingOperation


# ============================================================================
# Calculo puro
# ============================================================================
def plan_tile(
    intent: DirectionalIntent,
    window_id: int,
    work_area: WorkArea,
    steps: StepSequence,
    previous: Optional[TilingOperation],
    now_ms: int,
    inner_gaps: bool = True,
    timeout_ms: int = TILING_SUCCESSIVE_TIMEOUT,
) -> TilePlan:
    """
    Calcula el rectangulo destino de un tiling.

    Args:
        intent:     Borde, esquina o centro pedido.
        window_id:  Identidad de la ventana.
        work_area:  Area de trabajo ya reducida por los gaps.
        steps:      Secuencia de pasos (centro o lateral segun intent).
        previous:   Ultima operacion registrada, o None.
        now_ms:     Marca de tiempo actual en milisegundos.
        inner_gaps: Si se dejan gaps entre ventanas adyacentes.
        timeout_ms: Ventana de tiempo para pulsaciones sucesivas.

    Returns:
        TilePlan con el rectangulo y el registro a guardar.
    """
    successive = previous is not None and previous.is_successive(
        window_id, intent, now_ms, len(steps), timeout_ms
    )
    iteration = previous.iteration if successive else 0
    step = 1.0 - steps[iteration]

    area = work_area.rect

    if intent.is_center:
        # Al centro el primer tamano puede cubrir todo el area disponible
        w = area.w - round_half_up(area.w * step)
        h = area.h - round_half_up(area.h * step)
        x = area.x + round_half_up((area.w - w) / 2)
        y = area.y + round_half_up((area.h - h) / 2)
    else:
        gaps = work_area.gaps if inner_gaps else None
        x, w = place_axis(
            area.x, area.w, intent.left, intent.right, step,
            gaps.x if gaps else None,
        )
        y, h = place_axis(
            area.y, area.h, intent.top, intent.bottom, step,
            gaps.y if gaps else None,
        )

    log.debug(
        "plan_tile %s window=%#x successive=%s iteration=%d step=%.3f",
        intent, window_id, successive, iteration, step,
    )

    return TilePlan(
        rect=Rect(x, y, w, h),
        iteration=iteration,
        operation=TilingOperation(window_id, intent, now_ms, iteration + 1),
    )


def _now_ms() -> int:
    return int(time.time() * 1000)


# ============================================================================
# TilingEngine
# ============================================================================
class TilingEngine:
    """
    Motor de tiling por comandos direccionales.

    Todo el estado mutable (ultima operacion e historial) vive en la
    instancia. El host despacha los comandos de uno en uno; si se usa
    desde varios hilos las llamadas deben serializarse.

    Uso tipico:
        engine = TilingEngine(host, settings)
        engine.tile(DirectionalIntent.LEFT)   # Mitad izquierda
        engine.tile(DirectionalIntent.LEFT)   # Siguiente tamano
        engine.restore()                      # Geometria original
    """

    def __init__(
        self,
        host: Host,
        settings: SettingsStore,
        clock: Callable[[], int] = _now_ms,
        timeout_ms: int = TILING_SUCCESSIVE_TIMEOUT,
    ) -> None:
        self._host = host
        self._settings = settings
        self._clock = clock
        self._timeout_ms = timeout_ms
        self._history = GeometryHistory()
        self._last_operation: Optional[TilingOperation] = None

    # ------------------------------------------------------------------
    # Propiedades
    # ------------------------------------------------------------------
    @property
    def history(self) -> GeometryHistory:
        return self._history

    @property
    def last_operation(self) -> Optional[TilingOperation]:
        return self._last_operation

    @property
    def steps_center(self) -> StepSequence:
        return parse_tiling_steps(
            self._settings.get_tiling_steps_center(), TILING_STEPS_CENTER
        )

    @property
    def steps_side(self) -> StepSequence:
        return parse_tiling_steps(
            self._settings.get_tiling_steps_side(), TILING_STEPS_SIDE
        )

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------
    def tile(self, intent: DirectionalIntent) -> Optional[Rect]:
        """
        Tilea la ventana enfocada hacia *intent*.

        Returns:
            El rectangulo aplicado, o None si no hay ventana enfocada.
        """
        window = self._host.focused_window()
        if window is None:
            log.debug("tile %s: no focused window", intent)
            return None

        now = self._clock()
        steps = self.steps_center if intent.is_center else self.steps_side
        work_area = compute_work_area(
            self._host.work_area(window), self._settings.get_gap_size()
        )

        plan = plan_tile(
            intent,
            window.id,
            work_area,
            steps,
            self._last_operation,
            now,
            inner_gaps=self._settings.is_inner_gaps_enabled(),
            timeout_ms=self._timeout_ms,
        )

        self._history.remember(window.id, window.frame)

        self._host.unmaximize(window)
        self._host.move_resize(window, False, plan.rect)

        self._last_operation = plan.operation

        log.info(
            "TILE %s [%d/%d] %s -> %s",
            intent, plan.iteration + 1, len(steps), window, plan.rect,
        )
        return plan.rect

    def restore(self) -> Optional[Rect]:
        """
        Devuelve la ventana enfocada a la geometria previa al tiling.

        Solo funciona una vez por secuencia: la entrada del historial se
        elimina al restaurar.

        Returns:
            El rectangulo restaurado, o None si no habia nada que restaurar.
        """
        window = self._host.focused_window()
        if window is None:
            log.debug("restore: no focused window")
            return None

        rect = self._history.pop(window.id)
        if rect is None:
            log.debug("restore: %s was not tiled", window)
            return None

        self._host.move_resize(window, False, rect)
        log.info("RESTORE %s -> %s", window, rect)
        return rect

    def align_to_center(self) -> Optional[Rect]:
        """
        Centra la ventana enfocada en su area de trabajo sin cambiar
        su tamano. No usa gaps ni toca el historial.
        """
        window = self._host.focused_window()
        if window is None:
            log.debug("align_to_center: no focused window")
            return None

        area = self._host.work_area(window)
        frame = window.frame
        rect = Rect(
            area.x + (area.w - frame.w) // 2,
            area.y + (area.h - frame.h) // 2,
            frame.w,
            frame.h,
        )

        self._host.unmaximize(window)
        self._host.move_resize(window, False, rect)
        log.info("ALIGN CENTER %s -> %s", window, rect)
        return rect

    def forget(self, window_id: int) -> None:
        """Olvida una ventana (por ejemplo, cuando el host la cierra)."""
        self._history.pop(window_id)
        if self._last_operation and self._last_operation.window_id == window_id:
            self._last_operation = None

    # ------------------------------------------------------------------
    # Depuracion
    # ------------------------------------------------------------------
    def dump_state(self) -> str:
        """Retorna un string formateado con el estado del motor."""
        lines = [
            f"=== TilingEngine: {len(self._history)} tiled windows ===",
            f"  last operation: {self._last_operation}",
            f"  steps center:   {tuple(self.steps_center)}",
            f"  steps side:     {tuple(self.steps_side)}",
            f"  gap size:       {self._settings.get_gap_size()}%",
        ]
        return "\n".join(lines)
