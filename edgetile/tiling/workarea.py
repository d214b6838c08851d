"""
edgetile.tiling.workarea - Calculo del area de trabajo con gaps.

El gap se expresa como porcentaje. Cada lado consume gap/200 de la
dimension del eje, de modo que un gap de 100 dejaria el eje a cero;
el maximo configurable (GAP_SIZE_MAX) se valida en la configuracion.
"""

from __future__ import annotations

import logging

from edgetile.tiling.rect import Gaps, Rect, WorkArea, round_half_up

log = logging.getLogger(__name__)


def compute_gaps(raw: Rect, gap_percent: int) -> Gaps:
    """
    Calcula los gaps en pixeles para cada eje.

    Cada eje queda limitado al doble del gap del otro eje, para que un
    area muy alargada no termine con margenes desproporcionados.
    """
    unchecked_x = round_half_up(gap_percent / 200 * raw.w)
    unchecked_y = round_half_up(gap_percent / 200 * raw.h)

    return Gaps(
        x=min(unchecked_x, unchecked_y * 2),
        y=min(unchecked_y, unchecked_x * 2),
    )


def compute_work_area(raw: Rect, gap_percent: int) -> WorkArea:
    """
    Aplica el gap configurado al area de trabajo del monitor.

    Args:
        raw:         Area de trabajo tal como la reporta el host.
        gap_percent: Tamano del gap en porcentaje.

    Returns:
        WorkArea con el rectangulo reducido. Si gap_percent <= 0 el
        rectangulo se devuelve sin cambios y sin gaps.
    """
    if gap_percent <= 0:
        return WorkArea(raw)

    gaps = compute_gaps(raw, gap_percent)
    area = WorkArea(raw.inset(gaps.x, gaps.y), gaps)
    log.debug("Work area %s -> %s (gap=%d%%, %s)", raw, area.rect, gap_percent, gaps)
    return area
