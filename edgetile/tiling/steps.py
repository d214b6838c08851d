"""
edgetile.tiling.steps - Secuencias de pasos para el tiling sucesivo.

Una secuencia es una lista de proporciones separadas por comas, por
ejemplo "0.5, 0.333, 0.667" o "50%, 33%". Cada entrada indica la
fraccion del area que conserva la ventana en la pulsacion N.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

log = logging.getLogger(__name__)

StepSequence = Sequence[float]


def _parse_entry(entry: str) -> float:
    entry = entry.strip()
    if entry.endswith("%"):
        return float(entry[:-1].strip()) / 100
    return float(entry)


def parse_tiling_steps(raw: str | None, default: StepSequence) -> StepSequence:
    """
    Parsea una secuencia de pasos desde su representacion textual.

    Nunca falla: si el texto esta vacio, alguna entrada no es numerica
    o queda fuera de (0, 1], retorna *default* sin modificar.

    Args:
        raw:     Texto con las proporciones separadas por comas.
        default: Secuencia a usar si el texto no es valido.

    Returns:
        Tupla con las proporciones en el orden dado, o *default*.
    """
    if not raw or not raw.strip():
        return default

    try:
        steps = tuple(_parse_entry(entry) for entry in raw.split(","))
    except ValueError:
        log.warning("Invalid tiling steps %r, using default %s", raw, default)
        return default

    if not all(math.isfinite(s) and 0 < s <= 1 for s in steps):
        log.warning("Tiling steps %r out of range, using default %s", raw, default)
        return default

    return steps


def format_tiling_steps(steps: StepSequence) -> str:
    """Inverso de parse_tiling_steps, para los valores por defecto."""
    return ",".join(f"{s:g}" for s in steps)
