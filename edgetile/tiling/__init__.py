"""
edgetile.tiling - Motor de tiling por comandos direccionales.

Este paquete contiene:
    - rect        : Rect, Gaps y WorkArea
    - steps       : Parseo de secuencias de pasos
    - workarea    : Area de trabajo con gaps
    - directional : DirectionalIntent y colocacion por eje
    - history     : GeometryHistory - geometria previa al tiling
    - gaps        : GapSizeController - ajuste del gap
    - engine      : TilingEngine - motor principal
"""

from edgetile.tiling.rect import Rect, Gaps, WorkArea
from edgetile.tiling.steps import parse_tiling_steps
from edgetile.tiling.workarea import compute_work_area
from edgetile.tiling.directional import DirectionalIntent
from edgetile.tiling.history import GeometryHistory
from edgetile.tiling.gaps import GapSizeController
from edgetile.tiling.engine import TilingEngine, TilingOperation, plan_tile

__all__ = [
    "Rect",
    "Gaps",
    "WorkArea",
    "parse_tiling_steps",
    "compute_work_area",
    "DirectionalIntent",
    "GeometryHistory",
    "GapSizeController",
    "TilingEngine",
    "TilingOperation",
    "plan_tile",
]
