"""
edgetile.tiling.directional - Intencion direccional de un tiling.

Una DirectionalIntent son cuatro booleanos independientes (top, bottom,
left, right). En cada eje:
    - ambos iguales (True/True o False/False): el eje no se reduce
      y ocupa el area completa.
    - distintos: el eje se reduce y se ancla al lado que vale True.
Todos en False significa tiling al centro.

La misma regla se aplica a los dos ejes, por eso la colocacion esta
factorizada en place_axis() y se llama una vez por eje.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from edgetile.tiling.rect import round_half_up


@dataclass(frozen=True, slots=True)
class DirectionalIntent:
    """Destino pedido para la ventana: borde, esquina o centro."""

    top: bool
    bottom: bool
    left: bool
    right: bool

    CENTER: ClassVar[DirectionalIntent]
    LEFT: ClassVar[DirectionalIntent]
    RIGHT: ClassVar[DirectionalIntent]
    TOP: ClassVar[DirectionalIntent]
    BOTTOM: ClassVar[DirectionalIntent]
    TOP_LEFT: ClassVar[DirectionalIntent]
    TOP_RIGHT: ClassVar[DirectionalIntent]
    BOTTOM_LEFT: ClassVar[DirectionalIntent]
    BOTTOM_RIGHT: ClassVar[DirectionalIntent]

    @property
    def is_center(self) -> bool:
        return not (self.top or self.bottom or self.left or self.right)

    @property
    def reduces_x(self) -> bool:
        return self.left != self.right

    @property
    def reduces_y(self) -> bool:
        return self.top != self.bottom

    def __str__(self) -> str:
        if self.is_center:
            return "center"
        parts = []
        if self.reduces_y:
            parts.append("top" if self.top else "bottom")
        if self.reduces_x:
            parts.append("left" if self.left else "right")
        return "-".join(parts) or "full"


DirectionalIntent.CENTER = DirectionalIntent(False, False, False, False)
DirectionalIntent.LEFT = DirectionalIntent(True, True, True, False)
DirectionalIntent.RIGHT = DirectionalIntent(True, True, False, True)
DirectionalIntent.TOP = DirectionalIntent(True, False, True, True)
DirectionalIntent.BOTTOM = DirectionalIntent(False, True, True, True)
DirectionalIntent.TOP_LEFT = DirectionalIntent(True, False, True, False)
DirectionalIntent.TOP_RIGHT = DirectionalIntent(True, False, False, True)
DirectionalIntent.BOTTOM_LEFT = DirectionalIntent(False, True, True, False)
DirectionalIntent.BOTTOM_RIGHT = DirectionalIntent(False, True, False, True)


def place_axis(
    origin: int,
    size: int,
    leading: bool,
    trailing: bool,
    step: float,
    gap: int | None = None,
) -> tuple[int, int]:
    """
    Calcula (posicion, tamano) de la ventana sobre un eje.

    Args:
        origin:   Inicio del area de trabajo en el eje (x o y).
        size:     Tamano del area de trabajo en el eje (w o h).
        leading:  Anclado al lado inicial (left / top).
        trailing: Anclado al lado final (right / bottom).
        step:     Fraccion del area que se descarta al reducir el eje.
        gap:      Gap del eje si hay gaps interiores, o None.

    Returns:
        Tupla (posicion, tamano).
    """
    start, length = origin, size
    reduced = leading != trailing

    if reduced:
        length -= round_half_up(size * step)
    if not leading:
        start += (size - length) // (1 if trailing else 2)

    # Gap interior: entre dos ventanas complementarias queda un gap entero
    if reduced and gap:
        half = gap // 2
        if trailing:
            start += gap - half
            length -= gap - half
        else:
            length -= half

    return start, max(0, length)
