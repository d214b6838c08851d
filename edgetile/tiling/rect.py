"""
edgetile.tiling.rect - Estructuras geometricas Rect, Gaps y WorkArea.

Define un rectangulo inmutable que representa un area de pantalla.
Se usa para describir tanto el area de trabajo del monitor como
las coordenadas destino de la ventana tileada.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


def round_half_up(value: float) -> int:
    """
    Redondea al entero mas cercano, con los .5 hacia arriba.

    El round() de Python redondea al par (round(2.5) == 2); la geometria
    de tiling necesita el comportamiento clasico (2.5 -> 3, -2.5 -> -2).
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Todas las coordenadas estan en pixeles, en el espacio de coordenadas
    del host (relativas al workspace).

    Atributos:
        x: Coordenada horizontal de la esquina superior-izquierda.
        y: Coordenada vertical de la esquina superior-izquierda.
        w: Ancho en pixeles.
        h: Alto en pixeles.
    """

    x: int
    y: int
    w: int
    h: int

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    # ------------------------------------------------------------------
    # Operaciones geometricas
    # ------------------------------------------------------------------
    def inset(self, dx: int, dy: int) -> Rect:
        """
        Reduce el rectangulo aplicando un margen dx a izquierda/derecha
        y dy arriba/abajo.

        Args:
            dx: Pixeles de margen en cada lado horizontal.
            dy: Pixeles de margen en cada lado vertical.

        Returns:
            Nuevo Rect reducido.
        """
        return Rect(self.x + dx, self.y + dy, self.w - 2 * dx, self.h - 2 * dy)

    @classmethod
    def parse(cls, text: str) -> Rect:
        """Crea un Rect desde un texto "x,y,w,h"."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 4:
            raise ValueError(f"expected x,y,w,h, got {text!r}")
        x, y, w, h = (int(p) for p in parts)
        if w < 0 or h < 0:
            raise ValueError(f"negative size in {text!r}")
        return cls(x, y, w, h)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.w}x{self.h}+{self.x}+{self.y})"


@dataclass(frozen=True, slots=True)
class Gaps:
    """Margen en pixeles aplicado en cada eje."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class WorkArea:
    """
    Area de trabajo usable, ya reducida por los gaps.

    ``gaps`` solo esta presente cuando se aplico un gap distinto de cero.
    """

    rect: Rect
    gaps: Optional[Gaps] = None
