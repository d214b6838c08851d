"""
edgetile.config.defaults - Constantes y valores por defecto del tiling.
"""

GAP_SIZE_MAX = 32
GAP_SIZE_INCREMENTS = 1

# Milisegundos entre dos pulsaciones para considerarlas sucesivas
TILING_SUCCESSIVE_TIMEOUT = 2000

TILING_STEPS_CENTER: tuple[float, ...] = (1.0, 0.75, 0.5)
TILING_STEPS_SIDE: tuple[float, ...] = (0.5, 0.333, 0.667)

NOTIFICATION_TITLE = "edgetile"
