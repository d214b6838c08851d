"""
edgetile - Geometria de tiling para atajos de borde/esquina.

Run with:  python -m edgetile --help
"""

__version__ = "0.1.0"
