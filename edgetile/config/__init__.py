"""
edgetile.config - Configuracion del tiling.

    - defaults : Constantes (limites del gap, timeout, pasos por defecto)
    - settings : TilingSettings (pydantic) y el protocolo SettingsStore
"""
