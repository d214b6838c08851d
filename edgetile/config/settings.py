"""
edgetile.config.settings - Configuracion del tiling.

TilingSettings valida los valores con pydantic; los limites del gap se
comprueban aqui, no en el calculo del area de trabajo. El motor solo ve
el protocolo SettingsStore, asi no depende de como se guardan los datos.
"""

from __future__ import annotations

from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from edgetile.config.defaults import (
    GAP_SIZE_MAX,
    TILING_STEPS_CENTER,
    TILING_STEPS_SIDE,
)
from edgetile.tiling.steps import format_tiling_steps


class TilingSettings(BaseModel):
    """Preferencias del tiling."""

    model_config = ConfigDict(validate_assignment=True)

    gap_size: int = Field(
        default=0,
        ge=0,
        le=GAP_SIZE_MAX,
        description=f"Gap between windows, in percent (0-{GAP_SIZE_MAX})",
    )
    enable_inner_gaps: bool = Field(
        default=True,
        description="Leave a gap between adjacent tiled windows",
    )
    tiling_steps_center: str = Field(
        default=format_tiling_steps(TILING_STEPS_CENTER),
        description="Comma separated sizes cycled when tiling to the center",
    )
    tiling_steps_side: str = Field(
        default=format_tiling_steps(TILING_STEPS_SIDE),
        description="Comma separated sizes cycled when tiling to an edge",
    )

    @field_validator("tiling_steps_center", "tiling_steps_side")
    @classmethod
    def strip_steps(cls, v: str) -> str:
        return v.strip()


class SettingsStore(Protocol):
    """Acceso explicito a las preferencias que usa el motor."""

    def get_gap_size(self) -> int:
        ...

    def set_gap_size(self, value: int) -> None:
        ...

    def is_inner_gaps_enabled(self) -> bool:
        ...

    def get_tiling_steps_center(self) -> str:
        ...

    def get_tiling_steps_side(self) -> str:
        ...


class MemorySettingsStore:
    """SettingsStore respaldado por un TilingSettings en memoria."""

    def __init__(self, settings: Optional[TilingSettings] = None) -> None:
        self.settings = settings if settings is not None else TilingSettings()

    def get_gap_size(self) -> int:
        return self.settings.gap_size

    def set_gap_size(self, value: int) -> None:
        self.settings.gap_size = value

    def is_inner_gaps_enabled(self) -> bool:
        return self.settings.enable_inner_gaps

    def get_tiling_steps_center(self) -> str:
        return self.settings.tiling_steps_center

    def get_tiling_steps_side(self) -> str:
        return self.settings.tiling_steps_side
