"""Фиксированные размеры идентикона.

Значения не настраиваются: они только дают имена числам, на которых
держится вся раскладка (15 байт дайджеста -> 5 строк по 3 -> сетка 5x5
клеток по 50 px -> холст 250x250).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class IdenticonConfig:
    digest_length: int = 15  # md5 (16 bytes) minus the last one
    chunk_size: int = 3
    grid_size: int = 5
    cell_px: int = 50
    background: Tuple[int, int, int] = (255, 255, 255)
    image_format: str = "PNG"
    file_suffix: str = ".png"

    @property
    def grid_cells(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def canvas_px(self) -> int:
        return self.grid_size * self.cell_px


CONFIG = IdenticonConfig()
