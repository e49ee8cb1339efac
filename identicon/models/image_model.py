"""Модели данных идентикона.

Принципы:
- SRP: только структура данных и проверка инвариантов, без логики стадий.
- Чистый код: неизменяемость (`frozen=True`); каждая стадия конвейера
  возвращает новый тип, который содержит запись предыдущей стадии.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from identicon.config import CONFIG
from identicon.errors import ImageSpecError

Color = Tuple[int, int, int]
GridCell = Tuple[int, int]  # (value, index)
Point = Tuple[int, int]
Rectangle = Tuple[Point, Point]  # (top_left, bottom_right)


def _check_byte(value: object, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ImageSpecError(f"{what} must be an unsigned 8-bit integer, got {value!r}")


@dataclass(frozen=True)
class HashedImage:
    """Результат стадии хеширования.

    Fields:
        digest_bytes: 15 байт md5 (последний байт отброшен).
    """
    digest_bytes: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.digest_bytes) != CONFIG.digest_length:
            raise ImageSpecError(
                f"digest must have {CONFIG.digest_length} bytes, got {len(self.digest_bytes)}"
            )
        for byte in self.digest_bytes:
            _check_byte(byte, "digest byte")


@dataclass(frozen=True)
class ColoredImage:
    """Дайджест + цвет заливки (R, G, B)."""
    hashed: HashedImage
    color: Color

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ImageSpecError(f"color must be an (R, G, B) triple, got {self.color!r}")
        for channel in self.color:
            _check_byte(channel, "color channel")

    @property
    def digest_bytes(self) -> Tuple[int, ...]:
        return self.hashed.digest_bytes


@dataclass(frozen=True)
class GridImage:
    """Полная зеркальная сетка: 25 пар `(value, index)` с индексами 0..24."""
    colored: ColoredImage
    grid: Tuple[GridCell, ...]

    def __post_init__(self) -> None:
        if len(self.grid) != CONFIG.grid_cells:
            raise ImageSpecError(f"grid must have {CONFIG.grid_cells} cells, got {len(self.grid)}")
        for expected, (value, index) in enumerate(self.grid):
            _check_byte(value, "grid value")
            if index != expected:
                raise ImageSpecError(f"grid index {index} found at position {expected}")

    @property
    def digest_bytes(self) -> Tuple[int, ...]:
        return self.colored.digest_bytes

    @property
    def color(self) -> Color:
        return self.colored.color


@dataclass(frozen=True)
class FilteredImage:
    """Сетка после отбора: только клетки с чётным значением.

    Индексы не перенумеровываются, это позиции в исходной сетке 5x5.
    """
    source: GridImage
    grid: Tuple[GridCell, ...]

    def __post_init__(self) -> None:
        remaining = iter(self.source.grid)
        for cell in self.grid:
            # subsequence check: every kept cell must appear, in order, in the source grid
            if not any(cell == candidate for candidate in remaining):
                raise ImageSpecError(f"cell {cell!r} is not an ordered member of the source grid")
            if cell[0] % 2 != 0:
                raise ImageSpecError(f"cell {cell!r} has an odd value")

    @property
    def digest_bytes(self) -> Tuple[int, ...]:
        return self.source.digest_bytes

    @property
    def color(self) -> Color:
        return self.source.color


@dataclass(frozen=True)
class PixelMapImage:
    """Готовая к отрисовке запись: цвет и прямоугольники по одному на клетку."""
    filtered: FilteredImage
    pixel_map: Tuple[Rectangle, ...]

    def __post_init__(self) -> None:
        if len(self.pixel_map) != len(self.filtered.grid):
            raise ImageSpecError(
                f"pixel map has {len(self.pixel_map)} rectangles for {len(self.filtered.grid)} cells"
            )

    @property
    def digest_bytes(self) -> Tuple[int, ...]:
        return self.filtered.digest_bytes

    @property
    def color(self) -> Color:
        return self.filtered.color

    @property
    def grid(self) -> Tuple[GridCell, ...]:
        return self.filtered.grid


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель сохранённого изображения и его метаданные.

    Fields:
        path: Путь к файлу.
        pil_image: Загруженное изображение PIL.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
