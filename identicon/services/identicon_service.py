from __future__ import annotations

import hashlib
import logging
from typing import Sequence, Tuple, Union

import numpy as np

from identicon.config import CONFIG, IdenticonConfig
from identicon.errors import HashInputError, ImageSpecError
from identicon.models.image_model import (
    ColoredImage,
    FilteredImage,
    GridImage,
    HashedImage,
    PixelMapImage,
    Rectangle,
)

logger = logging.getLogger(__name__)


class IdenticonService:
    """Чистые стадии конвейера: строка -> md5 -> цвет -> сетка -> отбор -> раскладка.

    Каждая стадия принимает запись предыдущей стадии и возвращает новую;
    ни одна стадия не читает поля, которые появляются позже.
    """

    def __init__(self, config: IdenticonConfig = CONFIG) -> None:
        self._config = config

    def build(self, seed: Union[str, bytes]) -> PixelMapImage:
        """Прогоняет строку через все чистые стадии."""
        hashed = self.hash_input(seed)
        colored = self.pick_color(hashed)
        grid = self.build_grid(colored)
        filtered = self.filter_odd_squares(grid)
        return self.build_pixel_map(filtered)

    # ---------- 1) Хеширование ----------
    def hash_input(self, seed: Union[str, bytes]) -> HashedImage:
        """
        md5 от байтов строки (`str` кодируется в UTF-8; суррогаты из `sys.argv`
        возвращаются в исходные байты, как в `os.fsencode`), последний из 16 байт
        отбрасывается: 15 делится на 3, что нужно для нарезки сетки.
        """
        if isinstance(seed, str):
            try:
                raw = seed.encode("utf-8", "surrogateescape")
            except UnicodeEncodeError as exc:
                raise HashInputError(f"cannot hash {seed!r}: {exc.reason}") from exc
        elif isinstance(seed, (bytes, bytearray)):
            raw = bytes(seed)
        else:
            raise HashInputError(f"cannot hash {type(seed).__name__}, expected str or bytes")

        digest = hashlib.md5(raw).digest()
        hashed = HashedImage(digest_bytes=tuple(digest[: self._config.digest_length]))
        logger.debug("digest for %r: %s", seed, hashed.digest_bytes)
        return hashed

    # ---------- 2) Цвет ----------
    def pick_color(self, image: HashedImage) -> ColoredImage:
        """Первые три байта дайджеста -> (R, G, B)."""
        if not isinstance(image, HashedImage):
            raise ImageSpecError(f"pick_color expects HashedImage, got {type(image).__name__}")
        r, g, b = image.digest_bytes[:3]
        return ColoredImage(hashed=image, color=(r, g, b))

    # ---------- 3) Сетка ----------
    @staticmethod
    def mirror_row(row: Sequence[int]) -> Tuple[int, ...]:
        """[a, b, c] -> [a, b, c, b, a]"""
        if len(row) < 2:
            raise ImageSpecError(f"cannot mirror a row of {len(row)} element(s)")
        first, second = row[0], row[1]
        return tuple(row) + (second, first)

    def build_grid(self, image: ColoredImage) -> GridImage:
        """
        Режет дайджест на строки по 3 байта, отзеркаливает каждую
        (`mirror_row`), склеивает и нумерует клетки 0..24.
        """
        if not isinstance(image, ColoredImage):
            raise ImageSpecError(f"build_grid expects ColoredImage, got {type(image).__name__}")
        chunk = self._config.chunk_size
        rows = np.asarray(image.digest_bytes, dtype=np.uint8).reshape(-1, chunk)
        mirrored = np.array([self.mirror_row(row) for row in rows.tolist()], dtype=np.uint8)
        flat = mirrored.flatten().tolist()
        grid = tuple((int(value), index) for index, value in enumerate(flat))
        return GridImage(colored=image, grid=grid)

    # ---------- 4) Отбор клеток ----------
    def filter_odd_squares(self, image: GridImage) -> FilteredImage:
        """Оставляет клетки с чётным значением, индексы сохраняются как есть."""
        if not isinstance(image, GridImage):
            raise ImageSpecError(f"filter_odd_squares expects GridImage, got {type(image).__name__}")
        kept = tuple((value, index) for value, index in image.grid if value % 2 == 0)
        logger.debug("%d of %d cells painted", len(kept), len(image.grid))
        return FilteredImage(source=image, grid=kept)

    # ---------- 5) Раскладка в пиксели ----------
    def build_pixel_map(self, image: FilteredImage) -> PixelMapImage:
        """
        Для каждой клетки считает прямоугольник на холсте 250x250:
        левый верхний угол (col * 50, row * 50), правый нижний +50 по обеим осям.
        Значение клетки здесь уже не используется, только индекс.
        """
        if not isinstance(image, FilteredImage):
            raise ImageSpecError(f"build_pixel_map expects FilteredImage, got {type(image).__name__}")
        size = self._config.grid_size
        cell = self._config.cell_px
        pixel_map = []
        for _value, index in image.grid:
            row, column = divmod(index, size)
            horizontal = column * cell
            vertical = row * cell
            rect: Rectangle = ((horizontal, vertical), (horizontal + cell, vertical + cell))
            pixel_map.append(rect)
        return PixelMapImage(filtered=image, pixel_map=tuple(pixel_map))
