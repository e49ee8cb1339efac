"""Запись идентиконов на диск и чтение их обратно.

Принципы:
- SRP: класс отвечает только за файловую систему, байты картинки готовит `RenderService`.
- Файл либо записан целиком, либо не тронут: пишем во временный файл рядом
  и переименовываем поверх цели.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from identicon.config import CONFIG, IdenticonConfig
from identicon.errors import StorageError
from identicon.models.image_model import ImageData

logger = logging.getLogger(__name__)


class ImageService:
    def __init__(self, config: IdenticonConfig = CONFIG) -> None:
        self._config = config

    def output_path(self, seed: str, directory: str | Path = ".") -> Path:
        """`<directory>/<seed>.png`; имя не санируется, за это отвечает вызывающий."""
        return Path(directory) / f"{seed}{self._config.file_suffix}"

    def save_image(self, data: bytes, seed: str, directory: str | Path = ".") -> Path:
        """Записывает байты изображения, полностью заменяя существующий файл.

        Args:
            data: Закодированный PNG.
            seed: Исходная строка, из неё строится имя файла.
            directory: Каталог назначения.

        Returns:
            Путь к записанному файлу.

        Raises:
            StorageError: если каталог недоступен, диск заполнен или путь некорректен
                (в том числе содержит нулевой байт).
        """
        path = self.output_path(seed, directory)
        tmp_name: Optional[str] = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".identicon-", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, ValueError) as exc:
            # ValueError: the path itself is unusable, e.g. an embedded NUL byte
            raise StorageError(f"Не удалось записать файл {path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("could not remove temporary file %s", tmp_name)

        logger.debug("wrote %d bytes to %s", len(data), path)
        return path

    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as img:
                pil_image = img.convert("RGB")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
        )
