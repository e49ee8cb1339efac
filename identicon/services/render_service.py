from __future__ import annotations

import io

from PIL import Image, ImageDraw

from identicon.config import CONFIG, IdenticonConfig
from identicon.errors import ImageSpecError
from identicon.models.image_model import PixelMapImage


class RenderService:
    """Отрисовка карты пикселей на холсте Pillow и кодирование в PNG."""

    def __init__(self, config: IdenticonConfig = CONFIG) -> None:
        self._config = config

    def draw(self, image: PixelMapImage) -> Image.Image:
        """
        Создаёт холст 250x250 с фоном и заливает каждый прямоугольник
        карты цветом идентикона, в порядке карты. Углы включительно.
        """
        if not isinstance(image, PixelMapImage):
            raise ImageSpecError(f"draw expects PixelMapImage, got {type(image).__name__}")
        size = self._config.canvas_px
        canvas = Image.new("RGB", (size, size), color=self._config.background)
        draw = ImageDraw.Draw(canvas)
        for top_left, bottom_right in image.pixel_map:
            draw.rectangle([top_left, bottom_right], fill=image.color)
        return canvas

    def compute_image(self, image: PixelMapImage) -> bytes:
        """Возвращает закодированный битмап (PNG) без записи на диск."""
        buffer = io.BytesIO()
        self.draw(image).save(buffer, format=self._config.image_format)
        return buffer.getvalue()
