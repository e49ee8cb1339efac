"""Контроллер приложения: оркестрация стадий, отрисовки и записи.

SOLID:
- SRP: класс связывает сервисы и (необязательно) окно, сам ничего не считает.
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются полями.
Clean Code:
- Ошибки сервисов превращаются в результат `(ok, message)` только здесь.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple

from identicon.errors import IdenticonError
from identicon.models.image_model import ImageData
from identicon.services.identicon_service import IdenticonService
from identicon.services.image_service import ImageService
from identicon.services.render_service import RenderService

if TYPE_CHECKING:
    from identicon.ui.identicon_view import IdenticonView

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Successfully create file, see path: {path}"


def _printable(text: str) -> str:
    # surrogates from undecodable argv bytes cannot be written to a strict stream
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


@dataclass
class AppController:
    """Связывает генерацию идентикона с файловой системой и окном просмотра.

    Ответственности:
    - Прогон строки через `IdenticonService` и `RenderService`.
    - Запись результата через `ImageService` в `output_dir`.
    - Обновление превью и строки статуса, если окно подключено.
    """
    output_dir: str | Path = "."
    view: Optional["IdenticonView"] = None

    _identicon_service: IdenticonService = field(default_factory=IdenticonService)
    _render_service: RenderService = field(default_factory=RenderService)
    _image_service: ImageService = field(default_factory=ImageService)
    _last_path: Optional[Path] = None
    _last_image: Optional[ImageData] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий окна."""
        if self.view is not None:
            self.view.on_generate = self._handle_generate

    def create_identicon(self, seed: str) -> Tuple[bool, str]:
        """Генерирует идентикон для `seed` и сохраняет его в `<output_dir>/<seed>.png`.

        Returns:
            `(True, "Successfully create file, see path: ./<seed>.png")` при успехе,
            `(False, <описание ошибки>)`, если хеширование, проверка записи
            или запись на диск не удались.
        """
        try:
            image = self._identicon_service.build(seed)
            data = self._render_service.compute_image(image)
            path = self._image_service.save_image(data, seed, self.output_dir)
        except IdenticonError as exc:
            logger.error("identicon for %r failed: %s", seed, exc)
            return False, _printable(str(exc))

        self._last_path = path
        logger.info("identicon for %r written to %s", seed, path)
        return True, SUCCESS_MESSAGE.format(path=self._display_path(path))

    @property
    def last_path(self) -> Optional[Path]:
        """Путь последнего успешно записанного файла."""
        return self._last_path

    @property
    def last_image(self) -> Optional[ImageData]:
        """Последний показанный в окне файл (перечитанный с диска)."""
        return self._last_image

    # ---- Handlers ----
    def _handle_generate(self, seed: str) -> None:
        if self.view is None:
            return
        if not seed:
            self.view.set_status(False, "Введите строку")
            return

        ok, message = self.create_identicon(seed)
        if ok and self._last_path is not None:
            try:
                self._last_image = self._image_service.load_image(self._last_path)
            except (FileNotFoundError, ValueError) as exc:
                # the file is written; only the preview is unavailable
                logger.warning("cannot preview %s: %s", self._last_path, exc)
            else:
                self.view.set_preview(self._last_image)
        self.view.set_status(ok, message)

    # ---- Helpers ----
    def _display_path(self, path: Path) -> str:
        """`./<seed>.png` для относительного пути, иначе путь как есть."""
        text = path.as_posix()
        if not path.is_absolute() and not text.startswith("../"):
            text = f"./{text}"
        return _printable(text)
