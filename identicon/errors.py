"""Иерархия исключений генератора.

Сервисы только поднимают эти исключения; в результат `(ok, message)`
их превращает контроллер.
"""
from __future__ import annotations


class IdenticonError(Exception):
    """Базовое исключение пакета."""


class HashInputError(IdenticonError, TypeError):
    """Входное значение нельзя захешировать (не `str` и не `bytes`)."""


class ImageSpecError(IdenticonError, ValueError):
    """Стадия получила запись с отсутствующими или повреждёнными полями."""


class StorageError(IdenticonError, OSError):
    """Запись файла на диск не удалась."""
