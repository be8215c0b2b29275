"""Исключения и предупреждения масштабирования nine-patch.

Принципы:
- Фатальные ошибки наследуют `ValueError`, чтобы вызывающий код мог ловить их привычно.
- Предупреждение о вырожденном растяжении не прерывает операцию.
"""
from __future__ import annotations


class NinePatchError(Exception):
    """Базовая ошибка пакета."""


class ImageDecodeError(NinePatchError, ValueError):
    """Источник не удаётся интерпретировать как изображение."""


class InvalidInputError(NinePatchError, ValueError):
    """Некорректные входные данные: слишком маленькое изображение, параметры <= 0 и т.п."""


class DegenerateStretchWarning(UserWarning):
    """Ось без маркеров при изменении размера или нулевой бюджет растяжения."""
