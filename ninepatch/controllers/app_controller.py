"""Контроллер приложения: оркестрация UI, загрузки и масштабирования.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; расчёты вынесены в сервисы.
"""
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from tkinter import filedialog, TclError
from typing import Optional, Tuple

import customtkinter as ctk

from ninepatch.errors import DegenerateStretchWarning, NinePatchError
from ninepatch.models.image_model import ImageData
from ninepatch.models.scaling_request import ScaleResult
from ninepatch.services.border_markers import read_stretch_markers
from ninepatch.services.image_service import ImageService
from ninepatch.services.scale_service import NinePatchScaler
from ninepatch.ui.bottom_bar import BottomBar
from ninepatch.ui.image_viewer import ImageViewer
from ninepatch.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка nine-patch через `ImageService`.
    - Масштабирование через `NinePatchScaler` и сохранение результата.
    - Показ ошибок и предупреждений в строке статуса вместо падения UI.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk

    _image_service: ImageService = ImageService()
    _scaler: NinePatchScaler = NinePatchScaler()
    _current_image: Optional[ImageData] = None
    _result: Optional[ScaleResult] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_scale = self._handle_scale
        self.sidebar.on_save_result = self._handle_save_result

        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        # Bottom bar bindings
        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit
        self.bottom.on_guides_toggle = self.viewer.set_guides_visible

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите nine-patch изображение",
                filetypes=(
                    ("Images", "*.png *.gif *.bmp *.webp *.tiff"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            logger.warning("file dialog unavailable")
            return

        if not file_path:
            return

        try:
            image_data = self._image_service.load_image(file_path)
        except (NinePatchError, OSError) as exc:
            # OSError: нет прав на чтение, ошибка диска и т.п.
            self.sidebar.set_status(str(exc), is_error=True)
            return

        self._current_image = image_data
        self._result = None
        self.sidebar.set_image_info(image_data)
        self.sidebar.set_markers(read_stretch_markers(image_data.grid))
        # по умолчанию: собственный размер контента в пикселях
        self.sidebar.set_requested_size(max(1, image_data.width - 2), max(1, image_data.height - 2), True)
        self.sidebar.set_status("")
        self.bottom.set_output_size(None, None)
        self.viewer.set_source_image(image_data.pil_image)
        self._sync_zoom()

    def _handle_scale(self) -> None:
        if self._current_image is None:
            self.sidebar.set_status("Сначала откройте изображение", is_error=True)
            return
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DegenerateStretchWarning)
            try:
                request = self.sidebar.get_scaling_request()
                result = self._scaler.scale_request(self._current_image.grid, request)
            except NinePatchError as exc:
                self.sidebar.set_status(str(exc), is_error=True)
                return

        self._result = result
        self.viewer.set_result_image(result.grid.to_pil(), result.col_widths, result.row_heights)
        self.bottom.set_output_size(result.width, result.height)
        messages = [str(w.message) for w in caught if issubclass(w.category, DegenerateStretchWarning)]
        self.sidebar.set_status("\n".join(messages) if messages else "Готово", is_error=False)
        self._sync_zoom()

    def _handle_save_result(self) -> None:
        if self._result is None:
            self.sidebar.set_status("Нет результата для сохранения", is_error=True)
            return
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить результат",
                defaultextension=".png",
                filetypes=(("PNG", "*.png"), ("All files", "*.*")),
            )
        except TclError:
            logger.warning("file dialog unavailable")
            return
        if not file_path:
            return
        try:
            saved = self._image_service.save_image(self._result.grid, file_path)
        except OSError as exc:
            self.sidebar.set_status(f"Не удалось сохранить: {exc}", is_error=True)
            return
        self.sidebar.set_status(f"Сохранено: {saved}")

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgba)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # mouse wheel zoom -> bottom slider
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self._sync_zoom()

    # ---- Helpers ----
    def _sync_zoom(self) -> None:
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())
