"""Боковая панель: файл, информация, маркеры, курсор и параметры масштабирования.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import customtkinter as ctk

from ninepatch.config import settings
from ninepatch.errors import InvalidInputError
from ninepatch.models.image_model import ImageData
from ninepatch.models.regions import StretchMarkers, StretchSegment
from ninepatch.models.scaling_request import ScalingRequest


def _rgba_to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


def _format_segments(segments: List[StretchSegment]) -> str:
    if not segments:
        return "нет"
    return ", ".join(f"[{s.start}–{s.end}]" for s in segments)


def _format_number(value: float) -> str:
    return f"{value:g}"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: файл, информация, маркеры, курсор, масштабирование."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_scale: Optional[Callable[[], None]] = None
        self.on_save_result: Optional[Callable[[], None]] = None

        # File
        self._title = ctk.CTkLabel(self, text="Файл", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, columnspan=2, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть nine-patch…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, columnspan=2, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=2, column=0, columnspan=2, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")
        info_vars = (self._path_val, self._size_val, self._dims_val, self._mode_val)
        for i, var in enumerate(info_vars):
            label = ctk.CTkLabel(self, textvariable=var, wraplength=250, anchor="w", justify="left")
            label.grid(row=3 + i, column=0, columnspan=2, padx=8, pady=(0, 2), sticky="ew")

        # Markers
        self._markers_title = ctk.CTkLabel(self, text="Маркеры", font=ctk.CTkFont(size=16, weight="bold"))
        self._markers_title.grid(row=7, column=0, columnspan=2, padx=8, pady=(8, 4), sticky="w")
        self._markers_top_val = ctk.StringVar(value="Колонки: —")
        self._markers_left_val = ctk.StringVar(value="Строки: —")
        ctk.CTkLabel(self, textvariable=self._markers_top_val, wraplength=250, anchor="w", justify="left").grid(
            row=8, column=0, columnspan=2, padx=8, pady=(0, 2), sticky="ew"
        )
        ctk.CTkLabel(self, textvariable=self._markers_left_val, wraplength=250, anchor="w", justify="left").grid(
            row=9, column=0, columnspan=2, padx=8, pady=(0, 2), sticky="ew"
        )

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=ctk.CTkFont(size=16, weight="bold"))
        self._cursor_title.grid(row=10, column=0, columnspan=2, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgba_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")
        for i, var in enumerate((self._cursor_xy_val, self._cursor_rgba_val, self._cursor_hex_val)):
            ctk.CTkLabel(self, textvariable=var, anchor="w", justify="left").grid(
                row=11 + i, column=0, columnspan=2, padx=8, pady=(0, 2), sticky="ew"
            )

        # Scaling
        self._scale_title = ctk.CTkLabel(self, text="Масштабирование", font=ctk.CTkFont(size=16, weight="bold"))
        self._scale_title.grid(row=20, column=0, columnspan=2, padx=8, pady=(8, 4), sticky="w")

        self._width_val = ctk.StringVar(value="100")
        self._height_val = ctk.StringVar(value="100")
        self._design_w_val = ctk.StringVar(value=_format_number(settings.design_width))
        self._design_h_val = ctk.StringVar(value=_format_number(settings.design_height))
        self._target_w_val = ctk.StringVar(value=_format_number(settings.target_design_width))
        self._target_h_val = ctk.StringVar(value=_format_number(settings.target_design_height))
        self._raw_px_val = ctk.BooleanVar(value=False)
        self._entries: List[ctk.CTkEntry] = []

        self._add_pair(21, "Ширина × высота", self._width_val, self._height_val)
        self._raw_px_check = ctk.CTkCheckBox(self, text="Размер в пикселях (без ×4)", variable=self._raw_px_val)
        self._raw_px_check.grid(row=23, column=0, columnspan=2, padx=8, pady=(2, 6), sticky="w")
        self._add_pair(24, "Разрешение дизайна", self._design_w_val, self._design_h_val)
        self._add_pair(26, "Целевое разрешение", self._target_w_val, self._target_h_val)

        self._scale_btn = ctk.CTkButton(self, text="Масштабировать", command=self._emit_scale)
        self._scale_btn.grid(row=28, column=0, columnspan=2, padx=8, pady=(6, 4), sticky="ew")
        self._save_btn = ctk.CTkButton(self, text="Сохранить результат…", command=self._emit_save_result)
        self._save_btn.grid(row=29, column=0, columnspan=2, padx=8, pady=(0, 8), sticky="ew")

        # Enter в любом поле запускает масштабирование
        for entry in self._entries:
            entry.bind("<Return>", lambda _e: self._emit_scale())

        self._status_val = ctk.StringVar(value="")
        self._status = ctk.CTkLabel(self, textvariable=self._status_val, wraplength=250, anchor="w", justify="left")
        self._status.grid(row=30, column=0, columnspan=2, padx=8, pady=(0, 8), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path) if image_data.path else "—")
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")
        self._mode_val.set(image_data.mode)

    def set_markers(self, markers: Optional[StretchMarkers]) -> None:
        if markers is None:
            self._markers_top_val.set("Колонки: —")
            self._markers_left_val.set("Строки: —")
            return
        self._markers_top_val.set(f"Колонки: {_format_segments(markers.top)}")
        self._markers_left_val.set(f"Строки: {_format_segments(markers.left)}")

    def set_requested_size(self, width: float, height: float, is_raw_pixel_units: bool) -> None:
        self._width_val.set(_format_number(width))
        self._height_val.set(_format_number(height))
        self._raw_px_val.set(is_raw_pixel_units)

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        """Обновляет информацию по курсору (координаты, RGBA, HEX)."""
        if x is None or y is None or rgba is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgba_val.set("—")
            self._cursor_hex_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b, a = rgba
        self._cursor_rgba_val.set(f"RGBA: {r}, {g}, {b}, {a}")
        self._cursor_hex_val.set(f"HEX: {_rgba_to_hex(rgba)}")

    def set_status(self, text: str, is_error: bool = False) -> None:
        self._status_val.set(text)
        self._status.configure(text_color=("#B00020", "#FF6B6B") if is_error else ("gray10", "gray90"))

    def get_scaling_request(self) -> ScalingRequest:
        """Собирает `ScalingRequest` из полей.

        Raises:
            InvalidInputError: если какое-либо поле не число.
        """
        return ScalingRequest(
            width=self._read_float(self._width_val, "Ширина"),
            height=self._read_float(self._height_val, "Высота"),
            is_raw_pixel_units=bool(self._raw_px_val.get()),
            design_width=self._read_float(self._design_w_val, "Ширина дизайна"),
            design_height=self._read_float(self._design_h_val, "Высота дизайна"),
            target_design_width=self._read_float(self._target_w_val, "Целевая ширина"),
            target_design_height=self._read_float(self._target_h_val, "Целевая высота"),
        )

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_scale(self) -> None:
        if self.on_scale:
            self.on_scale()

    def _emit_save_result(self) -> None:
        if self.on_save_result:
            self.on_save_result()

    # ---- Helpers ----
    def _add_pair(self, row: int, title: str, left: ctk.StringVar, right: ctk.StringVar) -> None:
        ctk.CTkLabel(self, text=title, anchor="w").grid(row=row, column=0, columnspan=2, padx=8, pady=(2, 0), sticky="w")
        left_entry = ctk.CTkEntry(self, textvariable=left, width=100)
        right_entry = ctk.CTkEntry(self, textvariable=right, width=100)
        left_entry.grid(row=row + 1, column=0, padx=(8, 4), pady=(0, 4), sticky="ew")
        right_entry.grid(row=row + 1, column=1, padx=(4, 8), pady=(0, 4), sticky="ew")
        self._entries.extend((left_entry, right_entry))

    def _read_float(self, var: ctk.StringVar, name: str) -> float:
        text = var.get().strip().replace(",", ".")
        try:
            return float(text)
        except ValueError as exc:
            raise InvalidInputError(f"{name}: «{text}» не число") from exc

    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3), ("ГБ", 1024**4)]
        for label, limit in thresholds:
            if size_bytes < limit:
                if label == "Б":
                    return f"{size_bytes} {label}"
                value = size_bytes / (limit // 1024)
                return f"{value:.1f} {label}"
        value = size_bytes / (1024**4)
        return f"{value:.1f} ГБ"
