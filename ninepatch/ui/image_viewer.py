"""Виджет просмотра результата nine-patch: зум, панорамирование, границы областей.

Принципы:
- SRP: отвечает только за представление и интеракции с изображением.
- Состояние вида (масштаб, смещение) отделено от отображаемых данных.
"""
from __future__ import annotations

from itertools import accumulate
from typing import Callable, List, Optional, Sequence, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

MIN_ZOOM = 0.1
MAX_ZOOM = 8.0
WHEEL_STEP = 1.1

Rgba = Tuple[int, int, int, int]


def _clamp_zoom(value: float) -> float:
    return max(MIN_ZOOM, min(MAX_ZOOM, value))


def _clamp_offset(offset: int, content: int, viewport: int) -> int:
    """Смещение вдоль оси: по центру, если контент меньше окна, иначе без пустых полей."""
    if content <= viewport:
        return (viewport - content) // 2
    return max(viewport - content, min(0, offset))


class ImageViewer(ctk.CTkFrame):
    """Канва с исходником и результатом; пробел временно показывает исходник."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._source_image: Optional[Image.Image] = None
        self._result_image: Optional[Image.Image] = None
        self._photo: Optional[ImageTk.PhotoImage] = None

        # границы областей результата (px результата), без крайних 0 и ширины
        self._col_edges: List[int] = []
        self._row_edges: List[int] = []
        self._show_guides: bool = True

        self._zoom: float = 1.0
        self._offset: Optional[Tuple[int, int]] = None
        self._drag_anchor: Optional[Tuple[int, int, int, int]] = None
        self._show_source: bool = False

        self.on_cursor_move: Optional[Callable[[Optional[int], Optional[int], Optional[Rgba]], None]] = None
        self.on_zoom_change: Optional[Callable[[int], None]] = None

        bindings = {
            "<Configure>": lambda _e: self._render(),
            "<Motion>": self._on_mouse_move,
            "<Leave>": lambda _e: self._emit_cursor(None, None, None),
            "<MouseWheel>": self._on_wheel,  # Windows/macOS
            "<Button-4>": self._on_wheel,    # X11 up
            "<Button-5>": self._on_wheel,    # X11 down
            "<ButtonPress-1>": self._on_drag_start,
            "<B1-Motion>": self._on_drag_move,
            "<ButtonRelease-1>": self._on_drag_end,
            "<KeyPress-space>": lambda _e: self._set_show_source(True),
            "<KeyRelease-space>": lambda _e: self._set_show_source(False),
        }
        for sequence, handler in bindings.items():
            self._canvas.bind(sequence, handler)

    # ---- Public API ----
    def set_source_image(self, image: Image.Image) -> None:
        """Устанавливает исходный nine-patch и сбрасывает результат."""
        self._source_image = image
        self._result_image = None
        self._col_edges, self._row_edges = [], []
        self.set_zoom_to_fit()

    def set_result_image(self, image: Optional[Image.Image], col_widths: Sequence[int] = (), row_heights: Sequence[int] = ()) -> None:
        """Устанавливает результат и размеры областей для направляющих."""
        self._result_image = image
        self._col_edges = list(accumulate(col_widths))[:-1]
        self._row_edges = list(accumulate(row_heights))[:-1]
        self.set_zoom_to_fit()

    def set_guides_visible(self, visible: bool) -> None:
        self._show_guides = visible
        self._render()

    def set_zoom_to_fit(self) -> None:
        image = self._displayed_image()
        if image is not None and image.width and image.height:
            canvas_w, canvas_h = self._canvas_size()
            self._zoom = _clamp_zoom(min(canvas_w / image.width, canvas_h / image.height))
        self._offset = None
        self._render()

    def set_zoom_percent(self, zoom_percent: int) -> None:
        self._zoom = _clamp_zoom(zoom_percent / 100.0)
        self._render()

    def get_zoom_percent(self) -> int:
        return int(round(self._zoom * 100))

    # ---- Rendering ----
    def _displayed_image(self) -> Optional[Image.Image]:
        if self._result_image is not None and not self._show_source:
            return self._result_image
        return self._source_image

    def _canvas_size(self) -> Tuple[int, int]:
        return max(1, int(self._canvas.winfo_width())), max(1, int(self._canvas.winfo_height()))

    def _render(self) -> None:
        self._canvas.delete("all")
        image = self._displayed_image()
        if image is None:
            return

        canvas_w, canvas_h = self._canvas_size()
        view_w = max(1, int(image.width * self._zoom))
        view_h = max(1, int(image.height * self._zoom))
        ox, oy = self._offset or (0, 0)
        self._offset = (_clamp_offset(ox, view_w, canvas_w), _clamp_offset(oy, view_h, canvas_h))
        ox, oy = self._offset

        # nearest: 1px markers and band edges must stay crisp
        self._photo = ImageTk.PhotoImage(image.resize((view_w, view_h), Image.Resampling.NEAREST))
        self._canvas.create_image(ox, oy, image=self._photo, anchor="nw")

        if self._show_guides and image is self._result_image:
            for edge in self._col_edges:
                x = ox + edge * self._zoom
                self._canvas.create_line(x, oy, x, oy + view_h, fill="#FF00AA", dash=(4, 3))
            for edge in self._row_edges:
                y = oy + edge * self._zoom
                self._canvas.create_line(ox, y, ox + view_w, y, fill="#FF00AA", dash=(4, 3))

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    # ---- Cursor ----
    def _image_coords(self, cx: int, cy: int) -> Tuple[Optional[int], Optional[int]]:
        image = self._displayed_image()
        if image is None or self._offset is None:
            return None, None
        x = int((cx - self._offset[0]) // self._zoom)
        y = int((cy - self._offset[1]) // self._zoom)
        if 0 <= x < image.width and 0 <= y < image.height:
            return x, y
        return None, None

    def _on_mouse_move(self, event: tk.Event) -> None:
        x, y = self._image_coords(event.x, event.y)
        if x is None or y is None:
            self._emit_cursor(None, None, None)
            return
        self._emit_cursor(x, y, self._displayed_image().getpixel((x, y)))

    def _emit_cursor(self, x: Optional[int], y: Optional[int], rgba: Optional[Rgba]) -> None:
        if self.on_cursor_move:
            self.on_cursor_move(x, y, rgba)

    # ---- Zoom & pan ----
    def _on_wheel(self, event: tk.Event) -> None:
        if self._displayed_image() is None or self._offset is None:
            return
        # X11 reports Button-4/5, other platforms a signed delta
        up = getattr(event, "num", None) == 4 or getattr(event, "delta", 0) > 0
        new_zoom = _clamp_zoom(self._zoom * (WHEEL_STEP if up else 1.0 / WHEEL_STEP))
        if abs(new_zoom - self._zoom) < 1e-6:
            return

        # keep the image point under the cursor fixed
        ox, oy = self._offset
        ratio = new_zoom / self._zoom
        self._offset = (int(round(event.x - (event.x - ox) * ratio)), int(round(event.y - (event.y - oy) * ratio)))
        self._zoom = new_zoom
        self._render()
        if self.on_zoom_change:
            self.on_zoom_change(self.get_zoom_percent())

    def _on_drag_start(self, event: tk.Event) -> None:
        if self._offset is None:
            return
        self._canvas.focus_set()
        self._drag_anchor = (event.x, event.y, *self._offset)

    def _on_drag_move(self, event: tk.Event) -> None:
        if self._drag_anchor is None:
            return
        sx, sy, ox, oy = self._drag_anchor
        self._offset = (ox + event.x - sx, oy + event.y - sy)
        self._render()

    def _on_drag_end(self, _event: tk.Event) -> None:
        self._drag_anchor = None

    def _set_show_source(self, show: bool) -> None:
        if self._result_image is None or self._show_source == show:
            return
        self._show_source = show
        self.set_zoom_to_fit()
