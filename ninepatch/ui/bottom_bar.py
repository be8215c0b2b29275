"""Нижняя панель: масштаб просмотра, направляющие областей, размер результата."""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

ZOOM_PRESETS = (25, 50, 100, 200, 400, 800)
FIT_LABEL = "Fit"


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=64, **kwargs)

        # callbacks
        self.on_zoom_change: Optional[Callable[[int], None]] = None
        self.on_zoom_fit: Optional[Callable[[], None]] = None
        self.on_guides_toggle: Optional[Callable[[bool], None]] = None

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)  # slider stretches

        ctk.CTkLabel(self, text="Масштаб").grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._zoom_value = ctk.StringVar(value="100%")
        self._zoom_slider = ctk.CTkSlider(self, from_=10, to=800, number_of_steps=790, command=self._on_slider_change)
        self._zoom_slider.set(100)
        self._zoom_slider.grid(row=0, column=1, padx=6, pady=8, sticky="ew")
        ctk.CTkLabel(self, textvariable=self._zoom_value, width=48, anchor="w").grid(
            row=0, column=2, padx=(6, 12), pady=8, sticky="w"
        )

        self._presets = ctk.CTkSegmentedButton(
            self,
            values=[FIT_LABEL] + [f"{p}%" for p in ZOOM_PRESETS],
            command=self._on_preset,
        )
        self._presets.set(FIT_LABEL)
        self._presets.grid(row=0, column=3, padx=6, pady=8, sticky="w")

        self._guides_val = ctk.BooleanVar(value=True)
        self._guides_check = ctk.CTkCheckBox(
            self, text="Границы областей", variable=self._guides_val, command=self._on_guides_toggle
        )
        self._guides_check.grid(row=0, column=4, padx=6, pady=8, sticky="w")

        self._output_value = ctk.StringVar(value="Результат: —")
        ctk.CTkLabel(self, textvariable=self._output_value, anchor="e").grid(
            row=0, column=5, padx=(6, 12), pady=8, sticky="e"
        )

    # public API (sync from controller)
    def set_zoom_percent(self, percent: int) -> None:
        self._zoom_slider.set(percent)
        self._zoom_value.set(f"{percent}%")
        if percent in ZOOM_PRESETS:
            self._presets.set(f"{percent}%")

    def set_output_size(self, width: Optional[int], height: Optional[int]) -> None:
        size = "—" if width is None or height is None else f"{width} × {height} px"
        self._output_value.set(f"Результат: {size}")

    # events
    def _on_slider_change(self, value: float) -> None:
        percent = int(round(value))
        self._zoom_value.set(f"{percent}%")
        if self.on_zoom_change:
            self.on_zoom_change(percent)

    def _on_preset(self, value: str) -> None:
        if value == FIT_LABEL:
            if self.on_zoom_fit:
                self.on_zoom_fit()
        elif self.on_zoom_change:
            self.on_zoom_change(int(value.rstrip("%")))

    def _on_guides_toggle(self) -> None:
        if self.on_guides_toggle:
            self.on_guides_toggle(bool(self._guides_val.get()))
