"""Панель генерации: ввод строки, превью и статус.

Принципы:
- SRP: управляет только UI, генерацию выполняет контроллер.
- ISP: события наружу через `on_*`, обновления внутрь через `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from identicon.config import CONFIG
from identicon.models.image_model import ImageData


def _rgb_to_hex(rgb: tuple) -> str:
    r, g, b = rgb[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


class IdenticonView(ctk.CTkFrame):
    """Поле ввода, кнопка «Создать», превью 250x250 и строка статуса."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # callbacks
        self.on_generate: Optional[Callable[[str], None]] = None

        self._title = ctk.CTkLabel(self, text="Идентикон", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, columnspan=2, padx=8, pady=(8, 4), sticky="w")

        self._seed_val = ctk.StringVar(value="")
        self._seed_entry = ctk.CTkEntry(self, textvariable=self._seed_val, placeholder_text="Строка, e-mail, ник…")
        self._seed_entry.grid(row=1, column=0, padx=(8, 4), pady=(0, 8), sticky="ew")
        self._seed_entry.bind("<Return>", lambda _event: self._emit_generate())

        self._generate_btn = ctk.CTkButton(self, text="Создать", width=96, command=self._emit_generate)
        self._generate_btn.grid(row=1, column=1, padx=(4, 8), pady=(0, 8), sticky="e")

        size = CONFIG.canvas_px
        self._preview = ctk.CTkLabel(self, text="", width=size, height=size)
        self._preview.grid(row=2, column=0, columnspan=2, padx=8, pady=8)
        self._preview_image: Optional[ctk.CTkImage] = None

        self._color_val = ctk.StringVar(value="—")
        self._color_label = ctk.CTkLabel(self, textvariable=self._color_val, anchor="w")
        self._color_label.grid(row=3, column=0, columnspan=2, padx=8, pady=(0, 2), sticky="ew")

        self._status_val = ctk.StringVar(value="")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_val, wraplength=300, anchor="w", justify="left")
        self._status_label.grid(row=4, column=0, columnspan=2, padx=8, pady=(0, 8), sticky="ew")
        self._status_color = self._status_label.cget("text_color")

    # public API (sync from controller)
    def set_preview(self, image_data: ImageData) -> None:
        """Показывает записанный файл и цвет его первой закрашенной клетки."""
        self._preview_image = ctk.CTkImage(
            light_image=image_data.pil_image,
            dark_image=image_data.pil_image,
            size=(image_data.width, image_data.height),
        )
        self._preview.configure(image=self._preview_image)
        colors = image_data.pil_image.getcolors(maxcolors=4) or []
        painted = [rgb for _count, rgb in colors if tuple(rgb) != CONFIG.background]
        self._color_val.set(_rgb_to_hex(painted[0]) if painted else "—")

    def set_status(self, ok: bool, message: str) -> None:
        self._status_val.set(message)
        self._status_label.configure(text_color=self._status_color if ok else "#D9534F")

    def _emit_generate(self) -> None:
        if self.on_generate:
            self.on_generate(self._seed_val.get())
