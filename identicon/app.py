from __future__ import annotations

from pathlib import Path

import customtkinter as ctk

from identicon.controllers.app_controller import AppController
from identicon.ui.identicon_view import IdenticonView


class IdenticonApp(ctk.CTk):
    def __init__(self, output_dir: str | Path = ".") -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Identicon")
        self.resizable(False, False)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._view = IdenticonView(self)
        self._view.grid(row=0, column=0, sticky="nsew", padx=12, pady=12)

        self._controller = AppController(output_dir=output_dir, view=self._view)
        self._controller.bind_events()
