"""Visualizador com Threading para evitar congelamento."""
from __future__ import annotations

import logging
import threading
import tkinter as tk
from tkinter import ttk

from PIL import ImageTk

from .config import DisplayMode
from .convolution import BoundaryPolicy
from .detector import EdgeDetector
from .imageio import buffer_to_image
from .kernels import KernelType
from .normalization import NormalizationMode
from .pixels import PixelBuffer
from .text import help_text

logger = logging.getLogger(__name__)

NORMALIZATION_KEYS = {
    "l": NormalizationMode.LOCAL,
    "g": NormalizationMode.GLOBAL,
    "n": NormalizationMode.NONE,
}


class ImagePanel(ttk.Label):
    def __init__(self, master: tk.Widget, text: str) -> None:
        super().__init__(master, text=text, anchor="center")
        self.image = None

    def update_image(self, buffer: PixelBuffer) -> None:
        self.image = ImageTk.PhotoImage(buffer_to_image(buffer))
        self.configure(image=self.image, text="")

    def clear(self) -> None:
        self.configure(image="", text="Sem imagem")


class EdgeViewer(tk.Tk):
    def __init__(self, detector: EdgeDetector) -> None:
        super().__init__()
        self.detector = detector
        self.busy = False

        self.panel = ImagePanel(self, "Sem imagem")
        self.panel.pack(fill="both", expand=True)

        text = tk.Text(self, height=5, wrap="word", bg="#f0f0f0")
        text.insert("1.0", help_text())
        text.configure(state="disabled")
        text.pack(fill="x", padx=5, pady=5)

        # Barra de status
        self.status_var = tk.StringVar(value="Pronto.")
        self.status_bar = ttk.Label(self, textvariable=self.status_var, relief=tk.SUNKEN, anchor="w")
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

        self.bind("<Key>", self._on_key)
        self._show()

    # --- UTILITÁRIO DE THREADING ---
    def _run_async(self, worker_func) -> None:
        """
        Executa worker_func (que recalcula as bordas) em uma thread separada.
        Quando terminar, atualiza a janela na thread principal.
        """
        if self.busy:
            return
        self.busy = True
        self.config(cursor="watch")
        self.status_var.set("Processando... Aguarde (pode demorar em Python puro)...")
        self.update_idletasks()

        def thread_target():
            try:
                worker_func()
                self.after(0, self._on_process_complete)
            except Exception as e:
                logger.exception("Erro na thread de detecção")
                self.after(0, self._on_process_error, e)

        threading.Thread(target=thread_target, daemon=True).start()

    def _on_process_complete(self) -> None:
        self.busy = False
        self.config(cursor="")
        self.status_var.set("Concluído.")
        self._show()

    def _on_process_error(self, error: Exception) -> None:
        self.busy = False
        self.config(cursor="")
        self.status_var.set(f"Erro: {error}")

    def _show(self) -> None:
        self.title(self.detector.caption())
        if self.detector.ready:
            self.panel.update_image(self.detector.displayed())
        else:
            self.panel.clear()

    def _on_key(self, event: tk.Event) -> None:
        key = event.char
        if self.busy or not key:
            return
        if key in ("o", "e"):
            self.detector.set_display_mode(DisplayMode.ORIGINAL if key == "o" else DisplayMode.EDGES)
            self._show()
        elif "1" <= key <= str(len(KernelType)):
            kind = KernelType(int(key) - 1)
            self._run_async(lambda: self.detector.set_kernel(kind))
        elif key in NORMALIZATION_KEYS:
            mode = NORMALIZATION_KEYS[key]
            self._run_async(lambda: self.detector.set_normalization(mode))
        elif key == "s":
            policy = (
                BoundaryPolicy.STRICT
                if self.detector.boundary is BoundaryPolicy.LEGACY
                else BoundaryPolicy.LEGACY
            )
            self._run_async(lambda: self.detector.set_boundary(policy))


def run(detector: EdgeDetector) -> None:
    app = EdgeViewer(detector)
    app.mainloop()
