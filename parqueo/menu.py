"""A keyboard-driven menu: arrow keys move the selection, Enter picks it."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from typing import TextIO

from parqueo.validation import ENTER, getch

ARRIBA = "H"
ABAJO = "P"


def _limpiar_pantalla(out: TextIO) -> None:
    isatty = getattr(out, "isatty", None)
    if isatty is None or not isatty():
        return
    if sys.platform == "win32":
        out.flush()
        subprocess.run("cls", shell=True, check=False)
    else:
        out.write("\x1b[2J\x1b[H")


class Menu:
    """A titled list of options with one of them selected."""

    def __init__(self, title: str = "") -> None:
        self.title = title
        self.options: list[str] = []
        self._selected_index = 0

    def add_option(self, option: str) -> None:
        """Append ``option`` to the end of the menu."""
        self.options.append(option)

    def add_title(self, title: str) -> None:
        """Set the line shown above the options."""
        self.title = title

    def render(self) -> str:
        """Return the menu as text, marking the selected option with ``==>``."""
        partes = []
        if self.title:
            partes.append(self.title + "\n")
        partes.append("\n")
        for indice, opcion in enumerate(self.options):
            if indice == self._selected_index:
                partes.append(f"==> {opcion} \n")
            else:
                partes.append(f"  {opcion}\n")
        return "".join(partes)

    def display_menu(
        self,
        read_key: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> int:
        """Show the menu and let the user choose; return the chosen index.

        The selection wraps around at either end and is kept between calls.
        """
        if not self.options:
            raise ValueError("El menu no tiene opciones.")
        lector = getch if read_key is None else read_key
        destino = sys.stdout if out is None else out
        cantidad = len(self.options)
        while True:
            _limpiar_pantalla(destino)
            destino.write(self.render())
            destino.flush()
            tecla = lector()
            if not tecla:
                raise EOFError("No hay mas entrada.")
            if tecla == ARRIBA:
                self._selected_index = (self._selected_index - 1) % cantidad
            elif tecla == ABAJO:
                self._selected_index = (self._selected_index + 1) % cantidad
            elif tecla == ENTER:
                return self._selected_index

    @property
    def selected_option(self) -> int:
        """Index of the option currently selected."""
        return self._selected_index