"""The parking lot: a fixed row of spaces, each empty or holding a vehicle."""

from __future__ import annotations

import sys
from typing import TextIO

from parqueo.vehiculo import Vehiculo

CAPACIDAD_TOTAL = 300
_POR_FILA = 10


class Parqueadero:
    """A parking lot with ``cantidad`` spaces, all empty at first."""

    def __init__(self, cantidad: int = CAPACIDAD_TOTAL) -> None:
        if cantidad < 0:
            raise ValueError("La cantidad de celdas no puede ser negativa.")
        self._celdas: list[Vehiculo | None] = [None] * cantidad
        self._historial: list[str] = []

    def __len__(self) -> int:
        return len(self._celdas)

    @property
    def celdas(self) -> tuple[Vehiculo | None, ...]:
        """The spaces in order; ``None`` marks an empty one."""
        return tuple(self._celdas)

    def ver_historial(self) -> list[str]:
        """Return a copy of the entry and exit history."""
        return list(self._historial)

    def buscar_auto(self, placa: str) -> int | None:
        """Return the index of the space holding ``placa``, or ``None``."""
        return next(
            (
                indice
                for indice, vehiculo in enumerate(self._celdas)
                if vehiculo is not None and vehiculo.placa == placa
            ),
            None,
        )

    def ver_parqueadero(self) -> str:
        """Render the lot, ``[O]`` for free and ``[X]`` for taken, ten per line."""
        partes = []
        for numero, vehiculo in enumerate(self._celdas, start=1):
            partes.append("[O] " if vehiculo is None else "[X] ")
            if numero % _POR_FILA == 0:
                partes.append("\n")
        return "".join(partes)

    def consultar_disponibilidad(self) -> int:
        """Return how many spaces are free."""
        return sum(vehiculo is None for vehiculo in self._celdas)

    def _en_rango(self, indice: int) -> bool:
        return 0 <= indice < len(self._celdas)

    def marcar_casilla_ocupada(self, indice: int) -> bool:
        """Put a default vehicle in a free space; return whether anything changed."""
        if self._en_rango(indice) and self._celdas[indice] is None:
            self._celdas[indice] = Vehiculo()
            return True
        return False

    def marcar_casilla_libre(self, indice: int) -> bool:
        """Empty a taken space; return whether anything changed."""
        if self._en_rango(indice) and self._celdas[indice] is not None:
            self._celdas[indice] = None
            return True
        return False

    def mostrar_estado(self, out: TextIO | None = None) -> None:
        """Write the rendered lot to ``out`` (standard output by default)."""
        (sys.stdout if out is None else out).write(self.ver_parqueadero())