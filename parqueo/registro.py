"""Entry and exit records of the vehicles using the parking lot."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from os import PathLike

from parqueo.vehiculo import Vehiculo

FORMATO_FECHA = "%Y-%m-%d %H:%M:%S"
HORA_VACIA = "00:00:00"
HISTORIAL_PREDETERMINADO = "output/Historial.txt"

_Ruta = str | PathLike


def marca_de_tiempo(ahora: datetime | None = None) -> str:
    """Return ``ahora`` (the current local time by default) as ``YYYY-MM-DD HH:MM:SS``."""
    return (datetime.now() if ahora is None else ahora).strftime(FORMATO_FECHA)


@dataclass
class Registro:
    """Which space a plate took and when it came in and left.

    An empty ``salida`` given to the constructor is stored as ``00:00:00``.
    """

    placa: str
    celda: int
    ingreso: str
    salida: str = ""

    def __post_init__(self) -> None:
        if self.celda < 0:
            raise ValueError("El número de celda debe ser un valor positivo.")
        if not self.ingreso:
            raise ValueError("El tiempo de ingreso no puede estar vacío.")
        if self.salida and self.salida < self.ingreso:
            raise ValueError("El tiempo de salida no puede ser anterior al de ingreso.")
        if not self.salida:
            self.salida = HORA_VACIA

    def __setattr__(self, nombre: str, valor: object) -> None:
        if nombre == "placa" and not valor:
            raise ValueError("La placa no puede estar vacía")
        super().__setattr__(nombre, valor)

    @classmethod
    def vacio(cls) -> Registro:
        """Return a placeholder record: unknown plate, space -1, zero times."""
        registro = cls("UNKNOWN", 0, HORA_VACIA, HORA_VACIA)
        registro.celda = -1
        return registro

    def _anotar(self, historial: _Ruta) -> None:
        with open(historial, "a", encoding="utf-8") as archivo:
            archivo.write(self.to_string() + "\n\n")

    def registrar_ingreso(
        self,
        vehiculo: Vehiculo | None = None,
        historial: _Ruta = HISTORIAL_PREDETERMINADO,
        ahora: datetime | None = None,
    ) -> None:
        """Stamp the entry time and append this record to ``historial``."""
        self.ingreso = marca_de_tiempo(ahora)
        self._anotar(historial)

    def registrar_salida(
        self,
        vehiculo: Vehiculo | None = None,
        historial: _Ruta = HISTORIAL_PREDETERMINADO,
        ahora: datetime | None = None,
    ) -> None:
        """Stamp the exit time and append this record to ``historial``."""
        self.salida = marca_de_tiempo(ahora)
        self._anotar(historial)

    def to_string(self) -> str:
        """Return the record as the lines written to the history file."""
        salida = self.salida if self.salida else "No ha salido"
        return (
            f"Placa: {self.placa}\n"
            f"Celda: {self.celda}\n"
            f"Ingreso: {self.ingreso}\n"
            f"Salida: {salida}"
        )