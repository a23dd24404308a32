"""A circular list of records, loadable from the comma-separated data files."""

from __future__ import annotations

import re
from collections.abc import Iterator
from os import PathLike
from typing import Generic, TypeVar

from parqueo.archivo import leer_lineas
from parqueo.persona import Persona
from parqueo.registro import Registro
from parqueo.vehiculo import Vehiculo, validar_placa

T = TypeVar("T")
_Ruta = str | PathLike

_ENTERO = re.compile(r"\s*([+-]?\d+)")


def _a_entero(texto: str) -> int:
    """Read the integer at the start of ``texto``, ignoring what follows it."""
    coincidencia = _ENTERO.match(texto)
    if coincidencia is None:
        raise ValueError(f"Numero no valido: {texto!r}")
    return int(coincidencia.group(1))


def _recortar(resto: str) -> tuple[str, str]:
    """Split off the first field; without a comma the rest stays as it is."""
    campo, coma, despues = resto.partition(",")
    return (campo, despues) if coma else (resto, resto)


def _campo(linea: str, inicio: int) -> tuple[str, int]:
    """Return the field starting at ``inicio``; past the last comma, go back to 0."""
    fin = linea.find(",", inicio)
    if fin < 0:
        return linea[inicio:], 0
    return linea[inicio:fin], fin + 1


def _leer_persona(linea: str) -> Persona:
    nombre, inicio = _campo(linea, 0)
    cedula, inicio = _campo(linea, inicio)
    correo, inicio = _campo(linea, inicio)
    direccion, inicio = _campo(linea, inicio)
    edad, inicio = _campo(linea, inicio)
    telefono, inicio = _campo(linea, inicio)
    return Persona(
        nombre=nombre,
        cedula=cedula,
        correo=correo,
        direccion=direccion,
        edad=_a_entero(edad),
        telefono=telefono,
        fecha_nacimiento=linea[inicio:],
    )


class ListaDobleCircular(Generic[T]):
    """An ordered collection that is walked from its head round to its tail."""

    def __init__(self) -> None:
        self._datos: list[T] = []

    def __iter__(self) -> Iterator[T]:
        return iter(self._datos)

    def __len__(self) -> int:
        return len(self._datos)

    def insertar(self, dato: T) -> None:
        """Add ``dato`` at the tail."""
        self._datos.append(dato)

    def cargar_desde_archivo_registro(self, ruta_archivo: _Ruta) -> None:
        """Append one record per line: ``placa,celda,ingreso,salida``."""
        for linea in leer_lineas(ruta_archivo):
            registro = Registro.vacio()
            registro.placa, resto = _recortar(linea)
            celda, resto = _recortar(resto)
            registro.celda = _a_entero(celda)
            registro.ingreso, resto = _recortar(resto)
            registro.salida, _ = _recortar(resto)
            self.insertar(registro)

    def cargar_desde_archivo_persona(self, ruta_archivo: _Ruta) -> None:
        """Append one person per line, in the layout of ``Persona.to_line``."""
        for linea in leer_lineas(ruta_archivo):
            self.insertar(_leer_persona(linea))

    def cargar_desde_archivo_auto(self, ruta_archivo: _Ruta) -> None:
        """Append one vehicle per line: ``placa,tipo,color`` then the driver.

        A plate in the wrong format is reported and left as ``UNKNOWN``.
        """
        for linea in leer_lineas(ruta_archivo):
            vehiculo = Vehiculo()
            placa, resto = _recortar(linea)
            if validar_placa(placa):
                vehiculo.placa = placa
            else:
                print("Placa no valida. Intente nuevamente.")
            vehiculo.tipo, resto = _recortar(resto)
            vehiculo.color, _, conductor = resto.partition(",")
            vehiculo.conductor = _leer_persona(conductor if _ else resto)
            self.insertar(vehiculo)

    def buscar_por_placa(self, placa: str) -> T | None:
        """Return the first item whose plate is ``placa``, or ``None``."""
        return next((dato for dato in self._datos if dato.placa == placa), None)

    def mostrar_por_rango_fechas(self, fecha_inicio: str, fecha_fin: str) -> list[T]:
        """Print and return the records whose entry time lies in the range.

        Times are compared as text, both ends included.
        """
        encontrados = [
            dato for dato in self._datos if fecha_inicio <= dato.ingreso <= fecha_fin
        ]
        for dato in encontrados:
            print(dato.to_string())
        return encontrados

    def mostrar_por_placa(self, placa: str) -> list[T]:
        """Print and return every record for ``placa``."""
        encontrados = [dato for dato in self._datos if dato.placa == placa]
        for dato in encontrados:
            print(dato.to_string())
        return encontrados