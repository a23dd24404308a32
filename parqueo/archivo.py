"""Plain text data files: reading lines and appending records."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from os import PathLike
from typing import TextIO

_Ruta = str | PathLike


def leer_lineas(filename: _Ruta) -> Iterator[str]:
    """Yield the lines of ``filename`` without their line endings."""
    with open(filename, encoding="utf-8") as archivo:
        for linea in archivo:
            yield linea.rstrip("\r\n")


def mostrar_archivo(filename: _Ruta, out: TextIO | None = None) -> None:
    """Write every line of ``filename`` to ``out`` (standard output by default)."""
    destino = sys.stdout if out is None else out
    for linea in leer_lineas(filename):
        destino.write(linea + "\n")


def guardar_datos_en_archivo(filename: _Ruta, data: str) -> None:
    """Append ``data`` followed by a newline to ``filename``."""
    with open(filename, "a", encoding="utf-8") as archivo:
        archivo.write(data + "\n")