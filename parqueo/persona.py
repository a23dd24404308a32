"""People who own or drive the vehicles using the parking lot."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

_FECHA = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")


def calcular_edad(fecha_nacimiento: str, hoy: date | None = None) -> int:
    """Return the age in whole years of someone born on ``fecha_nacimiento``.

    The date is read as ``year-month-day``; leading zeros are optional.
    ``hoy`` defaults to the current local date.
    """
    coincidencia = _FECHA.match(fecha_nacimiento)
    if coincidencia is None:
        raise ValueError(f"Fecha de nacimiento no valida: {fecha_nacimiento!r}")
    anio, mes, dia = (int(parte) for parte in coincidencia.groups())
    if hoy is None:
        hoy = date.today()
    edad = hoy.year - anio
    if (hoy.month, hoy.day) < (mes, dia):
        edad -= 1
    return edad


@dataclass
class Persona:
    """A registered person; ``fecha_nacimiento`` is written ``YYYY-MM-DD``."""

    nombre: str = "sdasda"
    cedula: str = "dasdasd"
    correo: str = "asd"
    direccion: str = "ads"
    edad: int = 2
    telefono: str = "3435345"
    fecha_nacimiento: str = "312313"

    @classmethod
    def nuevo(
        cls,
        nombre: str,
        cedula: str,
        correo: str,
        direccion: str,
        telefono: str,
        fecha_nacimiento: str,
    ) -> Persona:
        """Build a person whose age is worked out from the birth date."""
        return cls(
            nombre=nombre,
            cedula=cedula,
            correo=correo,
            direccion=direccion,
            edad=calcular_edad(fecha_nacimiento),
            telefono=telefono,
            fecha_nacimiento=fecha_nacimiento,
        )

    def to_line(self) -> str:
        """Return the comma-separated record stored in the data files."""
        return ",".join(
            (
                self.nombre,
                self.cedula,
                self.correo,
                self.direccion,
                str(self.edad),
                self.telefono,
                self.fecha_nacimiento,
            )
        )