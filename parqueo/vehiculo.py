"""Vehicles and the plate format they must follow."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from parqueo.persona import Persona

_PATRON_PLACA = re.compile(r"[A-Z]{3}-?[0-9]{4}")


def validar_placa(placa: str) -> bool:
    """Tell whether ``placa`` is a plate of the form ``AAA-####`` or ``AAA####``."""
    return _PATRON_PLACA.fullmatch(placa) is not None


def _conductor_predeterminado() -> Persona:
    return Persona.nuevo(
        "Conductor Predeterminado",
        "1234567890",
        "conductor@example.com",
        "s",
        "0000000000",
        "2004-02-02",
    )


@dataclass
class Vehiculo:
    """A vehicle with its plate, driver, kind and colour."""

    placa: str = "UNKNOWN"
    conductor: Persona = field(default_factory=_conductor_predeterminado)
    tipo: str = "UNKNOWN"
    color: str = "UNKNOWN"

    def __post_init__(self) -> None:
        if not self.placa:
            raise ValueError("La placa no puede estar vacia.")
        if not self.tipo:
            raise ValueError("El tipo no puede estar vacio.")
        if not self.color:
            raise ValueError("El color no puede estar vacio.")

    def to_line(self) -> str:
        """Return the comma-separated record stored in the vehicles file."""
        return ",".join((self.placa, self.conductor.to_line(), self.tipo, self.color))