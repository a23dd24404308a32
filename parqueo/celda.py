"""A single parking space."""

from __future__ import annotations

from dataclasses import dataclass

from parqueo.vehiculo import Vehiculo


@dataclass
class Celda:
    """A numbered space that may hold one vehicle."""

    numero: int
    ocupada: bool = False
    vehiculo: Vehiculo | None = None

    def estacionar(self, vehiculo: Vehiculo) -> None:
        """Put ``vehiculo`` in this space and mark it occupied."""
        self.vehiculo = vehiculo
        self.ocupada = True

    def liberar(self) -> Vehiculo | None:
        """Empty the space and return the vehicle that was in it, if any."""
        vehiculo, self.vehiculo = self.vehiculo, None
        self.ocupada = False
        return vehiculo