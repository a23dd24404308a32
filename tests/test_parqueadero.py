import io

import pytest

from parqueo.parqueadero import CAPACIDAD_TOTAL, Parqueadero


def test_default_capacity_all_free():
    parqueadero = Parqueadero()
    assert len(parqueadero) == CAPACIDAD_TOTAL
    assert parqueadero.consultar_disponibilidad() == CAPACIDAD_TOTAL


def test_empty_lot_render():
    assert Parqueadero(10).ver_parqueadero() == "[O] " * 10 + "\n"


def test_render_breaks_every_ten():
    texto = Parqueadero(25).ver_parqueadero()
    assert texto.count("\n") == 2
    assert texto.count("[O] ") == 25


def test_mark_occupied_changes_render_and_availability():
    parqueadero = Parqueadero(10)
    assert parqueadero.marcar_casilla_ocupada(0) is True
    assert parqueadero.ver_parqueadero().startswith("[X] [O] ")
    assert parqueadero.consultar_disponibilidad() == len(parqueadero) - 1


def test_mark_occupied_twice_is_noop():
    parqueadero = Parqueadero(10)
    parqueadero.marcar_casilla_ocupada(3)
    assert parqueadero.marcar_casilla_ocupada(3) is False
    assert parqueadero.consultar_disponibilidad() == len(parqueadero) - 1


@pytest.mark.parametrize("indice", [-1, 10, 299])
def test_out_of_range_is_ignored(indice):
    parqueadero = Parqueadero(10)
    assert parqueadero.marcar_casilla_ocupada(indice) is False
    assert parqueadero.marcar_casilla_libre(indice) is False
    assert parqueadero.consultar_disponibilidad() == len(parqueadero)


def test_mark_free_round_trip():
    parqueadero = Parqueadero(10)
    parqueadero.marcar_casilla_ocupada(5)
    assert parqueadero.marcar_casilla_libre(5) is True
    assert parqueadero.marcar_casilla_libre(5) is False
    assert parqueadero.consultar_disponibilidad() == len(parqueadero)


def test_buscar_auto_finds_default_vehicle():
    parqueadero = Parqueadero(10)
    assert parqueadero.buscar_auto("UNKNOWN") is None
    parqueadero.marcar_casilla_ocupada(7)
    assert parqueadero.buscar_auto("UNKNOWN") == 7
    assert parqueadero.celdas[7].placa == "UNKNOWN"


def test_history_starts_empty_and_is_a_copy():
    parqueadero = Parqueadero(10)
    historial = parqueadero.ver_historial()
    historial.append("x")
    assert parqueadero.ver_historial() == []


def test_mostrar_estado_writes_render():
    parqueadero = Parqueadero(12)
    parqueadero.marcar_casilla_ocupada(11)
    salida = io.StringIO()
    parqueadero.mostrar_estado(salida)
    assert salida.getvalue() == parqueadero.ver_parqueadero()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Parqueadero(-1)