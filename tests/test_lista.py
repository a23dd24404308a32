import pytest

from parqueo.lista import ListaDobleCircular
from parqueo.persona import Persona
from parqueo.registro import Registro


def _persona():
    return Persona(
        nombre="Ana Perez",
        cedula="1111111111",
        correo="ana@example.com",
        direccion="Centro",
        edad=30,
        telefono="0000000000",
        fecha_nacimiento="1994-03-04",
    )


def test_insertar_conserva_orden():
    lista = ListaDobleCircular()
    for valor in ("a", "b", "c"):
        lista.insertar(valor)
    assert list(lista) == ["a", "b", "c"]
    assert len(lista) == 3


def test_buscar_por_placa_devuelve_el_primero():
    lista = ListaDobleCircular()
    primero = Registro("AAA0000", 1, "2024-01-01 08:00:00")
    segundo = Registro("AAA0000", 2, "2024-01-02 08:00:00")
    lista.insertar(primero)
    lista.insertar(segundo)
    assert lista.buscar_por_placa("AAA0000") is primero
    assert lista.buscar_por_placa("ZZZ9999") is None


def test_buscar_en_lista_vacia():
    assert ListaDobleCircular().buscar_por_placa("AAA0000") is None


def test_cargar_registro(tmp_path):
    ruta = tmp_path / "Historial.txt"
    ruta.write_text(
        "AAA0000,4,2024-01-01 08:00:00,2024-01-01 09:00:00\n"
        "ZZZ9999,5,2024-01-02 08:00:00,\n",
        encoding="utf-8",
    )
    lista = ListaDobleCircular()
    lista.cargar_desde_archivo_registro(ruta)
    registros = list(lista)
    assert [r.placa for r in registros] == ["AAA0000", "ZZZ9999"]
    assert [r.celda for r in registros] == [4, 5]
    assert registros[0].salida == "2024-01-01 09:00:00"
    assert registros[1].salida == ""


def test_cargar_registro_placa_vacia_falla(tmp_path):
    ruta = tmp_path / "Historial.txt"
    ruta.write_text(",1,2024-01-01 08:00:00,\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ListaDobleCircular().cargar_desde_archivo_registro(ruta)


def test_cargar_archivo_inexistente(tmp_path):
    with pytest.raises(FileNotFoundError):
        ListaDobleCircular().cargar_desde_archivo_registro(tmp_path / "no.txt")


def test_cargar_persona_ida_y_vuelta(tmp_path):
    persona = _persona()
    ruta = tmp_path / "Clientes.txt"
    ruta.write_text(persona.to_line() + "\n", encoding="utf-8")
    lista = ListaDobleCircular()
    lista.cargar_desde_archivo_persona(ruta)
    assert list(lista) == [persona]


def test_cargar_persona_edad_no_numerica_falla(tmp_path):
    ruta = tmp_path / "Clientes.txt"
    ruta.write_text("a,b,c,d,x,f,g\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ListaDobleCircular().cargar_desde_archivo_persona(ruta)


def test_cargar_auto(tmp_path):
    persona = _persona()
    ruta = tmp_path / "Autos.txt"
    ruta.write_text(f"AAA-0000,Moto,Rojo,{persona.to_line()}\n", encoding="utf-8")
    lista = ListaDobleCircular()
    lista.cargar_desde_archivo_auto(ruta)
    (vehiculo,) = list(lista)
    assert vehiculo.placa == "AAA-0000"
    assert vehiculo.tipo == "Moto"
    assert vehiculo.color == "Rojo"
    assert vehiculo.conductor == persona
    assert lista.buscar_por_placa("AAA-0000") is vehiculo


def test_cargar_auto_placa_invalida(tmp_path, capsys):
    ruta = tmp_path / "Autos.txt"
    ruta.write_text(f"malo,Moto,Rojo,{_persona().to_line()}\n", encoding="utf-8")
    lista = ListaDobleCircular()
    lista.cargar_desde_archivo_auto(ruta)
    (vehiculo,) = list(lista)
    assert vehiculo.placa == "UNKNOWN"
    assert "Placa no valida" in capsys.readouterr().out


def test_mostrar_por_rango_fechas(capsys):
    lista = ListaDobleCircular()
    dentro = Registro("AAA0000", 1, "2024-01-05")
    fuera = Registro("ZZZ9999", 2, "2024-02-05")
    lista.insertar(dentro)
    lista.insertar(fuera)
    encontrados = lista.mostrar_por_rango_fechas("2024-01-01", "2024-01-31")
    assert encontrados == [dentro]
    assert capsys.readouterr().out == dentro.to_string() + "\n"


def test_mostrar_por_rango_fechas_incluye_extremos():
    lista = ListaDobleCircular()
    registro = Registro("AAA0000", 1, "2024-01-01")
    lista.insertar(registro)
    assert lista.mostrar_por_rango_fechas("2024-01-01", "2024-01-01") == [registro]


def test_mostrar_por_placa(capsys):
    lista = ListaDobleCircular()
    uno = Registro("AAA0000", 1, "2024-01-01 08:00:00")
    otro = Registro("ZZZ9999", 2, "2024-01-01 08:00:00")
    dos = Registro("AAA0000", 3, "2024-01-02 08:00:00")
    for registro in (uno, otro, dos):
        lista.insertar(registro)
    assert lista.mostrar_por_placa("AAA0000") == [uno, dos]
    salida = capsys.readouterr().out
    assert salida == uno.to_string() + "\n" + dos.to_string() + "\n"