"""Interactive parking-lot manager: entries, exits, history and lookups."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import TextIO

from parqueo.archivo import guardar_datos_en_archivo
from parqueo.lista import ListaDobleCircular
from parqueo.menu import Menu
from parqueo.parqueadero import Parqueadero
from parqueo.persona import Persona, calcular_edad
from parqueo.registro import Registro, marca_de_tiempo
from parqueo.validation import (
    ENTER,
    getch,
    ingresar_int,
    ingresar_string_con_espacios,
    validate_cell_phone,
    validate_email,
)
from parqueo.vehiculo import Vehiculo, validar_placa

LectorTecla = Callable[[], str]
LectorLinea = Callable[[], str]

_TIPOS = ("Auto", "Moto", "Vehiculo pesado")
_MESES_DE_30 = frozenset({4, 6, 9, 11})
_CELDAS = 10
_SALIR = 5


def normalizar_placa(placa: str) -> str:
    """Upper-case ``placa`` and drop its hyphens."""
    return placa.upper().replace("-", "")


def dias_del_mes(anio: int, mes: int) -> int:
    """Return how many days month ``mes`` of year ``anio`` has."""
    if not 1 <= mes <= 12:
        raise ValueError(f"Mes no valido: {mes}")
    if mes == 2:
        bisiesto = (anio % 4 == 0 and anio % 100 != 0) or anio % 400 == 0
        return 29 if bisiesto else 28
    return 30 if mes in _MESES_DE_30 else 31


def _leer_linea_stdin() -> str:
    linea = sys.stdin.readline()
    if not linea:
        raise EOFError("No hay mas entrada.")
    return linea.rstrip("\r\n")


def _lector_de_teclas() -> LectorTecla:
    if sys.stdin.isatty():
        return getch

    def leer() -> str:
        tecla = sys.stdin.read(1)
        return ENTER if tecla == "\n" else tecla

    return leer


def _token(read_line: LectorLinea) -> str:
    """Return the next whitespace-separated word, skipping blank lines."""
    while True:
        palabras = read_line().split()
        if palabras:
            return palabras[0]


def _preguntar(mensaje: str, read_line: LectorLinea, out: TextIO) -> str:
    out.write(mensaje)
    out.flush()
    return _token(read_line)


def _leer_en_rango(
    mensaje: str,
    minimo: int,
    maximo: int,
    error: str,
    read_key: LectorTecla | None,
    out: TextIO,
) -> int:
    while True:
        valor = ingresar_int(mensaje, read_key, out)
        if minimo <= valor <= maximo:
            return valor
        out.write(error + "\n")


def registrar_por_primera_vez(
    lista_autos: ListaDobleCircular,
    read_key: LectorTecla | None = None,
    read_line: LectorLinea | None = None,
    out: TextIO | None = None,
    hoy: date | None = None,
) -> Vehiculo:
    """Ask for a new vehicle and its owner and return the vehicle.

    Plates already in ``lista_autos`` are refused.
    """
    lector_linea = _leer_linea_stdin if read_line is None else read_line
    destino = sys.stdout if out is None else out
    hoy = date.today() if hoy is None else hoy

    menu = Menu("Seleccione una opcion")
    for tipo in _TIPOS:
        menu.add_option(tipo)
    tipo = _TIPOS[menu.display_menu(read_key, destino)]
    destino.write(f"Tipo de vehiculo seleccionado: {tipo}\n")

    while True:
        placa = normalizar_placa(_preguntar("Ingrese una placa: ", lector_linea, destino))
        if not validar_placa(placa):
            destino.write("!!!!!!ERROR!!!!!! PLACA INCORRECTA!!!!!!!!\n")
        elif lista_autos.buscar_por_placa(placa) is not None:
            destino.write("!!!!!!ERROR!!!!!! LA PLACA YA ESTA REGISTRADA!!!!!!!!\n")
        else:
            break

    color = ingresar_string_con_espacios("Ingrese el color de vehiculo: ", read_key, destino)
    destino.write("\n\t\tDatos del propietario:\t")
    nombre = ingresar_string_con_espacios("\nNombre y Apellido: ", read_key, destino)
    cedula = str(ingresar_int("\nCedula: ", read_key, destino))

    while True:
        correo = _preguntar("\nCorreo electronico: ", lector_linea, destino)
        try:
            validate_email(correo)
            break
        except ValueError as error:
            destino.write(f"{error}\n")

    while True:
        telefono = _preguntar("Numero de telefono: ", lector_linea, destino)
        try:
            validate_cell_phone(telefono)
            break
        except ValueError as error:
            destino.write(f"{error}\n")

    direccion = _preguntar("Direccion: ", lector_linea, destino)

    destino.write("Ingrese la fecha de nacimiento: ")
    anio = _leer_en_rango(
        "\nAnio: ", hoy.year - 200, hoy.year, "Anio invalido.", read_key, destino
    )
    mes = _leer_en_rango("\nMes: ", 1, 12, "Mes invalido.", read_key, destino)
    dia = _leer_en_rango(
        "\nDia: ", 1, dias_del_mes(anio, mes), "Dia invalido", read_key, destino
    )

    fecha_nacimiento = f"{anio}-{mes}-{dia}"
    persona = Persona(
        nombre=nombre,
        cedula=cedula,
        correo=correo,
        direccion=direccion,
        edad=calcular_edad(fecha_nacimiento, hoy),
        telefono=telefono,
        fecha_nacimiento=fecha_nacimiento,
    )
    vehiculo = Vehiculo(placa, persona, tipo, color)
    destino.write("\nAuto registrado correctamente.\n")
    return vehiculo


class _Rutas:
    def __init__(self, base: Path) -> None:
        self.base = base
        self.autos = base / "Autos.txt"
        self.clientes = base / "Clientes.txt"
        self.historial = base / "Historial.txt"

    def guardar(self, ruta: Path, data: str) -> None:
        self.base.mkdir(parents=True, exist_ok=True)
        guardar_datos_en_archivo(ruta, data)


def _cargar(cargar: Callable[[Path], None], ruta: Path, out: TextIO) -> bool:
    try:
        cargar(ruta)
    except FileNotFoundError:
        out.write(f"No se pudo abrir el archivo: {ruta}\n")
        return False
    except ValueError as error:
        out.write(f"Datos no validos en {ruta}: {error}\n")
        return False
    return True


def _menu(titulo: str, opciones: tuple[str, ...]) -> Menu:
    menu = Menu(titulo)
    for opcion in opciones:
        menu.add_option(opcion)
    return menu


def _ingreso_registrado(
    rutas: _Rutas, parqueadero: Parqueadero, read_line: LectorLinea, out: TextIO
) -> None:
    placa = _preguntar("Ingrese su placa registrada: ", read_line, out)
    if not validar_placa(placa):
        out.write("Formato no valido. Debe ser AAA-#### o AAA####.\n")
        return
    autos: ListaDobleCircular[Vehiculo] = ListaDobleCircular()
    if not _cargar(autos.cargar_desde_archivo_auto, rutas.autos, out):
        return
    if autos.buscar_por_placa(placa) is None:
        out.write("Placa no registrada. Por favor registre su auto por primera vez.\n")
        return
    out.write(f"Placa encontrada: {placa}\n")
    fecha_ingreso = marca_de_tiempo()
    Registro(placa, 1, fecha_ingreso, "")
    rutas.guardar(rutas.historial, f"{placa},{fecha_ingreso}")
    out.write(f"Ingreso registrado para el vehiculo con placa: {placa}\n")
    parqueadero.marcar_casilla_ocupada(0)


def _primera_vez(
    rutas: _Rutas, read_key: LectorTecla, read_line: LectorLinea, out: TextIO
) -> None:
    autos: ListaDobleCircular[Vehiculo] = ListaDobleCircular()
    try:
        autos.cargar_desde_archivo_auto(rutas.autos)
    except FileNotFoundError:
        pass
    nuevo = registrar_por_primera_vez(autos, read_key, read_line, out)
    rutas.guardar(rutas.autos, nuevo.to_line())
    rutas.guardar(rutas.clientes, nuevo.conductor.to_line())
    out.write("Auto registrado exitosamente.\n")


def _registrar_ingreso(
    rutas: _Rutas,
    parqueadero: Parqueadero,
    read_key: LectorTecla,
    read_line: LectorLinea,
    out: TextIO,
) -> None:
    menu = _menu(
        "Seleccione el tipo de ingreso:",
        ("Ya estoy registrado", "Primera vez", "Regresar"),
    )
    opcion = menu.display_menu(read_key, out)
    if opcion == 0:
        _ingreso_registrado(rutas, parqueadero, read_line, out)
    elif opcion == 1:
        _primera_vez(rutas, read_key, read_line, out)
    else:
        out.write("Volviendo al menu principal...\n")


def _registrar_salida(
    rutas: _Rutas, parqueadero: Parqueadero, read_line: LectorLinea, out: TextIO
) -> None:
    placa = _preguntar(
        "Registrar salida seleccionado.\nIngrese la placa del vehiculo: ", read_line, out
    )
    registros: ListaDobleCircular[Registro] = ListaDobleCircular()
    if not _cargar(registros.cargar_desde_archivo_registro, rutas.historial, out):
        return
    registro = registros.buscar_por_placa(placa)
    if registro is None:
        out.write("No se encontro un registro asociado a la placa ingresada.\n")
    elif registro.salida:
        out.write("El vehiculo ya tiene una salida registrada.\n")
    else:
        fecha_salida = marca_de_tiempo()
        registro.salida = fecha_salida
        rutas.guardar(rutas.historial, f"{placa},SALIDA,{fecha_salida}")
        out.write("Salida registrada exitosamente.\n")
        parqueadero.marcar_casilla_libre(0)


def _ver_historial(
    rutas: _Rutas, read_key: LectorTecla, read_line: LectorLinea, out: TextIO
) -> None:
    menu = _menu(
        "Seleccione una opcion:", ("Por rango de fechas", "Por auto", "Regresar")
    )
    opcion = menu.display_menu(read_key, out)
    if opcion == 0:
        inicio = _preguntar("Ingrese fecha de inicio (YYYY-MM-DD): ", read_line, out)
        fin = _preguntar("Ingrese fecha de fin (YYYY-MM-DD): ", read_line, out)
        registros: ListaDobleCircular[Registro] = ListaDobleCircular()
        if _cargar(registros.cargar_desde_archivo_registro, rutas.historial, out):
            registros.mostrar_por_rango_fechas(inicio, fin)
    elif opcion == 1:
        placa = _preguntar("Ingrese la placa del vehiculo: ", read_line, out)
        registros = ListaDobleCircular()
        if _cargar(registros.cargar_desde_archivo_registro, rutas.historial, out):
            registros.mostrar_por_placa(placa)
    else:
        out.write("Volviendo al menu principal...\n")


def _buscar_auto(rutas: _Rutas, read_line: LectorLinea, out: TextIO) -> None:
    placa = _preguntar("Ingrese la placa del vehiculo: ", read_line, out)
    autos: ListaDobleCircular[Vehiculo] = ListaDobleCircular()
    if not _cargar(autos.cargar_desde_archivo_auto, rutas.autos, out):
        return
    if autos.buscar_por_placa(placa) is not None:
        out.write(f"El auto con placa {placa} esta en el parqueadero.\n")
    else:
        out.write("El auto no esta registrado en el parqueadero.\n")


def _ejecutar(
    rutas: _Rutas, read_key: LectorTecla, read_line: LectorLinea, out: TextIO
) -> None:
    menu = _menu(
        "\t\t  Sistema de gestion de parqueadero ",
        (
            "Registrar ingreso",
            "Registrar salida",
            "Ver historial",
            "Buscar auto en el parqueadero",
            "Ver parqueadero",
            "Salir",
        ),
    )
    parqueadero = Parqueadero(_CELDAS)
    while True:
        opcion = menu.display_menu(read_key, out)
        if opcion == 0:
            _registrar_ingreso(rutas, parqueadero, read_key, read_line, out)
        elif opcion == 1:
            _registrar_salida(rutas, parqueadero, read_line, out)
        elif opcion == 2:
            _ver_historial(rutas, read_key, read_line, out)
        elif opcion == 3:
            _buscar_auto(rutas, read_line, out)
        elif opcion == 4:
            out.write("Estado actual del parqueadero:\n")
            parqueadero.mostrar_estado(out)
        elif opcion == _SALIR:
            out.write("Saliendo del sistema...\n")
            return
        out.write("\nPresiona Enter para continuar...")
        out.flush()
        read_line()


def main(argv: list[str] | None = None) -> int:
    """Run the parking-lot manager; data files live in ``<directorio>/output``."""
    parser = argparse.ArgumentParser(
        prog="parqueo", description="Sistema de gestion de parqueadero."
    )
    parser.add_argument(
        "--directorio",
        type=Path,
        default=None,
        help="directorio de trabajo (por defecto el actual)",
    )
    args = parser.parse_args(argv)
    base = (Path.cwd() if args.directorio is None else args.directorio) / "output"
    out = sys.stdout
    try:
        _ejecutar(_Rutas(base), _lector_de_teclas(), _leer_linea_stdin, out)
    except EOFError:
        out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())