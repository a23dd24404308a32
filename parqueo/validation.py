"""Checks for identifiers, e-mail addresses and phone numbers, plus keyed input.

The ``ingresar_*`` readers take one key at a time. They echo only the keys they
accept and handle backspace, so the user cannot type an invalid value.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable
from typing import TextIO

ENTER = "\r"
_BORRAR = frozenset({"\b", "\x7f"})
_BORRADO_EN_PANTALLA = "\b \b"
_ESPACIOS = frozenset(" \t\n\v\f")
_DIGITOS = frozenset("0123456789")
_FLECHAS = {"A": "H", "B": "P", "C": "M", "D": "K"}

_PATRON_CORREO = re.compile(r"(\w+)(\.\w+)*@(\w+\.)+\w{2,}", re.ASCII)
_PATRON_CELULAR = re.compile(r"0\d{9}", re.ASCII)

LectorTecla = Callable[[], str]


def _getch_posix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    if not os.isatty(fd):
        return sys.stdin.read(1)
    anterior = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        tecla = sys.stdin.read(1)
        if tecla == "\x1b":
            siguiente = sys.stdin.read(1)
            if siguiente != "[":
                return tecla
            return _FLECHAS.get(sys.stdin.read(1), tecla)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, anterior)
    if tecla == "\x03":
        raise KeyboardInterrupt
    return tecla


def getch() -> str:
    """Read one key from the terminal without waiting for Enter.

    Arrow keys come back as the same codes the Windows console gives
    (``"H"`` for up, ``"P"`` for down). An empty string means end of input.
    """
    if sys.platform == "win32":
        import msvcrt

        tecla = msvcrt.getwch()
        if tecla == "\x03":
            raise KeyboardInterrupt
        return tecla
    return _getch_posix()


def _siguiente(read_key: LectorTecla) -> str:
    tecla = read_key()
    if not tecla:
        raise EOFError("No hay mas entrada.")
    return tecla


def _es_letra(tecla: str) -> bool:
    return tecla.isascii() and tecla.isalpha()


def _leer_filtrado(
    msj: str,
    aceptar: Callable[[str, str], bool],
    read_key: LectorTecla | None,
    out: TextIO | None,
) -> str:
    """Collect accepted keys until Enter; ``aceptar`` sees the key and the text so far."""
    lector = getch if read_key is None else read_key
    destino = sys.stdout if out is None else out
    destino.write(msj)
    destino.flush()
    texto = ""
    while (tecla := _siguiente(lector)) != ENTER:
        if aceptar(tecla, texto):
            destino.write(tecla)
            texto += tecla
        elif tecla in _BORRAR and texto:
            destino.write(_BORRADO_EN_PANTALLA)
            texto = texto[:-1]
        destino.flush()
    return texto


def _a_float(texto: str) -> float:
    return 0.0 if texto in ("", ".") else float(texto)


def ingresar_char(
    msj: str, read_key: LectorTecla | None = None, out: TextIO | None = None
) -> str:
    """Prompt with ``msj`` and return the first letter typed."""
    lector = getch if read_key is None else read_key
    destino = sys.stdout if out is None else out
    destino.write(msj)
    destino.flush()
    while True:
        tecla = _siguiente(lector)
        if _es_letra(tecla):
            destino.write(tecla)
            destino.flush()
            return tecla
        if tecla in _BORRAR:
            destino.write(_BORRADO_EN_PANTALLA)
            destino.flush()


def ingresar_int(
    msj: str, read_key: LectorTecla | None = None, out: TextIO | None = None
) -> int:
    """Prompt with ``msj`` and read digits up to Enter; nothing typed gives 0."""
    texto = _leer_filtrado(msj, lambda tecla, _: tecla in _DIGITOS, read_key, out)
    return int(texto) if texto else 0


def ingresar_float(
    msj: str, read_key: LectorTecla | None = None, out: TextIO | None = None
) -> float:
    """Prompt with ``msj`` and read a decimal number with at most one point.

    Erasing the point lets another one be typed.
    """

    def aceptar(tecla: str, texto: str) -> bool:
        return tecla in _DIGITOS or (tecla == "." and "." not in texto)

    return _a_float(_leer_filtrado(msj, aceptar, read_key, out))


def ingresar_double(
    msj: str, read_key: LectorTecla | None = None, out: TextIO | None = None
) -> float:
    """Prompt with ``msj`` and read a decimal number.

    Only the first point ever typed is accepted, even if it is erased later.
    """
    punto_usado = False

    def aceptar(tecla: str, _texto: str) -> bool:
        nonlocal punto_usado
        if tecla in _DIGITOS:
            return True
        if tecla == "." and not punto_usado:
            punto_usado = True
            return True
        return False

    return _a_float(_leer_filtrado(msj, aceptar, read_key, out))


def ingresar_string(
    msj: str, read_key: LectorTecla | None = None, out: TextIO | None = None
) -> str:
    """Prompt with ``msj`` and read letters only, up to Enter."""
    return _leer_filtrado(msj, lambda tecla, _: _es_letra(tecla), read_key, out)


def ingresar_string_con_espacios(
    msj: str, read_key: LectorTecla | None = None, out: TextIO | None = None
) -> str:
    """Prompt with ``msj`` and read letters and white space, up to Enter."""
    return _leer_filtrado(
        msj,
        lambda tecla, _: _es_letra(tecla) or tecla in _ESPACIOS,
        read_key,
        out,
    )


def ingresar_telefono(
    read_key: LectorTecla | None = None, out: TextIO | None = None
) -> str:
    """Read exactly ten digits and return them; the number must start with 0."""
    lector = getch if read_key is None else read_key
    destino = sys.stdout if out is None else out
    telefono = ""
    while len(telefono) < 10:
        tecla = _siguiente(lector)
        if tecla in _DIGITOS:
            destino.write(tecla)
            telefono += tecla
        elif tecla in _BORRAR and telefono:
            destino.write(_BORRADO_EN_PANTALLA)
            telefono = telefono[:-1]
        destino.flush()
    if not telefono.startswith("0"):
        raise ValueError("Numero no valido")
    destino.write("\n")
    return telefono


def validate_id(id_str: str) -> str:
    """Check a national id: ten digits once surrounding spaces are removed.

    Returns the id without the spaces; raises ``ValueError`` otherwise.
    """
    cedula = id_str.strip(" ")
    if not cedula:
        raise ValueError("Cédula Invalida: no se proporcionó una cedula válida")
    if len(cedula) != 10:
        raise ValueError("Cédula Inválida: debe tener exactamente 10 caracteres")
    if not all(caracter in _DIGITOS for caracter in cedula):
        raise ValueError("Cédula Inválida: solo se permiten dígitos")
    return cedula


def validate_email(email: str) -> str:
    """Return ``email`` if it looks like an e-mail address, else raise ``ValueError``."""
    if _PATRON_CORREO.fullmatch(email) is None:
        raise ValueError("Correo no valido")
    return email


def validate_cell_phone(cell_phone: str | int) -> str:
    """Check a mobile number: ten digits starting with 0.

    An integer is first padded with leading zeros to ten characters. Returns
    the number as text; raises ``ValueError`` when it is not valid.
    """
    if isinstance(cell_phone, int):
        cell_phone = str(cell_phone).rjust(10, "0")
    if len(cell_phone) != 10 or not cell_phone.startswith("0"):
        raise ValueError("Numero no valido")
    if _PATRON_CELULAR.fullmatch(cell_phone) is None:
        raise ValueError("Numero no valido")
    return cell_phone