import io

import pytest

from parqueo.menu import Menu


def _teclas(texto):
    it = iter(texto)
    return lambda: next(it, "")


def _menu():
    menu = Menu()
    menu.add_title("Seleccione una opcion")
    menu.add_option("Auto")
    menu.add_option("Moto")
    menu.add_option("Vehiculo pesado")
    return menu


def test_render_marks_selected_option():
    texto = _menu().render()
    assert texto == "Seleccione una opcion\n\n==> Auto \n  Moto\n  Vehiculo pesado\n"


def test_render_without_title_starts_with_blank_line():
    menu = Menu()
    menu.add_option("Salir")
    assert menu.render().startswith("\n==> Salir")


def test_enter_returns_first_option_by_default():
    menu = _menu()
    assert menu.display_menu(_teclas("\r"), io.StringIO()) == 0
    assert menu.selected_option == 0


def test_down_moves_selection():
    menu = _menu()
    assert menu.display_menu(_teclas("PP\r"), io.StringIO()) == 2
    assert menu.selected_option == 2


def test_up_from_first_wraps_to_last():
    menu = _menu()
    assert menu.display_menu(_teclas("H\r"), io.StringIO()) == len(menu.options) - 1


def test_down_from_last_wraps_to_first():
    menu = _menu()
    assert menu.display_menu(_teclas("PPP\r"), io.StringIO()) == 0


def test_other_keys_are_ignored():
    menu = _menu()
    assert menu.display_menu(_teclas("x\xe0P\r"), io.StringIO()) == 1


def test_selection_is_kept_between_displays():
    menu = _menu()
    menu.display_menu(_teclas("P\r"), io.StringIO())
    assert menu.display_menu(_teclas("P\r"), io.StringIO()) == 2


def test_output_shows_each_step():
    menu = _menu()
    out = io.StringIO()
    menu.display_menu(_teclas("P\r"), out)
    texto = out.getvalue()
    assert texto.count("Seleccione una opcion") == 2
    assert texto.endswith(menu.render())
    assert "==> Moto " in texto


def test_empty_menu_raises():
    with pytest.raises(ValueError):
        Menu().display_menu(_teclas("\r"), io.StringIO())


def test_end_of_input_raises():
    with pytest.raises(EOFError):
        _menu().display_menu(_teclas("P"), io.StringIO())


def test_add_title_replaces_title():
    menu = Menu("Viejo")
    menu.add_option("A")
    menu.add_title("Nuevo")
    assert menu.render().startswith("Nuevo\n")